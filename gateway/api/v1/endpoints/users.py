"""
User endpoints - login (RESTful API).
Challenge: Secure auth, validation, clear status codes.
"""

from fastapi import APIRouter, HTTPException, Response, status

from gateway.config import get_settings
from gateway.core.dependencies import TOKEN_COOKIE, Auth
from gateway.schemas.user import LoginRequest, TokenResponse

router = APIRouter()
settings = get_settings()


@router.post("/login", response_model=TokenResponse)
async def login(auth: Auth, data: LoginRequest, response: Response):
    """Authenticate and return JWT. The token is also set as an HttpOnly cookie."""
    token = auth.login(data.username, data.password)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.jwt_expire_minutes * 60,
        httponly=True,
        secure=not settings.debug,
        samesite="lax",
    )
    return TokenResponse(access_token=token)
