"""Login request/response schemas - API contract."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Optional so blank/missing credentials reach the auth service and come back as 401
    username: str | None = None
    password: str | None = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
