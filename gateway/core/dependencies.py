"""
FastAPI dependencies - injection for the upstream client, repositories, auth (SOLID: Dependency Inversion).
Challenge: Reusable auth, consistent error responses.
"""

from typing import Annotated

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from gateway.core.credentials import CredentialStore, get_credential_store
from gateway.core.security import decode_access_token
from gateway.repositories import BrandRepository, ProductRepository
from gateway.services.auth_service import AuthService
from gateway.upstream.client import UpstreamClient, get_upstream_client

security = HTTPBearer(auto_error=False)

TOKEN_COOKIE = "JwtToken"

Upstream = Annotated[UpstreamClient, Depends(get_upstream_client)]


async def get_current_username(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    jwt_cookie: Annotated[str | None, Cookie(alias=TOKEN_COOKIE)] = None,
) -> str:
    """Resolve JWT (bearer header, else cookie) to a username. Raises 401 if missing or invalid."""
    token = credentials.credentials if credentials else jwt_cookie
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload["sub"]


def get_product_repository(client: Upstream) -> ProductRepository:
    return ProductRepository(client)


def get_brand_repository(client: Upstream) -> BrandRepository:
    return BrandRepository(client)


def get_auth_service(
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> AuthService:
    return AuthService(store)


CurrentUser = Annotated[str, Depends(get_current_username)]
Products = Annotated[ProductRepository, Depends(get_product_repository)]
Brands = Annotated[BrandRepository, Depends(get_brand_repository)]
Auth = Annotated[AuthService, Depends(get_auth_service)]
