"""
Configuration management using Pydantic Settings.
Challenge: Centralized config, env validation, type safety.
Design: Single source of truth for all environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Catalog Gateway"
    debug: bool = False
    log_level: str = "INFO"
    secret_key: str = "change-me-in-production"

    # Upstream catalog API (BigCommerce v3 style, e.g. https://api.bigcommerce.com/stores/{hash}/v3)
    upstream_api_url: str = "https://api.bigcommerce.com/stores/change-me/v3"
    upstream_token: str = ""
    upstream_auth_header: str = "X-Auth-Token"
    upstream_timeout_seconds: float = 30.0

    # JWT (72h tokens)
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 72 * 60
    jwt_issuer: Optional[str] = None
    jwt_audience: Optional[str] = None

    # Credential store: username -> bcrypt hash (see scripts/hash_password.py)
    # Env example: AUTH_USERS='{"admin": "$2b$12$..."}'
    auth_users: dict[str, str] = {}

    # Front-end origins allowed by CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Pagination (forwarded to upstream page/limit)
    default_page_size: int = 50
    max_page_size: int = 250


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request (performance)."""
    return Settings()
