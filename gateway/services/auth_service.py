"""
Auth service - exchanges a username/password pair for a signed 72h token.
Stateless: no lockout, no rate limiting, no refresh.
"""

import logging

from gateway.core.credentials import CredentialStore
from gateway.core.security import create_access_token, dummy_verify, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: CredentialStore):
        self.store = store

    def login(self, username: str | None, password: str | None) -> str | None:
        """Return a JWT for valid credentials, None otherwise (caller maps None to 401)."""
        if not username or not password:
            return None
        record = self.store.lookup(username)
        if record is None:
            dummy_verify()
            logger.info("login failed: unknown user")
            return None
        if not verify_password(password, record.password_hash):
            logger.info("login failed for %s", username)
            return None
        return create_access_token(record.username)
