"""
Credential store - where login looks users up.
Only the lookup interface is fixed; the static store reads bcrypt hashes from settings.
"""

from dataclasses import dataclass
from typing import Protocol

from gateway.config import get_settings


@dataclass(frozen=True)
class CredentialRecord:
    username: str
    password_hash: str


class CredentialStore(Protocol):
    def lookup(self, username: str) -> CredentialRecord | None: ...


class StaticCredentialStore:
    """In-memory store built from a {username: bcrypt_hash} mapping."""

    def __init__(self, users: dict[str, str]):
        self._records = {name: CredentialRecord(name, hashed) for name, hashed in users.items()}

    def lookup(self, username: str) -> CredentialRecord | None:
        return self._records.get(username)


def get_credential_store() -> CredentialStore:
    """FastAPI dependency; override in tests or swap for a real store."""
    return StaticCredentialStore(get_settings().auth_users)
