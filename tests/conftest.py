"""
Pytest fixtures - fake upstream, repositories, API client, auth.
Challenge: Isolated tests; the upstream catalog is never contacted.
"""

import os

# Must be set before gateway.config is imported (settings are cached)
os.environ.setdefault("UPSTREAM_API_URL", "https://upstream.test/stores/abc123/v3")
os.environ.setdefault("UPSTREAM_TOKEN", "test-upstream-token")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gateway.config import get_settings
from gateway.core.credentials import StaticCredentialStore, get_credential_store
from gateway.core.security import create_access_token, hash_password
from gateway.main import app
from gateway.repositories import BrandRepository, ProductRepository
from gateway.upstream.client import UpstreamClient, get_upstream_client
from tests.fakes import FakeUpstream


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest_asyncio.fixture
async def upstream_client(upstream: FakeUpstream) -> AsyncGenerator[UpstreamClient, None]:
    client = UpstreamClient(get_settings(), transport=httpx.MockTransport(upstream.handler))
    yield client
    await client.aclose()


@pytest.fixture
def products(upstream_client: UpstreamClient) -> ProductRepository:
    return ProductRepository(upstream_client)


@pytest.fixture
def brands(upstream_client: UpstreamClient) -> BrandRepository:
    return BrandRepository(upstream_client)


@pytest.fixture(scope="session")
def credential_store() -> StaticCredentialStore:
    # bcrypt is slow on purpose; hash once per session
    return StaticCredentialStore({"username": hash_password("password")})


@pytest_asyncio.fixture
async def client(upstream_client: UpstreamClient, credential_store: StaticCredentialStore):
    async def override_upstream():
        return upstream_client

    app.dependency_overrides[get_upstream_client] = override_upstream
    app.dependency_overrides[get_credential_store] = lambda: credential_store
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict:
    token = create_access_token("username")
    return {"Authorization": f"Bearer {token}"}
