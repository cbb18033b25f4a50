"""
Upstream client tests - base URL, static auth header, failure kinds.
"""

import httpx
import pytest

from gateway.config import get_settings
from gateway.core.exceptions import (
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from gateway.upstream.client import UpstreamClient


def make_client(handler) -> UpstreamClient:
    return UpstreamClient(get_settings(), transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_requests_keep_base_path_and_auth_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["token"] = request.headers.get("x-auth-token")
        seen["accept"] = request.headers.get("accept")
        return httpx.Response(200, json={"data": []})

    client = make_client(handler)
    res = await client.send("GET", "/catalog/brands", params={"page": 1, "limit": 5})
    await client.aclose()

    assert res.status_code == 200
    assert seen["url"] == "https://upstream.test/stores/abc123/v3/catalog/brands?page=1&limit=5"
    assert seen["token"] == "test-upstream-token"
    assert seen["accept"] == "application/json"


@pytest.mark.asyncio
async def test_non_success_is_returned_not_raised():
    client = make_client(lambda request: httpx.Response(409, json={"title": "dup"}))
    res = await client.send("POST", "/catalog/products", json={})
    await client.aclose()
    assert res.is_success is False
    assert res.json() == {"title": "dup"}


@pytest.mark.asyncio
async def test_connection_failure_is_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)
    with pytest.raises(UpstreamUnavailableError) as exc_info:
        await client.send("GET", "/catalog/products")
    await client.aclose()
    assert exc_info.value.status_code == 502
    assert exc_info.value.path == "/catalog/products"


@pytest.mark.asyncio
async def test_timeout_is_its_own_kind():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    client = make_client(handler)
    with pytest.raises(UpstreamTimeoutError) as exc_info:
        await client.send("GET", "/catalog/products")
    await client.aclose()
    assert exc_info.value.status_code == 504


@pytest.mark.asyncio
async def test_malformed_body_raises_on_decode():
    client = make_client(lambda request: httpx.Response(200, content=b"{not json"))
    res = await client.send("GET", "/catalog/products/1")
    await client.aclose()
    with pytest.raises(UpstreamResponseError):
        res.json()


@pytest.mark.asyncio
async def test_empty_body_decodes_to_none():
    client = make_client(lambda request: httpx.Response(204))
    res = await client.send("DELETE", "/catalog/products/1")
    await client.aclose()
    assert res.json() is None
