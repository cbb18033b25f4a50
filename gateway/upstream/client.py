"""
Upstream catalog API client (BigCommerce v3 style REST).
Challenge: One pooled connection, one static auth header, no exceptions for non-2xx.
Design: Single client instance, dependency injection for testability (MockTransport in tests).
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx
from prometheus_client import Counter

from gateway.config import Settings, get_settings
from gateway.core.exceptions import (
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

UPSTREAM_REQUESTS = Counter(
    "gateway_upstream_requests_total",
    "Calls issued to the upstream catalog API",
    ["method", "status"],
)


@dataclass
class UpstreamResponse:
    """Raw upstream answer: status, body bytes and headers."""

    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    reason_phrase: str = ""
    method: str = ""
    path: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode body. Empty body decodes to None; garbage raises UpstreamResponseError."""
        if not self.content:
            return None
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise UpstreamResponseError(
                f"Upstream returned a non-JSON body (status {self.status_code})",
                method=self.method,
                path=self.path,
            ) from e


class UpstreamClient:
    """Thin wrapper over httpx.AsyncClient bound to the upstream base URL."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = settings or get_settings()
        headers = {"Accept": "application/json"}
        if settings.upstream_token:
            headers[settings.upstream_auth_header] = settings.upstream_token
        # Trailing slash + relative paths keep the /stores/{hash}/v3 prefix of the base URL
        self._http = httpx.AsyncClient(
            base_url=settings.upstream_api_url.rstrip("/") + "/",
            headers=headers,
            timeout=httpx.Timeout(settings.upstream_timeout_seconds),
            transport=transport,
        )

    async def send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> UpstreamResponse:
        """Issue one request. Non-2xx is returned, transport failures are raised."""
        url = path.lstrip("/")
        logger.debug("upstream %s %s params=%s", method, path, params)
        try:
            res = await self._http.request(
                method, url, json=json, params=params, files=files, headers=headers
            )
        except httpx.TimeoutException as e:
            UPSTREAM_REQUESTS.labels(method=method, status="timeout").inc()
            logger.warning("upstream %s %s timed out: %s", method, path, e)
            raise UpstreamTimeoutError(
                "Upstream catalog API timed out", method=method, path=path
            ) from e
        except httpx.TransportError as e:
            UPSTREAM_REQUESTS.labels(method=method, status="error").inc()
            logger.warning("upstream %s %s failed: %s", method, path, e)
            raise UpstreamUnavailableError(
                "Upstream catalog API is unreachable", method=method, path=path
            ) from e
        UPSTREAM_REQUESTS.labels(method=method, status=str(res.status_code)).inc()
        if not res.is_success:
            logger.info("upstream %s %s -> %s", method, path, res.status_code)
        return UpstreamResponse(
            status_code=res.status_code,
            content=res.content,
            headers=dict(res.headers),
            reason_phrase=res.reason_phrase,
            method=method,
            path=path,
        )

    async def aclose(self) -> None:
        await self._http.aclose()


# Shared client (connection pool managed by httpx)
_client: UpstreamClient | None = None


async def get_upstream_client() -> UpstreamClient:
    """Get upstream client. Used as FastAPI dependency."""
    global _client
    if _client is None:
        _client = UpstreamClient()
    return _client


async def close_upstream_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
