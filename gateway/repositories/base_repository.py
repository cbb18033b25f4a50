"""
Base repository - shared plumbing for upstream catalog resources.
Challenge: Every resource classifies upstream statuses the same way; keep that in one place.
"""

import logging
from typing import Any

from pydantic import ValidationError

from gateway.config import get_settings
from gateway.core.exceptions import UpstreamResponseError
from gateway.schemas.result import ErrorDetail, OperationResult, fail, ok
from gateway.upstream.client import UpstreamClient, UpstreamResponse

logger = logging.getLogger(__name__)

PARTIAL_SUCCESS_MESSAGE = "The request was partially successful. Some operations may have failed."
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected upstream response"


class BaseRepository:
    """Holds the upstream client. Subclasses define resource-specific operations."""

    def __init__(self, client: UpstreamClient):
        self.client = client

    @staticmethod
    def page_params(page: int | None, limit: int | None) -> dict[str, int]:
        """Upstream page/limit query, clamped to the configured page size."""
        settings = get_settings()
        page = page if page and page > 0 else 1
        limit = limit if limit and limit > 0 else settings.default_page_size
        return {"page": page, "limit": min(limit, settings.max_page_size)}

    @staticmethod
    def parse(model: Any, res: UpstreamResponse) -> Any:
        """Validate a success body against model; bad shape is a malformed response."""
        try:
            return model.model_validate(res.json() or {})
        except ValidationError as e:
            raise UpstreamResponseError(
                f"Upstream body did not match the expected shape (status {res.status_code})",
                method=res.method,
                path=res.path,
            ) from e

    @staticmethod
    def error_detail(res: UpstreamResponse) -> ErrorDetail:
        """Upstream error body; synthesized from the status line when there is none."""
        try:
            body = res.json()
        except UpstreamResponseError:
            body = None
        fallback_title = res.reason_phrase or f"HTTP {res.status_code}"
        if isinstance(body, dict):
            try:
                detail = ErrorDetail.model_validate(body)
            except ValidationError:
                detail = ErrorDetail(status=res.status_code, errors=body)
            if not detail.title:
                detail.title = fallback_title
            return detail
        return ErrorDetail(status=res.status_code, title=fallback_title)

    def upstream_failure(self, status_code: int, res: UpstreamResponse) -> OperationResult:
        """Failure result whose message is the upstream error title."""
        detail = self.error_detail(res)
        return fail(status_code, detail.title or "", errors=detail)

    def classify_create(self, res: UpstreamResponse, model: Any, success_message: str) -> OperationResult:
        """POST outcome: 2xx ok, 207 partial (data kept), 409 conflict, anything else 422."""
        if res.status_code == 207:
            return fail(207, PARTIAL_SUCCESS_MESSAGE, data=self.parse(model, res))
        if res.is_success:
            return ok(self.parse(model, res), success_message)
        if res.status_code == 409:
            return self.upstream_failure(409, res)
        return self.upstream_failure(422, res)

    def unexpected_list_response(self, res: UpstreamResponse) -> OperationResult:
        # List endpoints are documented as 200-only; anything else still gets a typed result
        logger.warning("unexpected %s from list endpoint %s", res.status_code, res.path)
        detail = self.error_detail(res)
        return fail(502, UNEXPECTED_RESPONSE_MESSAGE, errors=detail)
