"""
OperationResult -> HTTP response. The result's status_code becomes the status line.
"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from gateway.core.exceptions import UpstreamError
from gateway.schemas.result import ErrorDetail, OperationResult, fail


def result_response(result: OperationResult) -> Response:
    # 204 must not carry a body
    if result.status_code == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=result.status_code, content=result.to_body())


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Transport/protocol failures talking to upstream -> 502 (504 on timeout)."""
    result = fail(
        exc.status_code,
        exc.message,
        errors=ErrorDetail(status=exc.status_code, title=exc.message, instance=request.url.path),
    )
    return JSONResponse(status_code=exc.status_code, content=result.to_body())
