"""
Health checks - for load balancers, Kubernetes, and monitoring.
Readiness only checks configuration; the upstream itself is not pinged.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from gateway.config import get_settings

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready():
    """Readiness: is there an upstream token to call the catalog with?"""
    if not settings.upstream_token:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "upstream token is not configured"},
        )
    return {"status": "ready"}
