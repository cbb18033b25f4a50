"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus, CORS), upstream client lifecycle.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from gateway.api.responses import upstream_error_handler
from gateway.api.v1.router import api_router
from gateway.config import get_settings
from gateway.core.exceptions import UpstreamError
from gateway.upstream.client import close_upstream_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: nothing to warm, the upstream client is created lazily. Shutdown: close its pool."""
    yield
    await close_upstream_client()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not settings.upstream_token:
        logger.warning("UPSTREAM_TOKEN is empty; upstream calls will be unauthenticated")

    app = FastAPI(
        title=settings.app_name,
        description="Simplified catalog API (products, brands, images) backed by an upstream e-commerce platform.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for the front-end (cookies allowed, so origins must be explicit)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(UpstreamError, upstream_error_handler)

    # Prometheus metrics at /metrics (upstream call counters live here)
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
