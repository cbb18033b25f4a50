"""
Brand endpoints - create and list are public, single brand needs a token.
"""

from fastapi import APIRouter, Query

from gateway.api.responses import result_response
from gateway.config import get_settings
from gateway.core.dependencies import Brands, CurrentUser
from gateway.schemas.brand import BrandCreate

router = APIRouter()
settings = get_settings()


@router.post("")
async def create_brand(repo: Brands, data: BrandCreate):
    return result_response(await repo.create_brand(data))


@router.get("")
async def list_brands(
    repo: Brands,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """List brands. REST: GET /brands?page=1&limit=50."""
    return result_response(await repo.list_brands(page=page, limit=limit))


@router.get("/{brand_id}")
async def get_brand(repo: Brands, user: CurrentUser, brand_id: int):
    return result_response(await repo.get_brand(brand_id))
