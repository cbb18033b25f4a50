"""
Brand repository - catalog brands on the upstream API (create, list, get).
"""

from gateway.repositories.base_repository import BaseRepository
from gateway.schemas.brand import Brand, BrandCreate, BrandSummary
from gateway.schemas.common import Envelope
from gateway.schemas.result import OperationResult, fail, ok
from gateway.upstream.client import UpstreamClient

BRANDS_PATH = "/catalog/brands"


class BrandRepository(BaseRepository):
    """Brand-specific calls. Same classification rules as products, smaller surface."""

    def __init__(self, client: UpstreamClient):
        super().__init__(client)

    async def create_brand(self, brand: BrandCreate) -> OperationResult:
        if not brand.name or not brand.name.strip():
            return fail(400, "Brand name is required")
        res = await self.client.send("POST", BRANDS_PATH, json=brand.model_dump(exclude_none=True))
        return self.classify_create(res, Envelope[Brand], "Brand created successfully")

    async def list_brands(self, page: int | None = 1, limit: int | None = None) -> OperationResult:
        res = await self.client.send("GET", BRANDS_PATH, params=self.page_params(page, limit))
        if not res.is_success:
            return self.unexpected_list_response(res)
        return ok(self.parse(Envelope[list[Brand]], res), "Brands retrieved successfully")

    async def get_brand(self, brand_id: int) -> OperationResult:
        res = await self.client.send("GET", f"{BRANDS_PATH}/{brand_id}")
        if not res.is_success:
            return self.upstream_failure(404, res)
        content = self.parse(Envelope[Brand], res)
        if content.data is None:
            return fail(404, "Brand not found")
        return ok(BrandSummary(id=content.data.id, name=content.data.name), "Brand retrieved successfully")
