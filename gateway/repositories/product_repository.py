"""
Product repository - catalog products and their images on the upstream API.
Challenge: Upstream has no PATCH and inconsistent status codes; callers only ever see OperationResult.
Design: Composite operations (update, delete, delete image) run as precondition pipelines.
"""

import logging
from typing import Any

from gateway.repositories.base_repository import (
    PARTIAL_SUCCESS_MESSAGE,
    UNEXPECTED_RESPONSE_MESSAGE,
    BaseRepository,
)
from gateway.repositories.pipeline import run_pipeline
from gateway.schemas.common import Envelope
from gateway.schemas.image import Image
from gateway.schemas.product import (
    INVENTORY_UNCHANGED,
    NewProduct,
    Product,
    ProductSummary,
    ProductUpdate,
)
from gateway.schemas.result import ErrorDetail, OperationResult, fail, ok
from gateway.services.uploads import validate_image_upload
from gateway.upstream.client import UpstreamClient

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/catalog/products"

REQUIRED_FIELDS_MESSAGE = (
    "Product name, type, brand, SKU, weight, price and inventory are required fields."
)
NO_CHANGES_MESSAGE = "No changes were provided to update the product"
NO_IMAGES_MESSAGE = "This product does not have any images"
GENERIC_FAILURE_MESSAGE = "Something went wrong"


def missing_required_fields(product: NewProduct) -> bool:
    if not all(v and v.strip() for v in (product.name, product.type, product.sku)):
        return True
    if not (product.brand_name and product.brand_name.strip()) and product.brand_id <= 0:
        return True
    return product.price <= 0 or product.weight <= 0 or product.inventory_level <= 0


def apply_update(
    current: ProductSummary, changes: ProductUpdate, product_id: int
) -> tuple[ProductSummary, bool]:
    """Overlay the non-sentinel fields of changes on current. Returns (merged, changed)."""
    updates: dict[str, Any] = {}
    for name in ("name", "type", "sku"):
        value = getattr(changes, name)
        if value and value.strip():
            updates[name] = value
    for name in ("weight", "price", "brand_id"):
        value = getattr(changes, name)
        if value:
            updates[name] = value
    if changes.inventory_level is not None and changes.inventory_level != INVENTORY_UNCHANGED:
        updates["inventory_level"] = changes.inventory_level

    changed = any(getattr(current, k) != v for k, v in updates.items())
    # The write always targets the requested id
    merged = current.model_copy(update={**updates, "id": product_id})
    return merged, changed


class ProductRepository(BaseRepository):
    """Products, product images. One instance per request."""

    def __init__(self, client: UpstreamClient):
        super().__init__(client)

    async def create_product(self, product: NewProduct) -> OperationResult:
        if missing_required_fields(product):
            return fail(
                400,
                REQUIRED_FIELDS_MESSAGE,
                errors=ErrorDetail(status=400, title="Bad Request",
                                   errors={"error": "Please fill all necessary fields"}),
            )
        payload = product.model_dump(exclude_defaults=True)
        res = await self.client.send("POST", PRODUCTS_PATH, json=payload)
        return self.classify_create(res, Envelope[Product], "Product created successfully")

    async def list_products(self, page: int | None = 1, limit: int | None = None) -> OperationResult:
        res = await self.client.send("GET", PRODUCTS_PATH, params=self.page_params(page, limit))
        if not res.is_success:
            return self.unexpected_list_response(res)
        content = self.parse(Envelope[list[Product]], res)
        projected = Envelope[list[ProductSummary]](
            data=[ProductSummary.from_product(p) for p in content.data or []],
            meta=content.meta,
        )
        return ok(projected, "Products retrieved successfully")

    async def _fetch_product(self, product_id: int) -> tuple[OperationResult, str | None]:
        """GET one product; also hands back its ETag (if upstream sent one)."""
        res = await self.client.send("GET", f"{PRODUCTS_PATH}/{product_id}")
        if not res.is_success:
            return self.upstream_failure(404, res), None
        content = self.parse(Envelope[Product], res)
        if content.data is None:
            return fail(404, "Product not found"), None
        summary = Envelope[ProductSummary](
            data=ProductSummary.from_product(content.data), meta=content.meta
        )
        return ok(summary, "Product retrieved successfully"), res.headers.get("etag")

    async def get_product(self, product_id: int) -> OperationResult:
        result, _ = await self._fetch_product(product_id)
        return result

    async def get_product_images(
        self, product_id: int, page: int | None = 1, limit: int | None = None
    ) -> OperationResult:
        res = await self.client.send(
            "GET", f"{PRODUCTS_PATH}/{product_id}/images", params=self.page_params(page, limit)
        )
        if res.status_code == 204:
            return fail(204, NO_IMAGES_MESSAGE)
        if res.is_success:
            content = self.parse(Envelope[list[Image]], res)
            # Upstream answers 200 with an empty list rather than the documented 204
            if not content.data:
                return fail(204, NO_IMAGES_MESSAGE)
            return ok(content, "Images found")
        detail = self.error_detail(res)
        return fail(404, "The product ID does not exist", errors=detail)

    async def create_product_image(
        self,
        product_id: int,
        filename: str | None,
        content: bytes,
        content_type: str | None = None,
    ) -> OperationResult:
        rejected = validate_image_upload(filename, len(content))
        if rejected is not None:
            return rejected
        files = {
            "image_file": (filename, content, content_type or "application/octet-stream"),
        }
        res = await self.client.send("POST", f"{PRODUCTS_PATH}/{product_id}/images", files=files)
        if res.is_success:
            return ok(self.parse(Envelope[Image], res), "Image uploaded successfully")
        if res.status_code == 404:
            return self.upstream_failure(404, res)
        if res.status_code == 400:
            return fail(400, GENERIC_FAILURE_MESSAGE, errors=ErrorDetail(status=400, title="Bad Request"))
        return self.upstream_failure(422, res)

    async def update_product(self, product_id: int, changes: ProductUpdate) -> OperationResult:
        """Read-merge-write. Without an upstream ETag the last writer wins."""
        state: dict[str, Any] = {}

        async def product_exists() -> OperationResult | None:
            result, etag = await self._fetch_product(product_id)
            if result.status_code != 200:
                return fail(404, "Product not found", errors=result.errors)
            current: ProductSummary = result.data.data
            if current.id and current.id != product_id:
                logger.warning("upstream returned product %s for id %s", current.id, product_id)
                return fail(
                    502,
                    UNEXPECTED_RESPONSE_MESSAGE,
                    errors=ErrorDetail(status=502, title="Product identity mismatch"),
                )
            state["current"] = current
            state["etag"] = etag
            return None

        async def has_changes() -> OperationResult | None:
            merged, changed = apply_update(state["current"], changes, product_id)
            if not changed:
                return fail(
                    400,
                    NO_CHANGES_MESSAGE,
                    errors=ErrorDetail(status=400, title="Bad Request",
                                       errors={"error": NO_CHANGES_MESSAGE}),
                )
            state["merged"] = merged
            return None

        stop = await run_pipeline(product_exists, has_changes)
        if stop is not None:
            return stop

        merged: ProductSummary = state["merged"]
        headers = {"If-Match": state["etag"]} if state["etag"] else None
        res = await self.client.send(
            "PUT", f"{PRODUCTS_PATH}/{product_id}", json=merged.model_dump(), headers=headers
        )

        if res.status_code == 201:
            return ok(None, "Product created successfully", status_code=201)
        if res.status_code == 207:
            return fail(207, PARTIAL_SUCCESS_MESSAGE, data=self.parse(Envelope[Product], res))
        if res.is_success:
            content = self.parse(Envelope[Product], res)
            if content.data is None:
                content.data = Product.model_validate(merged.model_dump())
            return ok(content, "Product updated successfully")
        if res.status_code in (404, 409):
            return self.upstream_failure(res.status_code, res)
        if res.status_code == 412:
            logger.info("product %s changed upstream since it was read", product_id)
            return fail(409, "The product was modified concurrently", errors=self.error_detail(res))
        return self.upstream_failure(422, res)

    async def _product_exists(self, product_id: int) -> OperationResult | None:
        result = await self.get_product(product_id)
        if result.status_code == 404:
            return fail(404, "Product not found", errors=result.errors)
        return None

    async def delete_product(self, product_id: int) -> OperationResult:
        stop = await run_pipeline(lambda: self._product_exists(product_id))
        if stop is not None:
            return stop
        res = await self.client.send("DELETE", f"{PRODUCTS_PATH}/{product_id}")
        if res.is_success:
            return ok(True, "Product deleted successfully")
        return fail(400, GENERIC_FAILURE_MESSAGE, errors=self.error_detail(res))

    async def delete_product_image(self, product_id: int, image_id: int) -> OperationResult:
        """Worst case three calls: GET product, GET images, DELETE image."""

        async def has_images() -> OperationResult | None:
            images = await self.get_product_images(product_id, 1, 50)
            if images.status_code == 204:
                return fail(204, NO_IMAGES_MESSAGE)
            if images.status_code != 200:
                return fail(404, images.message, errors=images.errors)
            return None

        stop = await run_pipeline(lambda: self._product_exists(product_id), has_images)
        if stop is not None:
            return stop
        res = await self.client.send("DELETE", f"{PRODUCTS_PATH}/{product_id}/images/{image_id}")
        if res.is_success:
            return ok(True, "Image deleted successfully")
        return fail(400, GENERIC_FAILURE_MESSAGE, errors=self.error_detail(res))
