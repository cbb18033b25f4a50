"""
Product endpoints - RESTful resource over the upstream catalog (GET/POST/PUT/DELETE).
Challenge: Pagination, auth, multipart upload, mapping results to status codes.
Design: Thin controller; the repository decides the status, we only render it.
"""

from fastapi import APIRouter, File, Query, UploadFile

from gateway.api.responses import result_response
from gateway.config import get_settings
from gateway.core.dependencies import CurrentUser, Products
from gateway.schemas.product import NewProduct, ProductUpdate
from gateway.services.uploads import validate_image_upload

router = APIRouter()
settings = get_settings()


@router.get("")
async def list_products(
    repo: Products,
    user: CurrentUser,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """List products (projected fields). REST: GET /products?page=1&limit=50."""
    return result_response(await repo.list_products(page=page, limit=limit))


@router.post("")
async def create_product(repo: Products, user: CurrentUser, data: NewProduct):
    return result_response(await repo.create_product(data))


@router.get("/{product_id}")
async def get_product(repo: Products, user: CurrentUser, product_id: int):
    return result_response(await repo.get_product(product_id))


@router.put("/{product_id}")
async def update_product(repo: Products, user: CurrentUser, product_id: int, data: ProductUpdate):
    """Partial update: only non-empty fields are applied (read-merge-write upstream)."""
    result = await repo.update_product(product_id, data)
    response = result_response(result)
    if result.status_code == 201:
        response.headers["Location"] = f"/api/v1/products/{product_id}"
    return response


@router.delete("/{product_id}")
async def delete_product(repo: Products, user: CurrentUser, product_id: int):
    return result_response(await repo.delete_product(product_id))


@router.get("/{product_id}/images")
async def get_product_images(
    repo: Products,
    user: CurrentUser,
    product_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
):
    """Images of a product. 204 when it has none."""
    return result_response(await repo.get_product_images(product_id, page=page, limit=limit))


@router.post("/{product_id}/images")
async def create_product_image(
    repo: Products, user: CurrentUser, product_id: int, image: UploadFile = File(...)
):
    """Upload one image (multipart field "image"). Size and type are checked before the body is read."""
    rejected = validate_image_upload(image.filename, image.size or 0)
    if rejected is not None:
        return result_response(rejected)
    content = await image.read()
    result = await repo.create_product_image(
        product_id, image.filename, content, image.content_type
    )
    return result_response(result)


@router.delete("/{product_id}/images/{image_id}")
async def delete_product_image(repo: Products, user: CurrentUser, product_id: int, image_id: int):
    return result_response(await repo.delete_product_image(product_id, image_id))
