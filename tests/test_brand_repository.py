"""
Brand repository tests - create/list/get classification.
"""

import json

import pytest

from gateway.schemas.brand import BrandCreate
from tests.fakes import error_body, page_meta

BRANDS = "/catalog/brands"


def brand_body(brand_id: int = 3, name: str = "Sunline") -> dict:
    return {
        "id": brand_id,
        "name": name,
        "page_title": name,
        "meta_keywords": ["beach"],
        "image_url": "",
        "custom_url": {"url": f"/{name.lower()}/", "is_default": True},
    }


@pytest.mark.asyncio
async def test_create_brand_ok(brands, upstream):
    upstream.add("POST", BRANDS, 200, json={"data": brand_body(), "meta": {}})
    result = await brands.create_brand(BrandCreate(name="Sunline", meta_keywords=["beach"]))
    assert result.success is True
    assert result.status_code == 200
    assert result.data.data.name == "Sunline"
    assert json.loads(upstream.requests[0].content) == {"name": "Sunline", "meta_keywords": ["beach"]}


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   "])
async def test_create_brand_requires_name(brands, upstream, name):
    result = await brands.create_brand(BrandCreate(name=name))
    assert result.status_code == 400
    assert result.message == "Brand name is required"
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_create_brand_partial_success(brands, upstream):
    upstream.add("POST", BRANDS, 207, json={"data": brand_body(), "meta": {}})
    result = await brands.create_brand(BrandCreate(name="Sunline"))
    assert result.success is False
    assert result.status_code == 207
    assert result.data is not None


@pytest.mark.asyncio
async def test_create_brand_conflict(brands, upstream):
    upstream.add("POST", BRANDS, 409, json=error_body(409, "Brand name already exists"))
    result = await brands.create_brand(BrandCreate(name="Sunline"))
    assert result.status_code == 409
    assert result.message == "Brand name already exists"


@pytest.mark.asyncio
async def test_create_brand_fallback_is_unprocessable(brands, upstream):
    upstream.add("POST", BRANDS, 400, json=error_body(400, "Bad input"))
    result = await brands.create_brand(BrandCreate(name="Sunline"))
    assert result.status_code == 422
    assert result.errors.status == 400


@pytest.mark.asyncio
async def test_list_brands(brands, upstream):
    upstream.add("GET", BRANDS, 200, json={"data": [brand_body(1, "A"), brand_body(2, "B")], "meta": page_meta(2)})
    result = await brands.list_brands(page=2, limit=20)
    assert result.status_code == 200
    assert [b.name for b in result.data.data] == ["A", "B"]
    assert result.data.meta.pagination.count == 2
    assert upstream.requests[0].url.params["page"] == "2"


@pytest.mark.asyncio
async def test_list_brands_unexpected_status_is_typed(brands, upstream):
    upstream.add("GET", BRANDS, 503, content=b"<html>maintenance</html>")
    result = await brands.list_brands()
    assert result.status_code == 502
    assert result.errors.title == "Service Unavailable"


@pytest.mark.asyncio
async def test_get_brand(brands, upstream):
    upstream.add("GET", f"{BRANDS}/3", 200, json={"data": brand_body(3), "meta": {}})
    result = await brands.get_brand(3)
    assert result.success is True
    assert result.to_body()["data"] == {"id": 3, "name": "Sunline"}


@pytest.mark.asyncio
async def test_get_brand_not_found(brands, upstream):
    upstream.add("GET", f"{BRANDS}/999", 404, json=error_body(404, "Brand not found"))
    result = await brands.get_brand(999)
    assert result.status_code == 404
    assert result.message == "Brand not found"
    assert result.errors is not None
