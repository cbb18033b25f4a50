"""
BDD step definitions for the delete-image precondition cascade (pytest-bdd).
"""

import asyncio

import httpx
from pytest_bdd import given, parsers, scenarios, then, when

from gateway.config import get_settings
from gateway.repositories import ProductRepository
from gateway.upstream.client import UpstreamClient
from tests.fakes import error_body, page_meta, product_body

scenarios("../features/delete_image.feature")


@given(parsers.parse("upstream product {product_id:d} exists"))
def product_exists(upstream, product_id):
    upstream.add("GET", f"/catalog/products/{product_id}", 200, json={"data": product_body(product_id), "meta": {}})


@given(parsers.parse("upstream product {product_id:d} does not exist"))
def product_missing(upstream, product_id):
    upstream.add("GET", f"/catalog/products/{product_id}", 404, json=error_body(404, "Not found"))


@given(
    parsers.re(r"upstream product (?P<product_id>\d+) has (?P<count>\d+) images?"),
    converters={"product_id": int, "count": int},
)
def product_images(upstream, product_id, count):
    images = [{"id": i + 1, "product_id": product_id} for i in range(count)]
    upstream.add(
        "GET", f"/catalog/products/{product_id}/images", 200,
        json={"data": images, "meta": page_meta(count)},
    )


@given(parsers.parse("upstream accepts deleting image {image_id:d} of product {product_id:d}"))
def image_deletable(upstream, image_id, product_id):
    upstream.add("DELETE", f"/catalog/products/{product_id}/images/{image_id}", 204)


@when(
    parsers.parse("I delete image {image_id:d} of product {product_id:d}"),
    target_fixture="result",
)
def delete_image(upstream, image_id, product_id):
    async def run():
        client = UpstreamClient(get_settings(), transport=httpx.MockTransport(upstream.handler))
        try:
            return await ProductRepository(client).delete_product_image(product_id, image_id)
        finally:
            await client.aclose()

    return asyncio.run(run())


@then(parsers.parse("the result status code is {status:d}"))
def result_status(result, status):
    assert result.status_code == status


@then("the result is successful")
def result_success(result):
    assert result.success is True
    assert result.errors is None


@then(parsers.parse("upstream received {count:d} calls"))
def upstream_call_count(upstream, count):
    assert len(upstream.requests) == count


@then("upstream received no DELETE call")
def no_delete(upstream):
    assert upstream.calls_for("DELETE") == []
