# tests/test_product_service.py
import asyncio

import httpx

from vasstra.services.product_service import normalize_product


def test_normalize_applies_defaults():
    product = normalize_product({"_id": "64a1", "price": 1499})

    assert product.id == "64a1"
    assert product.mongo_id == "64a1"
    assert product.name == ""
    assert product.original_price == 1499
    assert product.discount == 0
    assert product.category == "ethnic_wear"
    assert product.subcategory == ""
    assert product.images == []
    assert product.stock == 0
    assert product.is_active is True
    assert product.is_new is False


def test_normalize_discount_images_and_flags():
    product = normalize_product(
        {
            "_id": "64a2",
            "name": "Bandhani Dupatta",
            "price": 750,
            "originalPrice": 1000,
            "images": ["/a.jpg", "/b.jpg"],
            "stock": "lots",
            "isActive": False,
            "isNewProduct": True,
            "isBestseller": 1,
            "isWinter": True,
        }
    )

    assert product.discount == 25
    assert normalize_product({"_id": "x", "price": 875, "originalPrice": 1000}).discount == 13
    assert product.image == "/a.jpg"
    assert product.images == ["/a.jpg", "/b.jpg"]
    assert product.stock == 0
    assert product.is_active is False
    assert product.is_new is True
    assert product.is_bestseller is True
    assert product.is_winter is True
    assert product.is_summer is False


def test_normalize_single_image_becomes_gallery():
    product = normalize_product({"_id": "x", "image": "/only.jpg", "stock": 12})

    assert product.images == ["/only.jpg"]
    assert product.stock == 12


def test_fetch_products_normalizes(make_context, backend_state):
    backend_state.products = [
        {"_id": f"p{i}", "name": f"Kurti {i}", "price": 500 + i, "category": "ethnic_wear"}
        for i in range(10)
    ] + [{"_id": "w1", "name": "Denim Jacket", "price": 2000, "category": "western_wear"}]
    context = make_context()

    async def scenario():
        default = await context.products.fetch_products()
        western = await context.products.fetch_products(limit=5, category="western_wear")
        searched = await context.products.fetch_products(search="kurti 3")
        await context.api.aclose()
        return default, western, searched

    default, western, searched = asyncio.run(scenario())

    assert len(default) == 8
    assert default[0].id == "p0"
    assert [p.name for p in western] == ["Denim Jacket"]
    assert [p.id for p in searched] == ["p3"]
    assert backend_state.product_queries[1] == {"limit": "5", "category": "western_wear"}


def test_fetch_products_timeout_degrades_to_empty(make_context):
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    context = make_context(transport=httpx.MockTransport(slow))

    async def scenario():
        products = await context.products.fetch_products(limit=8)
        await context.api.aclose()
        return products

    assert asyncio.run(scenario()) == []


def test_fetch_products_server_error_degrades_to_empty(make_context):
    def broken(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    context = make_context(transport=httpx.MockTransport(broken))

    async def scenario():
        products = await context.products.fetch_products()
        await context.api.aclose()
        return products

    assert asyncio.run(scenario()) == []


def test_fetch_products_unsuccessful_envelope(make_context):
    def declined(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"success": False, "products": [{"_id": "x"}]})

    context = make_context(transport=httpx.MockTransport(declined))

    async def scenario():
        products = await context.products.fetch_products()
        await context.api.aclose()
        return products

    assert asyncio.run(scenario()) == []
