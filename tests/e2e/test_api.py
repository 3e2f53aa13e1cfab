from __future__ import annotations

from decimal import Decimal
from uuid import UUID, uuid4

import httpx
import pytest

from bootstrapper.main import create_app

pytestmark = pytest.mark.anyio


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def create_product(client, **overrides):
    body = {
        "name": "Desk Lamp",
        "description": "Adjustable lamp",
        "price": "100.00",
        "image_file": "lamp.png",
        "categories": ["Lighting"],
        "stock_quantity": 3,
    }
    body.update(overrides)
    resp = await client.post("/catalog/products", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_cart(client, user_name: str = "swn"):
    resp = await client.post("/basket/carts", json={"user_name": user_name})
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_root_describes_the_service(client):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert resp.json()["name"] == "modular-shop"


async def test_product_lifecycle(client):
    product = await create_product(client)
    assert Decimal(product["price"]) == Decimal("100.00")
    assert product["is_available"] is True

    resp = await client.get(f"/catalog/products/{product['id']}")
    assert resp.json()["categories"] == ["Lighting"]

    resp = await client.get("/catalog/products", params={"category": "lighting"})
    page = resp.json()
    assert page["total"] == 1
    assert page["data"][0]["id"] == product["id"]

    resp = await client.delete(f"/catalog/products/{product['id']}")
    assert resp.status_code == 204
    resp = await client.get(f"/catalog/products/{product['id']}")
    assert resp.status_code == 404

    resp = await client.post(f"/catalog/products/{product['id']}/restore")
    assert resp.status_code == 200
    assert (await client.get(f"/catalog/products/{product['id']}")).status_code == 200


async def test_price_update_over_http_refreshes_carts(app, client):
    product = await create_product(client)
    cart = await create_cart(client)
    resp = await client.post(
        f"/basket/carts/{cart['id']}/items",
        json={"product_id": product["id"], "product_name": "Desk Lamp", "price": "100.00", "quantity": 2},
    )
    assert resp.status_code == 200

    resp = await client.put(f"/catalog/products/{product['id']}/price", json={"price": "80.00"})
    assert resp.status_code == 200
    await app.state.container.bus.join()

    resp = await client.get(f"/basket/carts/by-product/{product['id']}")
    (line,) = resp.json()
    assert Decimal(line["unit_price"]) == Decimal("80.00")
    assert line["quantity"] == 2


async def test_cart_operations(client):
    cart = await create_cart(client)
    cart_url = f"/basket/carts/{cart['id']}"
    mug, lamp = str(uuid4()), str(uuid4())

    await client.post(f"{cart_url}/items", json={"product_id": mug, "product_name": "Mug", "price": "10.00", "quantity": 2})
    await client.post(
        f"{cart_url}/items",
        json={"product_id": lamp, "product_name": "Lamp", "price": "15.00", "variant": "Blue"},
    )
    await client.put(f"{cart_url}/items/{mug}", json={"quantity": 3})
    resp = await client.post(f"{cart_url}/discounts", json={"code": "save10", "discount_type": "Percentage", "value": "10"})

    body = resp.json()
    assert body["item_count"] == 4
    assert Decimal(body["subtotal"]) == Decimal("45.00")
    assert Decimal(body["total"]) == Decimal("40.50")
    assert body["discounts"][0]["code"] == "SAVE10"

    resp = await client.delete(f"{cart_url}/items/{lamp}", params={"variant": "Blue"})
    assert [item["product_id"] for item in resp.json()["items"]] == [mug]

    resp = await client.post(f"{cart_url}/checkout")
    assert resp.json()["status"] == "CheckedOut"

    resp = await client.get("/basket/carts", params={"user_name": "swn", "active_only": "true"})
    assert resp.json() == []

    resp = await client.delete(cart_url)
    assert resp.status_code == 204
    assert (await client.get(cart_url)).status_code == 404


async def test_unknown_cart_is_a_404_problem(client):
    resp = await client.get(f"/basket/carts/{uuid4()}", headers={"X-Request-ID": "req-42"})

    assert resp.status_code == 404
    body = resp.json()
    assert body["code"] == "cart_not_found"
    assert body["correlation_id"] == "req-42"
    assert resp.headers["X-Request-ID"] == "req-42"


async def test_invalid_body_is_a_422_problem(client):
    resp = await client.post("/catalog/products", json={"name": "", "price": "-1"})

    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"]


async def test_checkout_of_empty_cart_is_rejected(client):
    cart = await create_cart(client)

    resp = await client.post(f"/basket/carts/{cart['id']}/checkout")

    assert resp.status_code == 409
    assert resp.json()["message"] == "Cannot checkout empty cart"


async def test_actor_header_is_stamped_on_the_product(app, client):
    resp = await client.post(
        "/catalog/products",
        json={"name": "Mug", "description": "Mug", "price": "5.00", "image_file": "mug.png"},
        headers={"X-Actor": "alice"},
    )
    product_id = resp.json()["id"]

    async with app.state.container.catalog_uow() as uow:
        product = await uow.products.get(UUID(product_id))

    assert product.created_by == "alice"
