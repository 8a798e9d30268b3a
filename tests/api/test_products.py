"""Product Routes — create, list, partial update, delete.

Invariants:
    - POST coerces numeric strings for price and storeId; dangling storeId → 400
    - GET /products nests store and the store's owner (no password)
    - PUT touches only supplied fields and refreshes updatedAt
"""

import pytest


async def test_create_product_returns_201(client, seed_store):
    res = await client.post(
        "/products", json={"name": "P", "price": 10, "storeId": seed_store.id},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "P"
    assert body["price"] == 10
    assert body["storeId"] == seed_store.id
    assert body["updatedAt"]


async def test_create_product_coerces_numeric_strings(client, seed_store):
    res = await client.post(
        "/products",
        json={"name": "P", "price": "19.90", "storeId": str(seed_store.id)},
    )
    assert res.status_code == 201
    assert res.json()["price"] == pytest.approx(19.9)
    assert res.json()["storeId"] == seed_store.id


async def test_create_product_for_unknown_store_returns_400(client):
    res = await client.post(
        "/products", json={"name": "P", "price": 1, "storeId": 5555},
    )
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "referenced id does not exist"


@pytest.mark.parametrize("missing", ["name", "price", "storeId"])
async def test_create_product_missing_field_returns_400(client, seed_store, missing):
    payload = {"name": "P", "price": 1, "storeId": seed_store.id}
    del payload[missing]
    res = await client.post("/products", json=payload)
    assert res.status_code == 400


async def test_create_product_rejects_non_numeric_price(client, seed_store):
    res = await client.post(
        "/products", json={"name": "P", "price": "cheap", "storeId": seed_store.id},
    )
    assert res.status_code == 400


async def test_list_products_nests_store_and_owner(client, seed_product, seed_store):
    res = await client.get("/products")
    assert res.status_code == 200
    [product] = res.json()
    assert product["id"] == seed_product.id
    assert product["store"]["id"] == seed_store.id
    assert product["store"]["user"]["email"] == "ana@example.com"
    assert "password" not in product["store"]["user"]


async def test_update_product_price_only(client, seed_product):
    res = await client.put(f"/products/{seed_product.id}", json={"price": 15})
    assert res.status_code == 200
    body = res.json()
    assert body["price"] == 15
    assert body["name"] == "Coffee"
    assert body["storeId"] == seed_product.store_id


async def test_update_product_moves_store_to_unknown_returns_400(client, seed_product):
    res = await client.put(f"/products/{seed_product.id}", json={"storeId": 8080})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "FOREIGN_KEY_VIOLATION"


async def test_update_unknown_product_returns_404(client):
    res = await client.put("/products/404", json={"name": "X"})
    assert res.status_code == 404


async def test_delete_product(client, seed_product):
    res = await client.delete(f"/products/{seed_product.id}")
    assert res.status_code == 204
    assert (await client.get("/products")).json() == []


async def test_delete_unknown_product_returns_404(client):
    res = await client.delete("/products/404")
    assert res.status_code == 404


TOO_LARGE_ID = 9223372036854775808


async def test_created_product_timestamps_match(client, seed_store):
    res = await client.post(
        "/products", json={"name": "P", "price": 1, "storeId": seed_store.id},
    )
    body = res.json()
    assert body["createdAt"] == body["updatedAt"]


@pytest.mark.parametrize("price", ["1e999", "-1e999", "NaN", "Infinity"])
async def test_create_product_rejects_non_finite_price(client, seed_store, price):
    res = await client.post(
        "/products",
        content=f'{{"name": "P", "price": {price}, "storeId": {seed_store.id}}}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert (await client.get("/products")).json() == []


async def test_update_product_rejects_non_finite_price(client, seed_product):
    res = await client.put(
        f"/products/{seed_product.id}",
        content='{"price": 1e999}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    [product] = (await client.get("/products")).json()
    assert product["price"] == 12.5


async def test_create_product_with_out_of_range_store_id_returns_400(client):
    res = await client.post(
        "/products", json={"name": "P", "price": 1, "storeId": TOO_LARGE_ID},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_product_routes_with_out_of_range_id_return_400(client):
    assert (
        await client.put(f"/products/{TOO_LARGE_ID}", json={"name": "X"})
    ).status_code == 400
    assert (await client.delete(f"/products/{TOO_LARGE_ID}")).status_code == 400
