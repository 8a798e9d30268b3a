"""Store Routes — create, read, partial update, delete.

Invariants:
    - POST embeds the owner; unknown owner → 404
    - GET embeds owner without password and products newest first; unknown id → 404
    - PUT with only name leaves userId unchanged; dangling userId → 400
    - DELETE cascades to products
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import select

from storefront.models import Product, User


async def test_create_store_embeds_owner(client, seed_user):
    res = await client.post(
        "/stores", json={"name": "S", "userId": seed_user.id},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "S"
    assert body["userId"] == seed_user.id
    assert body["user"] == {
        "id": seed_user.id, "name": "Ana", "email": "ana@example.com",
    }


async def test_create_store_accepts_numeric_string_user_id(client, seed_user):
    res = await client.post(
        "/stores", json={"name": "S", "userId": str(seed_user.id)},
    )
    assert res.status_code == 201
    assert res.json()["userId"] == seed_user.id


async def test_create_store_for_unknown_user_returns_404(client):
    res = await client.post("/stores", json={"name": "S", "userId": 4242})
    assert res.status_code == 404
    assert "User" in res.json()["error"]["message"]


async def test_create_store_missing_name_returns_400(client, seed_user):
    res = await client.post("/stores", json={"userId": seed_user.id})
    assert res.status_code == 400


async def test_get_store_embeds_owner_and_empty_products(client, seed_store):
    res = await client.get(f"/stores/{seed_store.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == seed_store.id
    assert body["user"]["email"] == "ana@example.com"
    assert "password" not in body["user"]
    assert body["products"] == []


async def test_get_store_products_newest_first(client, seed_store, test_db):
    now = datetime.now(timezone.utc)
    test_db.add_all([
        Product(
            name="Old", price=1, store_id=seed_store.id,
            created_at=now - timedelta(days=2),
        ),
        Product(name="New", price=2, store_id=seed_store.id, created_at=now),
        Product(
            name="Mid", price=3, store_id=seed_store.id,
            created_at=now - timedelta(days=1),
        ),
    ])
    await test_db.commit()

    res = await client.get(f"/stores/{seed_store.id}")
    names = [p["name"] for p in res.json()["products"]]
    assert names == ["New", "Mid", "Old"]


async def test_get_unknown_store_returns_404(client):
    res = await client.get("/stores/123456")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_store_with_non_numeric_id_returns_400(client):
    res = await client.get("/stores/abc")
    assert res.status_code == 400


async def test_update_store_name_only_preserves_owner(client, seed_store, seed_user):
    res = await client.put(f"/stores/{seed_store.id}", json={"name": "Renamed"})
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Renamed"
    assert body["userId"] == seed_user.id

    fetched = await client.get(f"/stores/{seed_store.id}")
    assert fetched.json()["name"] == "Renamed"
    assert fetched.json()["user"]["id"] == seed_user.id


async def test_update_store_moves_to_another_owner(client, seed_store, test_db):
    other = User(name="Bo", email="bo@example.com", password="x")
    test_db.add(other)
    await test_db.commit()

    res = await client.put(f"/stores/{seed_store.id}", json={"userId": other.id})
    assert res.status_code == 200
    assert res.json()["userId"] == other.id
    assert res.json()["name"] == "Corner Shop"


async def test_update_store_with_dangling_user_returns_400(client, seed_store):
    res = await client.put(f"/stores/{seed_store.id}", json={"userId": 9999})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "FOREIGN_KEY_VIOLATION"
    assert error["message"] == "referenced id does not exist"


async def test_update_store_rejects_explicit_null(client, seed_store):
    res = await client.put(f"/stores/{seed_store.id}", json={"name": None})
    assert res.status_code == 400


async def test_update_unknown_store_returns_404(client):
    res = await client.put("/stores/777", json={"name": "X"})
    assert res.status_code == 404


async def test_delete_store_cascades_to_products(
    client, seed_store, seed_product, test_db,
):
    res = await client.delete(f"/stores/{seed_store.id}")
    assert res.status_code == 204
    assert res.content == b""

    remaining = await test_db.execute(
        select(Product.id).where(Product.store_id == seed_store.id),
    )
    assert remaining.all() == []
    assert (await client.get(f"/stores/{seed_store.id}")).status_code == 404


async def test_delete_unknown_store_returns_404(client):
    res = await client.delete("/stores/31337")
    assert res.status_code == 404


TOO_LARGE_ID = 9223372036854775808


async def test_get_store_with_out_of_range_id_returns_400(client):
    res = await client.get(f"/stores/{TOO_LARGE_ID}")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_and_delete_store_with_out_of_range_id_return_400(client):
    assert (
        await client.put(f"/stores/{TOO_LARGE_ID}", json={"name": "X"})
    ).status_code == 400
    assert (await client.delete(f"/stores/{TOO_LARGE_ID}")).status_code == 400


async def test_create_store_with_out_of_range_user_id_returns_400(client):
    res = await client.post("/stores", json={"name": "S", "userId": TOO_LARGE_ID})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_store_with_out_of_range_user_id_returns_400(client, seed_store):
    res = await client.put(
        f"/stores/{seed_store.id}", json={"userId": TOO_LARGE_ID},
    )
    assert res.status_code == 400


async def test_created_store_timestamps_match(client, seed_user):
    res = await client.post("/stores", json={"name": "S", "userId": seed_user.id})
    body = res.json()
    assert body["createdAt"] == body["updatedAt"]
