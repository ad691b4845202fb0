"""Owner Routes — CRUD status codes and alternate-key lookups.

Invariants:
    - POST → 201 with generated id, GET → 200, PUT → 200, DELETE → 204
    - Path id wins over body id on PUT
    - Lookups by campus id / email answer 404 on miss
"""


async def test_create_owner_returns_201_with_generated_id(client):
    res = await client.post("/api/v1/owners", json={
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["first_name"] == "John"
    assert body["campus_id"] is None


async def test_create_owner_with_known_id(client):
    res = await client.post("/api/v1/owners", json={
        "id": "owner-1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
    })
    assert res.status_code == 201
    assert res.json()["id"] == "owner-1"

    res = await client.get("/api/v1/owners/owner-1")
    assert res.status_code == 200
    assert res.json()["last_name"] == "Lovelace"


async def test_list_owners(client, owner_id):
    res = await client.get("/api/v1/owners")
    assert res.status_code == 200
    assert [o["id"] for o in res.json()] == [owner_id]


async def test_update_owner_uses_path_id(client, owner_id):
    res = await client.put(f"/api/v1/owners/{owner_id}", json={
        "id": "ignored",
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@example.com",
    })
    assert res.status_code == 200
    assert res.json()["id"] == owner_id

    fetched = (await client.get(f"/api/v1/owners/{owner_id}")).json()
    assert fetched["first_name"] == "Jane"
    assert (await client.get("/api/v1/owners/ignored")).status_code == 404


async def test_delete_owner_returns_204_then_404(client, owner_id):
    res = await client.delete(f"/api/v1/owners/{owner_id}")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"/api/v1/owners/{owner_id}")).status_code == 404


async def test_get_owner_by_email(client, owner_id):
    res = await client.get("/api/v1/owners/email/john.doe@example.com")
    assert res.status_code == 200
    assert res.json()["id"] == owner_id


async def test_get_owner_by_campus_id(client):
    await client.post("/api/v1/owners", json={
        "first_name": "Grace",
        "last_name": "Hopper",
        "campus_id": "C-1906",
        "email": "grace@example.com",
    })
    res = await client.get("/api/v1/owners/campus/C-1906")
    assert res.status_code == 200
    assert res.json()["first_name"] == "Grace"


async def test_owner_lookup_miss_returns_404(client):
    res = await client.get("/api/v1/owners/campus/none")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
