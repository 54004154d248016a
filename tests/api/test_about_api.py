"""About Routes — singleton profile over HTTP.

Invariants:
    - GET before any PUT → 404 {"msg": "About information not found"}
    - First PUT inserts; later PUTs overwrite the same row
"""


async def test_get_about_before_any_write_returns_404(client):
    res = await client.get("/api/about")

    assert res.status_code == 404
    assert res.json()["msg"] == "About information not found"


async def test_put_inserts_then_updates_single_row(client, about_payload):
    res = await client.put("/api/about", json=about_payload)
    assert res.status_code == 200
    first = res.json()
    assert "singleton_key" not in first

    res = await client.get("/api/about")
    assert res.json() == first

    res = await client.put("/api/about", json={**about_payload, "name": "Ada King"})
    assert res.status_code == 200
    second = res.json()
    assert second["id"] == first["id"]

    res = await client.get("/api/about")
    assert res.json()["name"] == "Ada King"
    assert res.json()["id"] == first["id"]


async def test_put_about_requires_every_field(client, about_payload):
    payload = {k: v for k, v in about_payload.items() if k != "location"}

    res = await client.put("/api/about", json=payload)

    assert res.status_code == 400
    assert res.json()["msg"] == "Invalid request data"


async def test_put_about_accepts_null_contact_details(client, about_payload):
    payload = {**about_payload, "email": None, "phone": None}

    res = await client.put("/api/about", json=payload)

    assert res.status_code == 200
    assert res.json()["email"] is None
    assert res.json()["phone"] is None
