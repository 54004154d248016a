"""Project Routes — HTTP contract for /api/projects.

Invariants:
    - POST returns the stored project (200) with a generated integer id
    - GET by a missing or non-numeric id → 404 {"msg": "Project not found"}
    - PUT replaces every field; PUT on a missing id → 404
    - DELETE always → 200 {"msg": "Project removed"}
"""


async def test_create_then_get_returns_identical_object(client, project_payload):
    res = await client.post("/api/projects", json=project_payload)

    assert res.status_code == 200
    created = res.json()
    assert isinstance(created["id"], int)
    for key, value in project_payload.items():
        assert created[key] == value

    res = await client.get(f"/api/projects/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_list_returns_array(client, project_payload):
    res = await client.get("/api/projects")
    assert res.status_code == 200
    assert res.json() == []

    await client.post("/api/projects", json=project_payload)
    res = await client.get("/api/projects")
    assert [p["title"] for p in res.json()] == ["X"]


async def test_get_missing_project_returns_404(client):
    res = await client.get("/api/projects/999999")

    assert res.status_code == 404
    assert res.json()["msg"] == "Project not found"
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_non_numeric_id_returns_404(client):
    res = await client.get("/api/projects/abc")

    assert res.status_code == 404
    assert res.json()["msg"] == "Project not found"


async def test_put_replaces_project(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()
    replacement = {
        "title": "Z",
        "description": "W",
        "image_url": "https://example.com/z.png",
        "project_url": "https://example.com/z",
        "tags": "",
    }

    res = await client.put(f"/api/projects/{created['id']}", json=replacement)

    assert res.status_code == 200
    assert res.json() == {"id": created["id"], **replacement}


async def test_put_missing_project_returns_404(client, project_payload):
    res = await client.put("/api/projects/999999", json=project_payload)

    assert res.status_code == 404
    assert res.json()["msg"] == "Project not found"


async def test_put_with_missing_field_returns_400(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()
    partial = {k: v for k, v in project_payload.items() if k != "tags"}

    res = await client.put(f"/api/projects/{created['id']}", json=partial)

    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.tags" in fields


async def test_delete_project_then_get_404(client, project_payload):
    created = (await client.post("/api/projects", json=project_payload)).json()

    res = await client.delete(f"/api/projects/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"msg": "Project removed"}

    res = await client.get(f"/api/projects/{created['id']}")
    assert res.status_code == 404


async def test_delete_missing_project_still_succeeds(client):
    res = await client.delete("/api/projects/999999")

    assert res.status_code == 200
    assert res.json() == {"msg": "Project removed"}


async def test_padded_title_stored_verbatim(client, project_payload):
    payload = {**project_payload, "title": "  X  ", "description": "line1\n\n"}

    created = (await client.post("/api/projects", json=payload)).json()

    assert created["title"] == "  X  "
    res = await client.get(f"/api/projects/{created['id']}")
    assert res.json()["title"] == "  X  "
    assert res.json()["description"] == "line1\n\n"
