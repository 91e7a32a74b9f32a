"""Recommended Website Routes — same status contract, no duplicate check.

Invariants:
    - Identical creates both return 201 (no duplicate key)
    - All three fields required on create; url must be http(s)
"""

BASE = "/api/v1/recommended-websites"
MISSING_ID = "fedcba9876543210fedcba9876543210"

SITE = {
    "title": "City Museum",
    "url": "https://museum.example.org",
    "description": "Exhibitions for kids",
}


async def test_identical_creates_both_succeed(client):
    first = await client.post(BASE, json=SITE)
    second = await client.post(BASE, json=SITE)
    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["id"] != second.json()["id"]


async def test_create_with_missing_fields_lists_each_one(client):
    res = await client.post(BASE, json={"title": "Only title"})
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["details"]}
    assert fields == {"url", "description"}


async def test_create_with_invalid_url_returns_400(client):
    res = await client.post(BASE, json={**SITE, "url": "museum.example.org"})
    assert res.status_code == 400
    assert [d["field"] for d in res.json()["details"]] == ["url"]


async def test_update_url_keeps_other_fields(client, seed_website):
    res = await client.patch(
        f"{BASE}/{seed_website.id}", json={"url": "http://new.example.org"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["url"] == "http://new.example.org"
    assert body["title"] == seed_website.title
    assert body["description"] == seed_website.description


async def test_update_with_invalid_value_returns_400(client, seed_website):
    res = await client.patch(f"{BASE}/{seed_website.id}", json={"title": ""})
    assert res.status_code == 400


async def test_update_unknown_id_returns_404(client):
    res = await client.patch(f"{BASE}/{MISSING_ID}", json={"title": "New"})
    assert res.status_code == 404
    assert res.json() == {"error": "Recommended website not found."}


async def test_delete_then_get_returns_404(client, seed_website):
    res = await client.delete(f"{BASE}/{seed_website.id}")
    assert res.status_code == 204
    assert res.content == b""
    follow_up = await client.get(f"{BASE}/{seed_website.id}")
    assert follow_up.status_code == 404


async def test_delete_unknown_id_returns_404(client):
    res = await client.delete(f"{BASE}/{MISSING_ID}")
    assert res.status_code == 404
