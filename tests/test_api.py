import json
import os

import pytest
from fastapi import status
from httpx import AsyncClient

pytestmark = pytest.mark.anyio


async def login(client: AsyncClient, username: str = "Ana") -> dict:
    response = await client.post("/api/auth/login", json={"username": username})
    assert response.status_code == status.HTTP_200_OK
    return response.json()


async def create_link(client: AsyncClient, **fields) -> dict:
    payload = {"username": "ana", "title": "Site", "url": "http://x.com"}
    payload.update(fields)
    response = await client.post("/api/links", json=payload)
    assert response.status_code == status.HTTP_200_OK
    return response.json()["link"]


async def test_login(client: AsyncClient):
    body = await login(client, "Ana")
    assert body == {
        "success": True,
        "user": {
            "username": "ana",
            "fullName": "Ana",
            "bio": "",
            "avatar": "👤",
            "totalViews": 0,
        },
    }


@pytest.mark.parametrize("payload", [{}, {"username": ""}, {"username": "   "}])
async def test_login_empty_username(client: AsyncClient, payload):
    response = await client.post("/api/auth/login", json=payload)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


async def test_profile(client: AsyncClient):
    await login(client)
    public = await create_link(client, title="Public")
    await create_link(client, title="Hidden", isPublic=False)

    response = await client.get("/api/users/ANA")
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["user"]["username"] == "ana"
    assert body["linkCount"] == 1
    assert [link["id"] for link in body["links"]] == [public["id"]]


async def test_profile_unknown(client: AsyncClient):
    response = await client.get("/api/users/ghost")
    assert response.status_code == status.HTTP_404_NOT_FOUND


async def test_update_profile(client: AsyncClient):
    await login(client)
    response = await client.put(
        "/api/users/ana", json={"fullName": "", "bio": "Hello", "avatar": "🎸"}
    )
    assert response.status_code == status.HTTP_200_OK
    user = response.json()["user"]
    assert response.json()["success"] is True
    assert user["fullName"] == "Ana"
    assert user["bio"] == "Hello"
    assert user["avatar"] == "🎸"
    assert user["created"]

    response = await client.put("/api/users/ana", json={"bio": ""})
    assert response.json()["user"]["bio"] == ""


async def test_update_profile_unknown(client: AsyncClient):
    response = await client.put("/api/users/ghost", json={"bio": "x"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


async def test_create_link(client: AsyncClient):
    response = await client.post(
        "/api/links", json={"username": "Ana", "title": "Site", "url": "http://x.com"}
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["success"] is True
    link = body["link"]
    assert link["user"] == "ana"
    assert link["isPublic"] is True
    assert link["description"] == ""
    assert (link["views"], link["clicks"]) == (0, 0)
    assert set(link) == {
        "id", "user", "title", "url", "description", "isPublic", "created", "views", "clicks",
    }


async def test_create_link_incomplete_leaves_file_unchanged(client: AsyncClient, db_path):
    await login(client)
    before = db_path.read_bytes()

    response = await client.post(
        "/api/links", json={"username": "ana", "title": "", "url": "http://x.com"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert db_path.read_bytes() == before
    assert json.loads(before)["links"] == {}


async def test_list_user_links(client: AsyncClient):
    await create_link(client)
    await create_link(client, isPublic=False)

    response = await client.get("/api/users/ana/links")
    assert response.status_code == status.HTTP_200_OK
    assert len(response.json()["links"]) == 2

    response = await client.get("/api/users/ghost/links")
    assert response.json() == {"links": []}


async def test_get_link_counts_views(client: AsyncClient):
    link = await create_link(client)
    for expected in (1, 2, 3):
        response = await client.get(f"/api/links/{link['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["views"] == expected


async def test_update_link(client: AsyncClient):
    link = await create_link(client, description="old")
    response = await client.put(
        f"/api/links/{link['id']}",
        json={"title": "", "description": "", "isPublic": False},
    )
    assert response.status_code == status.HTTP_200_OK
    updated = response.json()["link"]
    assert updated["title"] == "Site"
    assert updated["description"] == ""
    assert updated["isPublic"] is False


async def test_delete_link(client: AsyncClient):
    link = await create_link(client)
    response = await client.delete(f"/api/links/{link['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["success"] is True
    assert response.json()["message"]

    link_url = f"/api/links/{link['id']}"
    assert (await client.get(link_url)).status_code == status.HTTP_404_NOT_FOUND
    assert (await client.put(link_url, json={"title": "x"})).status_code == status.HTTP_404_NOT_FOUND
    assert (await client.delete(link_url)).status_code == status.HTTP_404_NOT_FOUND
    assert (await client.post(f"{link_url}/click")).status_code == status.HTTP_404_NOT_FOUND


async def test_click_scenario(client: AsyncClient):
    await login(client, "Ana")
    link = await create_link(client)

    await client.get(f"/api/links/{link['id']}")
    response = await client.get(f"/api/links/{link['id']}")
    assert response.json()["views"] == 2

    response = await client.post(f"/api/links/{link['id']}/click")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "clicks": 1}

    profile = (await client.get("/api/users/ana")).json()
    assert profile["user"]["totalViews"] == 1


async def test_storage_failure_returns_500(client: AsyncClient, store, monkeypatch):
    await login(client)

    def broken_replace(src, dst):
        raise OSError("permission denied")

    monkeypatch.setattr(os, "replace", broken_replace)
    response = await client.post("/api/auth/login", json={"username": "bob"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Storage failure"}
    assert "bob" not in store.users


async def test_cors_headers(client: AsyncClient):
    response = await client.get(
        "/api/users/ghost/links", headers={"Origin": "http://elsewhere.example"}
    )
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize("value", [0, "false", "no"])
async def test_create_link_loose_is_public_values_stay_public(client: AsyncClient, value):
    link = await create_link(client, isPublic=value)
    assert link["isPublic"] is True


async def test_profile_hides_link_without_visibility_flag(client: AsyncClient, store):
    await login(client)
    store.links["legacy"] = {"id": "legacy", "user": "ana", "title": "Old", "url": "http://old.com"}

    body = (await client.get("/api/users/ana")).json()

    assert body["links"] == []
    assert body["linkCount"] == 0


async def test_create_link_accepts_numeric_title(client: AsyncClient):
    link = await create_link(client, title=123)
    assert link["title"] == "123"


async def test_login_without_body(client: AsyncClient):
    response = await client.post("/api/auth/login")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.parametrize("body", ["not json", "[1, 2]"])
async def test_malformed_body_is_bad_request(client: AsyncClient, store, body):
    response = await client.post(
        "/api/links", content=body, headers={"Content-Type": "application/json"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert store.links == {}
