def test_health(client):
    for path in ("/health", "/api/health"):
        response = client.get(path)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "API is running!"
        assert "timestamp" in body


def test_requires_session(client):
    response = client.get("/api/pages")
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized. Please log in to continue."}

    response = client.get("/api/pages", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_create_and_get_page(client, auth_headers, make_page):
    page = make_page("Ideas")
    assert page["title"] == "Ideas"
    assert page["content"] == [] and page["tags"] == []
    assert page["isFavorite"] is False and page["isArchived"] is False
    assert page["ownerId"] == "user-1"

    response = client.get(f"/pages/{page['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["id"] == page["id"]


def test_list_returns_metadata_only(client, auth_headers, make_page):
    make_page("One")
    response = client.get("/api/pages", headers=auth_headers)

    body = response.json()
    assert body["success"] is True
    assert [p["title"] for p in body["data"]] == ["One"]
    assert "content" not in body["data"][0]


def test_autosave_patch_updates_content(client, auth_headers, make_page):
    page = make_page()
    blocks = [{"type": "paragraph", "content": [{"type": "text", "text": "hello"}], "children": []}]

    response = client.patch(f"/api/pages/{page['id']}", json={"content": blocks}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["content"] == blocks


def test_patch_ignores_non_allow_listed_fields(client, auth_headers, make_page):
    page = make_page("Before")
    response = client.patch(
        f"/api/pages/{page['id']}",
        json={"title": "After", "isFavorite": True, "ownerId": "user-2"},
        headers=auth_headers,
    )
    data = response.json()["data"]
    assert data["title"] == "After"
    assert data["isFavorite"] is False
    assert data["ownerId"] == "user-1"


def test_patch_with_nothing_valid_is_rejected(client, auth_headers, make_page):
    page = make_page()
    response = client.patch(f"/api/pages/{page['id']}", json={"isArchived": True}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No valid fields to update"}


def test_foreign_page_looks_missing(client, auth_headers, other_headers, make_page):
    page = make_page("Private")
    page_url = f"/api/pages/{page['id']}"

    assert client.get(page_url, headers=other_headers).status_code == 404
    assert client.patch(page_url, json={"title": "x"}, headers=other_headers).status_code == 404
    assert client.patch(f"{page_url}/favorite", headers=other_headers).status_code == 404
    assert client.delete(page_url, headers=other_headers).status_code == 404

    response = client.get(page_url, headers=auth_headers)
    assert response.json()["data"]["title"] == "Private"


def test_favorite_archive_trash_cycle(client, auth_headers, make_page):
    page = make_page()
    page_url = f"/api/pages/{page['id']}"

    assert client.patch(f"{page_url}/favorite", headers=auth_headers).json()["data"] == {"isFavorite": True}
    assert client.patch(f"{page_url}/archive", headers=auth_headers).json()["data"] == {"isArchived": True}

    assert client.get("/api/pages", headers=auth_headers).json()["data"] == []
    trash = client.get("/api/pages/trash", headers=auth_headers).json()["data"]
    assert [p["id"] for p in trash] == [page["id"]]
    assert trash[0]["isFavorite"] is False

    assert client.patch(f"{page_url}/archive", headers=auth_headers).json()["data"] == {"isArchived": False}
    assert client.get("/api/pages/trash", headers=auth_headers).json()["data"] == []


def test_trashed_page_cannot_be_favorited(client, auth_headers, make_page):
    page = make_page()
    page_url = f"/api/pages/{page['id']}"
    client.patch(f"{page_url}/archive", headers=auth_headers)

    response = client.patch(f"{page_url}/favorite", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"isFavorite": False}

    stored = client.get(page_url, headers=auth_headers).json()["data"]
    assert stored["isArchived"] is True
    assert stored["isFavorite"] is False


def test_search(client, auth_headers, make_page):
    make_page("Weekly Planning")
    make_page("Recipes")

    response = client.get("/api/pages/search", params={"q": "planning"}, headers=auth_headers)
    assert [p["title"] for p in response.json()["data"]] == ["Weekly Planning"]

    response = client.get("/api/pages/search", params={"q": ""}, headers=auth_headers)
    assert response.json()["data"] == []


def test_delete_is_permanent(client, auth_headers, make_page):
    page = make_page()
    response = client.delete(f"/api/pages/{page['id']}", headers=auth_headers)
    assert response.json() == {"success": True, "message": "Page deleted permanently"}

    assert client.get(f"/api/pages/{page['id']}", headers=auth_headers).status_code == 404


def test_malformed_body_is_400(client, auth_headers, make_page):
    page = make_page()
    response = client.patch(f"/api/pages/{page['id']}", json={"content": "not blocks"}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_request_id_header(client):
    response = client.get("/health", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"


def test_create_without_body_uses_defaults(client, auth_headers):
    response = client.post("/pages", headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["data"]["title"] == "Untitled"
