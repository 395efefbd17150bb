import pytest


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/v1/admin/settings"),
        ("put", "/api/v1/admin/settings/hero"),
        ("get", "/api/v1/admin/content/projects"),
        ("post", "/api/v1/admin/content/projects"),
        ("get", "/api/v1/admin/dashboard"),
    ],
)
def test_admin_routes_require_session(client, method, path):
    response = client.request(method, path, json={})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTH_NOT_AUTHENTICATED"


def test_setting_is_saved_and_served(admin_client, client):
    assert admin_client.get("/api/v1/admin/settings/hero").json()["setting_value"] is None

    response = admin_client.put(
        "/api/v1/admin/settings/hero",
        json={"value": {"name": "Jane Doe", "tagline": "Designer"}},
    )

    assert response.status_code == 200
    saved = response.json()
    assert saved["setting_key"] == "hero"
    assert saved["setting_value"]["name"] == "Jane Doe"
    assert saved["setting_value"]["cta_primary"] == "View My Work"
    assert saved["updated_at"] is not None

    listing = admin_client.get("/api/v1/admin/settings").json()
    assert list(listing["settings"]) == ["hero"]

    public = client.get("/api/v1/site/settings/hero").json()
    assert public["setting_value"]["tagline"] == "Designer"


def test_unknown_setting_key_is_not_found(admin_client):
    response = admin_client.put("/api/v1/admin/settings/colors", json={"value": {}})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "VALIDATION_UNKNOWN_SETTING"


def test_invalid_setting_value_is_rejected(admin_client):
    response = admin_client.put(
        "/api/v1/admin/settings/branding", json={"value": {"use_logo": "sometimes"}}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_INVALID_INPUT"


def test_content_crud(admin_client, client):
    created = admin_client.post(
        "/api/v1/admin/content/projects",
        json={"title": "Brand Refresh", "tags": ["branding"], "is_featured": True},
    )
    assert created.status_code == 201
    project = created.json()
    assert project["display_order"] == 0
    project_id = project["id"]

    updated = admin_client.patch(
        f"/api/v1/admin/content/projects/{project_id}", json={"is_visible": False}
    ).json()
    assert updated["title"] == "Brand Refresh"
    assert updated["is_visible"] is False

    assert client.get("/api/v1/site/content/projects").json()["items"] == []
    assert admin_client.get("/api/v1/admin/content/projects").json()["total"] == 1

    deleted = admin_client.delete(f"/api/v1/admin/content/projects/{project_id}")
    assert deleted.status_code == 204
    missing = admin_client.get(f"/api/v1/admin/content/projects/{project_id}")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "CONTENT_NOT_FOUND"


def test_content_validation_errors(admin_client):
    missing_title = admin_client.post("/api/v1/admin/content/projects", json={})
    assert missing_title.status_code == 400

    unknown = admin_client.get("/api/v1/admin/content/widgets")
    assert unknown.status_code == 404
    assert unknown.json()["error"]["code"] == "CONTENT_UNKNOWN_COLLECTION"


def test_duplicate_slug_conflicts(admin_client):
    first = admin_client.post("/api/v1/admin/content/pages", json={"title": "About"})
    assert first.json()["slug"] == "about"

    second = admin_client.post("/api/v1/admin/content/pages", json={"title": "About"})
    assert second.status_code == 409
    assert second.json()["error"]["code"] == "CONTENT_DUPLICATE_SLUG"


def test_reorder_moves_item_up(admin_client):
    ids = [
        admin_client.post(
            "/api/v1/admin/content/faqs", json={"question": q, "answer": "Yes."}
        ).json()["id"]
        for q in ("First?", "Second?", "Third?")
    ]

    response = admin_client.post(
        f"/api/v1/admin/content/faqs/{ids[2]}/reorder", json={"direction": "up"}
    )

    assert response.status_code == 200
    items = response.json()["items"]
    assert [item["id"] for item in items] == [ids[0], ids[2], ids[1]]
    assert [item["display_order"] for item in items] == [0, 1, 2]

    edge = admin_client.post(
        f"/api/v1/admin/content/faqs/{ids[0]}/reorder", json={"direction": "up"}
    )
    assert edge.status_code == 400
    assert edge.json()["error"]["code"] == "CONTENT_REORDER_OUT_OF_RANGE"


def test_dashboard_counts(admin_client, client):
    admin_client.post("/api/v1/admin/content/skills", json={"name": "Figma"})
    admin_client.post("/api/v1/admin/content/skills", json={"name": "Python"})
    client.post(
        "/api/v1/contact",
        json={"name": "Cara", "email": "cara@example.com", "message": "Let's build something."},
    )

    dashboard = admin_client.get("/api/v1/admin/dashboard").json()

    assert dashboard["counts"]["skills"] == 2
    assert dashboard["counts"]["projects"] == 0
    assert dashboard["submissions"] == 1
    assert dashboard["unread_submissions"] == 1
    assert dashboard["recent_submissions"][0]["name"] == "Cara"
