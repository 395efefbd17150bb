def _save(admin_client, key, value):
    response = admin_client.put(f"/api/v1/admin/settings/{key}", json={"value": value})
    assert response.status_code == 200


def test_homepage_renders_with_defaults(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert '<main id="site-content">' in response.text


def test_homepage_applies_document_settings(admin_client, client):
    _save(
        admin_client,
        "seo_settings",
        {
            "homepage": {"title": "Jane Doe | Design", "description": "A designer portfolio"},
            "global": {"site_name": "Jane Doe"},
        },
    )
    _save(admin_client, "favicon", {"favicon_url": "/uploads/favicon-1.png"})
    _save(
        admin_client,
        "custom_code",
        {"head_code": '<script data-injected="head">window.injectedHead = 1;</script>'},
    )

    html = client.get("/").text

    assert "<title>Jane Doe | Design</title>" in html
    assert 'content="A designer portfolio"' in html
    assert 'href="/uploads/favicon-1.png"' in html
    assert 'data-injected="head"' in html
    assert "window.injectedHead = 1;" in html


def test_hidden_section_is_not_rendered(admin_client, client):
    _save(admin_client, "hero", {"name": "Jane Doe", "tagline": "Brand designer"})
    assert "Brand designer" in client.get("/").text

    _save(admin_client, "sections", {"hero": False})

    assert "Brand designer" not in client.get("/").text


def test_published_blog_post_page(admin_client, client):
    admin_client.post(
        "/api/v1/admin/content/blog_posts",
        json={"title": "Hello World", "excerpt": "First post", "is_published": True},
    )

    response = client.get("/blog/hello-world")

    assert response.status_code == 200
    assert "Hello World" in response.text
    assert 'content="article"' in response.text


def test_unpublished_page_is_not_found(admin_client, client):
    admin_client.post("/api/v1/admin/content/pages", json={"title": "Draft"})

    response = client.get("/page/draft")

    assert response.status_code == 404
    assert "Oops! Page not found" in response.text


def test_missing_blog_post_is_not_found(client):
    response = client.get("/blog/missing")

    assert response.status_code == 404
    assert "Oops! Page not found" in response.text


def test_admin_redirects_to_sign_in(client):
    response = client.get("/admin", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/auth"


def test_sign_in_redirects_signed_in_admin(admin_client):
    response = admin_client.get("/auth", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin"
    assert admin_client.get("/admin").status_code == 200


def test_unknown_site_path_renders_not_found_view(client):
    response = client.get("/no/such/page")

    assert response.status_code == 404
    assert "Oops! Page not found" in response.text


def test_unknown_api_path_returns_json_error(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "API_NOT_FOUND"
