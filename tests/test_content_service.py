import pytest

from portfolio_cms.core.error_codes import (
    ContentErrorCode,
    ValidationErrorCode,
)
from portfolio_cms.core.exceptions import NotFoundException, ValidationException
from portfolio_cms.services.content_service import ContentService, generate_slug


@pytest.fixture
def service():
    return ContentService()


@pytest.mark.parametrize(
    "text, slug",
    [
        ("Hello World", "hello-world"),
        ("  Hello,   World!  ", "hello-world"),
        ("C++ & Rust: 2024", "c-rust-2024"),
        ("---", ""),
    ],
)
def test_generate_slug(text, slug):
    assert generate_slug(text) == slug


def test_unknown_collection(service):
    with pytest.raises(NotFoundException) as exc_info:
        service.list_public("widgets")
    assert exc_info.value.error_code == ContentErrorCode.UNKNOWN_COLLECTION


def test_create_requires_fields(service):
    with pytest.raises(ValidationException) as exc_info:
        service.create("projects", {"description": "no title"})
    assert exc_info.value.error_code == ValidationErrorCode.MISSING_FIELD
    assert "title" in exc_info.value.details["missing_fields"]


def test_create_rejects_unknown_fields(service):
    with pytest.raises(ValidationException) as exc_info:
        service.create("skills", {"name": "Python", "colour": "blue"})
    assert exc_info.value.error_code == ValidationErrorCode.INVALID_INPUT


def test_create_appends_to_display_order(service):
    first = service.create("nav_items", {"label": "Home", "href": "/"})
    second = service.create("nav_items", {"label": "Blog", "href": "/#blog"})

    assert first["display_order"] == 0
    assert second["display_order"] == 1


def test_public_listing_hides_invisible_rows(service):
    service.create("projects", {"title": "Shown"})
    service.create("projects", {"title": "Hidden", "is_visible": False})

    titles = [p["title"] for p in service.list_public("projects")]
    assert titles == ["Shown"]
    assert len(service.list_admin("projects")) == 2


def test_update_is_partial(service):
    project = service.create(
        "projects", {"title": "Site", "tags": ["python"], "is_featured": True}
    )

    updated = service.update("projects", project["id"], {"title": "New Site"})

    assert updated["title"] == "New Site"
    assert updated["tags"] == ["python"]
    assert updated["is_featured"] is True
    assert updated["display_order"] == project["display_order"]


def test_update_missing_row(service):
    with pytest.raises(NotFoundException):
        service.update("projects", "missing", {"title": "x"})


def test_delete(service):
    faq = service.create("faqs", {"question": "Why?", "answer": "Because."})
    service.delete("faqs", faq["id"])

    with pytest.raises(NotFoundException):
        service.get("faqs", faq["id"])
    with pytest.raises(NotFoundException):
        service.delete("faqs", faq["id"])


def test_blog_slug_generated_and_unique(service):
    post = service.create("blog_posts", {"title": "Hello World"})
    assert post["slug"] == "hello-world"

    with pytest.raises(ValidationException) as exc_info:
        service.create("blog_posts", {"title": "Hello, world!"})
    assert exc_info.value.error_code == ContentErrorCode.DUPLICATE_SLUG

    other = service.create("blog_posts", {"title": "Hello World", "slug": "Second Post"})
    assert other["slug"] == "second-post"


def test_blog_published_at_follows_publishing(service):
    post = service.create("blog_posts", {"title": "Draft"})
    assert post["published_at"] is None

    published = service.update("blog_posts", post["id"], {"is_published": True})
    assert published["published_at"] is not None

    edited = service.update("blog_posts", post["id"], {"excerpt": "Now with text"})
    assert edited["published_at"] == published["published_at"]

    unpublished = service.update("blog_posts", post["id"], {"is_published": False})
    assert unpublished["published_at"] is None


def test_public_slug_lookup_requires_published(service):
    service.create("pages", {"title": "About Me", "is_published": False})

    with pytest.raises(NotFoundException):
        service.get_public_by_slug("pages", "about-me")

    page = service.list_admin("pages")[0]
    service.update("pages", page["id"], {"is_published": True})
    assert service.get_public_by_slug("pages", "about-me")["title"] == "About Me"


def test_public_blog_listing_respects_limit(service):
    for title in ("One", "Two", "Three", "Four"):
        service.create("blog_posts", {"title": title, "is_published": True})
    service.create("blog_posts", {"title": "Draft"})

    assert len(service.list_public("blog_posts")) == 4
    assert len(service.list_public("blog_posts", limit=3)) == 3


def test_reorder_swaps_with_neighbour(service):
    ids = [
        service.create("skills", {"name": name})["id"]
        for name in ("Python", "SQL", "Docker")
    ]

    items = service.reorder("skills", ids[2], "up")

    assert [item["name"] for item in items] == ["Python", "Docker", "SQL"]
    assert [item["display_order"] for item in items] == [0, 1, 2]


def test_reorder_renumbers_ties(service):
    first = service.create("services", {"title": "A", "display_order": 5})
    second = service.create("services", {"title": "B", "display_order": 5})

    items = service.reorder("services", second["id"], "up")

    assert [item["id"] for item in items] == [second["id"], first["id"]]


@pytest.mark.parametrize("position, direction", [(0, "up"), (-1, "down")])
def test_reorder_out_of_range(service, position, direction):
    ids = [service.create("faqs", {"question": q, "answer": "a"})["id"] for q in "xy"]

    with pytest.raises(ValidationException) as exc_info:
        service.reorder("faqs", ids[position], direction)
    assert exc_info.value.error_code == ContentErrorCode.REORDER_OUT_OF_RANGE
