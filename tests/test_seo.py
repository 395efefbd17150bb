from portfolio_cms.document.dom import Document
from portfolio_cms.document.seo import SeoSynchronizer, resolve_tags
from portfolio_cms.models.settings_blobs import PageSEO, SEOSettings


class RecordingSink:
    def __init__(self):
        self.title = None
        self.meta = {}

    def set_title(self, title):
        self.title = title

    def upsert_meta(self, attribute, key, content):
        self.meta[(attribute, key)] = content

    def replace_container(self, container_id, position, html):
        raise AssertionError("SEO never touches containers")

    def set_favicon(self, url):
        raise AssertionError("SEO never touches the favicon")


def test_none_settings_leave_document_untouched():
    sink = RecordingSink()
    SeoSynchronizer(sink).apply(None)

    assert sink.title is None
    assert sink.meta == {}


def test_only_title_set_uses_fallbacks_and_defaults():
    seo = SEOSettings.model_validate({"homepage": {"title": "My Site"}})
    sink = RecordingSink()

    SeoSynchronizer(sink).apply(seo)

    assert sink.title == "My Site"
    assert sink.meta == {
        ("property", "og:title"): "My Site",
        ("property", "og:type"): "website",
        ("name", "twitter:card"): "summary_large_image",
        ("name", "twitter:title"): "My Site",
    }


def test_fallback_chain_prefers_specific_values():
    seo = SEOSettings.model_validate(
        {
            "homepage": {
                "title": "T",
                "description": "D",
                "og_description": "OGD",
                "og_image": "https://cdn.example.com/og.png",
            },
            "global": {
                "site_name": "Site",
                "default_og_image": "https://cdn.example.com/default.png",
                "twitter_site": "@site",
            },
        }
    )
    tags = {(a, k): v for a, k, v in resolve_tags(seo)}

    assert tags[("name", "description")] == "D"
    assert tags[("property", "og:description")] == "OGD"
    assert tags[("name", "twitter:description")] == "OGD"
    assert tags[("property", "og:image")] == "https://cdn.example.com/og.png"
    assert tags[("name", "twitter:image")] == "https://cdn.example.com/og.png"
    assert tags[("property", "og:site_name")] == "Site"
    assert tags[("name", "twitter:site")] == "@site"
    assert ("name", "keywords") not in tags


def test_global_default_image_used_without_page_image():
    seo = SEOSettings.model_validate(
        {"global": {"default_og_image": "https://cdn.example.com/default.png"}}
    )
    tags = {(a, k): v for a, k, v in resolve_tags(seo)}

    assert tags[("property", "og:image")] == "https://cdn.example.com/default.png"
    assert tags[("name", "twitter:image")] == "https://cdn.example.com/default.png"


def test_page_values_override_homepage():
    seo = SEOSettings.model_validate(
        {"homepage": {"title": "Home", "description": "Home description"}}
    )
    page = PageSEO(title="Post", og_type="article")
    tags = {(a, k): v for a, k, v in resolve_tags(seo, page)}

    assert tags[("property", "og:title")] == "Post"
    assert tags[("property", "og:type")] == "article"
    assert tags[("name", "description")] == "Home description"


def test_applying_twice_does_not_duplicate_meta_tags():
    seo = SEOSettings.model_validate(
        {"homepage": {"title": "T", "description": "D", "keywords": "a, b"}}
    )
    document = Document()

    SeoSynchronizer(document).apply(seo)
    first = [list(meta.attributes) for meta in document.head.find_all("meta")]
    SeoSynchronizer(document).apply(seo)
    second = [list(meta.attributes) for meta in document.head.find_all("meta")]

    assert first == second
    assert document.query_meta("name", "keywords").get_attribute("content") == "a, b"
    assert len(document.head.find_all("title")) == 1


def test_existing_meta_tag_is_updated_in_place():
    document = Document()
    meta = document.create_element("meta")
    meta.set_attribute("name", "description")
    meta.set_attribute("content", "stale")
    document.head.append_child(meta)

    seo = SEOSettings.model_validate({"homepage": {"description": "fresh"}})
    SeoSynchronizer(document).apply(seo)

    descriptions = [
        m for m in document.head.find_all("meta") if m.get_attribute("name") == "description"
    ]
    assert descriptions == [meta]
    assert meta.get_attribute("content") == "fresh"


def test_page_overlay_applies_without_site_settings():
    sink = RecordingSink()

    SeoSynchronizer(sink).apply(None, PageSEO(title="Hello World", og_type="article"))

    assert sink.title == "Hello World"
    assert sink.meta[("property", "og:title")] == "Hello World"
    assert sink.meta[("property", "og:type")] == "article"
    assert sink.meta[("name", "twitter:title")] == "Hello World"
