from portfolio_cms.document.sections import resolve_sections, visible_sections
from portfolio_cms.models.settings_blobs import SECTION_KEYS


def test_missing_blob_shows_everything():
    resolved = resolve_sections(None)
    assert visible_sections(resolved) == list(SECTION_KEYS)


def test_only_false_hides_a_section():
    resolved = resolve_sections({"blog": False})

    assert resolved.blog is False
    assert all(getattr(resolved, key) for key in SECTION_KEYS if key != "blog")
    assert "blog" not in visible_sections(resolved)


def test_non_boolean_values_are_ignored():
    resolved = resolve_sections({"faq": "no", "media": 0, "stats": None, "hero": True})

    assert resolved.faq is True
    assert resolved.media is True
    assert resolved.stats is True
    assert resolved.hero is True


def test_malformed_blob_shows_everything():
    assert visible_sections(resolve_sections(["blog"])) == list(SECTION_KEYS)
