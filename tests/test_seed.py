from portfolio_cms.services.content_service import ContentService
from portfolio_cms.stores.seed import seed_defaults


def test_seed_creates_footer_and_sections():
    assert seed_defaults() == {"footer_sections": 3, "settings": 1}

    footer = ContentService().list_admin("footer_sections")
    assert [row["section_key"] for row in footer] == [
        "copyright",
        "cta_button",
        "footer_links",
    ]


def test_seed_is_idempotent():
    seed_defaults()

    assert seed_defaults() == {"footer_sections": 0, "settings": 0}
    assert ContentService().count("footer_sections") == 3


def test_seeded_footer_reaches_navigation(client):
    seed_defaults()

    html = client.get("/").text

    assert "All rights reserved." in html
    assert "Let&#39;s Work Together" in html or "Let's Work Together" in html
