import pytest

from portfolio_cms.document.dom import Document
from portfolio_cms.document.favicon import FaviconSynchronizer

URL = "https://cdn.example.com/favicon.png"


def _add_link(document, rel, href):
    link = document.create_element("link")
    link.set_attribute("rel", rel)
    link.set_attribute("href", href)
    document.head.append_child(link)
    return link


@pytest.mark.parametrize(
    "existing",
    [
        [],
        ["icon"],
        ["icon", "shortcut icon", "apple-touch-icon"],
    ],
)
def test_exactly_one_icon_and_one_apple_touch_icon(existing):
    document = Document()
    for rel in existing:
        _add_link(document, rel, "/old.ico")

    FaviconSynchronizer(document).apply(URL)

    icons = document.query_links("icon")
    rels = sorted(link.get_attribute("rel") for link in icons)
    assert rels == ["apple-touch-icon", "icon"]
    assert all(link.get_attribute("href") == URL for link in icons)
    icon = next(link for link in icons if link.get_attribute("rel") == "icon")
    assert icon.get_attribute("type") == "image/x-icon"


def test_reapplying_does_not_duplicate_links():
    document = Document()
    FaviconSynchronizer(document).apply(URL)
    FaviconSynchronizer(document).apply("https://cdn.example.com/other.ico")

    assert len(document.query_links("icon")) == 2


@pytest.mark.parametrize("value", [None, ""])
def test_missing_url_leaves_links_alone(value):
    document = Document()
    old = _add_link(document, "icon", "/old.ico")

    FaviconSynchronizer(document).apply(value)

    assert document.query_links("icon") == [old]


def test_other_links_are_kept():
    document = Document()
    stylesheet = _add_link(document, "stylesheet", "/site.css")

    FaviconSynchronizer(document).apply(URL)

    assert stylesheet.parent is document.head
