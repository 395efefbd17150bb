"""
Meta/SEO synchronizer.

Writes the document title and the description, keywords, Open Graph and
Twitter meta tags from the ``seo_settings`` blob. Every derived tag walks a
fallback chain (page value, its Open Graph equivalent, the plain meta value,
the global default, a hardcoded default) and is skipped when the chain ends
empty. Tags are only ever created or updated, never removed, so applying the
same settings twice leaves the head unchanged.
"""

from typing import List, Optional, Tuple

from portfolio_cms.core.logger import get_logger
from portfolio_cms.document.dom import DocumentSink
from portfolio_cms.models.settings_blobs import PageSEO, SEOSettings

logger = get_logger(__name__)

DEFAULT_OG_TYPE = "website"
DEFAULT_TWITTER_CARD = "summary_large_image"


def _first(*values: Optional[str]) -> str:
    for value in values:
        if value:
            return value
    return ""


def merge_page_seo(base: PageSEO, overlay: Optional[PageSEO]) -> PageSEO:
    """Fields set on ``overlay`` win over ``base``."""
    if overlay is None:
        return base
    merged = base.model_dump()
    merged.update({k: v for k, v in overlay.model_dump().items() if v})
    return PageSEO.model_validate(merged)


def resolve_tags(
    seo: SEOSettings, page: Optional[PageSEO] = None
) -> List[Tuple[str, str, str]]:
    """
    Meta tags implied by ``seo`` as ``(attribute, key, content)`` triples.

    Tags whose fallback chain ends empty are left out.
    """
    p = merge_page_seo(seo.homepage, page)
    g = seo.global_

    tags = [
        ("name", "description", p.description),
        ("name", "keywords", p.keywords),
        ("property", "og:title", _first(p.og_title, p.title)),
        ("property", "og:description", _first(p.og_description, p.description)),
        ("property", "og:image", _first(p.og_image, g.default_og_image)),
        ("property", "og:type", _first(p.og_type, DEFAULT_OG_TYPE)),
        ("property", "og:site_name", g.site_name),
        ("name", "twitter:card", _first(p.twitter_card, DEFAULT_TWITTER_CARD)),
        ("name", "twitter:title", _first(p.twitter_title, p.og_title, p.title)),
        (
            "name",
            "twitter:description",
            _first(p.twitter_description, p.og_description, p.description),
        ),
        (
            "name",
            "twitter:image",
            _first(p.twitter_image, p.og_image, g.default_og_image),
        ),
        ("name", "twitter:site", _first(p.twitter_site, g.twitter_site)),
    ]
    return [tag for tag in tags if tag[2]]


class SeoSynchronizer:
    """Applies SEO settings to a document sink."""

    def __init__(self, sink: DocumentSink) -> None:
        self.sink = sink

    def apply(self, seo: Optional[SEOSettings], page: Optional[PageSEO] = None) -> None:
        """
        Update title and meta tags.

        With neither ``seo`` nor ``page`` the document is left alone. A page
        overlay without site settings is layered over the defaults.

        Args:
            seo: Site-wide SEO settings
            page: Optional per-page values (custom pages, blog posts) layered
                over the homepage fields
        """
        if seo is None:
            if page is None:
                return
            seo = SEOSettings()

        title = merge_page_seo(seo.homepage, page).title
        if title:
            self.sink.set_title(title)

        tags = resolve_tags(seo, page)
        for attribute, key, content in tags:
            self.sink.upsert_meta(attribute, key, content)
        logger.debug("Applied %d SEO meta tags", len(tags))


__all__ = [
    "DEFAULT_OG_TYPE",
    "DEFAULT_TWITTER_CARD",
    "SeoSynchronizer",
    "merge_page_seo",
    "resolve_tags",
]
