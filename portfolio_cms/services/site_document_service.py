"""
Site Document Service

Builds the document every public page is rendered from. The SEO, favicon
and custom code settings are fetched concurrently and each is applied on
its own: a setting that is missing, malformed or failed to load leaves its
part of the document as it was.
"""

from typing import Any, Dict, Optional

from portfolio_cms.core.config import settings
from portfolio_cms.core.logger import get_logger
from portfolio_cms.document import (
    CustomCodeInjector,
    Document,
    FaviconSynchronizer,
    SeoSynchronizer,
)
from portfolio_cms.document.render import CONTENT_ID
from portfolio_cms.models.settings_blobs import (
    CustomCodeSettings,
    FaviconSettings,
    PageSEO,
    SEOSettings,
    load_setting,
)
from portfolio_cms.services.settings_service import SettingsService

logger = get_logger(__name__)

DOCUMENT_SETTINGS = ("seo_settings", "favicon", "custom_code")


def page_seo_for_page(page: Dict[str, Any]) -> PageSEO:
    """Per-page SEO overlay of a custom page."""
    return PageSEO.model_validate(
        {
            "title": page.get("seo_title") or page.get("title"),
            "description": page.get("seo_description") or page.get("excerpt"),
            "keywords": ", ".join(page.get("seo_keywords") or []),
            "og_image": page.get("image_url"),
        }
    )


def page_seo_for_post(post: Dict[str, Any]) -> PageSEO:
    """Per-page SEO overlay of a blog post."""
    return PageSEO.model_validate(
        {
            "title": post.get("title"),
            "description": post.get("excerpt"),
            "keywords": ", ".join(post.get("tags") or []),
            "og_image": post.get("image_url"),
            "og_type": "article",
        }
    )


class SiteDocumentService:
    """Builds synchronized page documents."""

    def __init__(self, settings_service: Optional[SettingsService] = None) -> None:
        self.settings_service = settings_service or SettingsService()

    @staticmethod
    def new_document() -> Document:
        """Base document with the default title and the content placeholder."""
        document = Document(title=settings.site__default_title)
        placeholder = document.create_element("div")
        placeholder.set_attribute("id", CONTENT_ID)
        document.body.append_child(placeholder)
        return document

    async def build(
        self,
        page: Optional[PageSEO] = None,
        document: Optional[Document] = None,
    ) -> Document:
        """
        Fetch the document settings and apply them.

        Args:
            page: Per-page SEO values layered over the homepage SEO
            document: Document to update; a new base document when omitted
        """
        document = document or self.new_document()
        raw = await self.settings_service.fetch_many(DOCUMENT_SETTINGS)
        self.apply(document, raw, page)
        return document

    @staticmethod
    def apply(
        document: Document,
        raw: Dict[str, Any],
        page: Optional[PageSEO] = None,
    ) -> None:
        seo: Optional[SEOSettings] = load_setting("seo_settings", raw.get("seo_settings"))
        favicon: Optional[FaviconSettings] = load_setting("favicon", raw.get("favicon"))
        code: Optional[CustomCodeSettings] = load_setting(
            "custom_code", raw.get("custom_code")
        )

        SeoSynchronizer(document).apply(seo, page)
        FaviconSynchronizer(document).apply(favicon.favicon_url if favicon else None)
        CustomCodeInjector(document).apply(code)
        logger.debug(
            "Document built (seo=%s, favicon=%s, custom_code=%s)",
            seo is not None,
            favicon is not None,
            code is not None,
        )


__all__ = [
    "DOCUMENT_SETTINGS",
    "SiteDocumentService",
    "page_seo_for_page",
    "page_seo_for_post",
]
