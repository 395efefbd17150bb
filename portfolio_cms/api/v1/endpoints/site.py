"""
Public Site API

Read-only endpoints used by the public site. Only visible or published
content is returned.
"""

from typing import Optional

from fastapi import APIRouter, Query

from portfolio_cms.api.v1.schemas.responses import (
    ContentListResponse,
    SettingResponse,
    SiteDocumentResponse,
)
from portfolio_cms.core.logger import get_logger
from portfolio_cms.document.render import (
    render_body_end,
    render_body_start,
    render_head,
)
from portfolio_cms.models.settings_blobs import PageSEO
from portfolio_cms.services.content_service import ContentService
from portfolio_cms.services.homepage_service import HomepageData, HomepageService
from portfolio_cms.services.settings_service import SettingsService
from portfolio_cms.services.site_document_service import (
    SiteDocumentService,
    page_seo_for_page,
    page_seo_for_post,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/site", tags=["site"])
content_service = ContentService()


@router.get("/homepage", response_model=HomepageData)
async def get_homepage() -> HomepageData:
    """Settings, section visibility and visible content for the homepage."""
    return await HomepageService(content_service=content_service).get_homepage()


@router.get("/settings/{key}", response_model=SettingResponse)
async def get_setting(key: str) -> SettingResponse:
    """
    Stored value of one settings blob.

    ``setting_value`` is null when the key was never saved or could not be
    read; callers fall back to their defaults.
    """
    value = await SettingsService().fetch(key)
    return SettingResponse(setting_key=key, setting_value=value)


@router.get("/content/{collection}", response_model=ContentListResponse)
def list_content(
    collection: str,
    limit: Optional[int] = Query(None, ge=1, le=500),
) -> ContentListResponse:
    items = content_service.list_public(collection, limit=limit)
    return ContentListResponse(collection=collection, items=items, total=len(items))


@router.get("/blog/{slug}")
def get_blog_post(slug: str) -> dict:
    """Published blog post by slug."""
    return content_service.get_public_by_slug("blog_posts", slug)


@router.get("/pages/{slug}")
def get_page(slug: str) -> dict:
    """Published custom page by slug."""
    return content_service.get_public_by_slug("pages", slug)


@router.get("/document", response_model=SiteDocumentResponse)
async def get_document(
    page: Optional[str] = Query(None, description="Custom page slug"),
    post: Optional[str] = Query(None, description="Blog post slug"),
) -> SiteDocumentResponse:
    """
    Head and body fragments with SEO tags, favicon and custom code applied.

    With ``page`` or ``post`` the item's own SEO values are layered over the
    homepage SEO.
    """
    page_seo: Optional[PageSEO] = None
    if post:
        page_seo = page_seo_for_post(
            content_service.get_public_by_slug("blog_posts", post)
        )
    elif page:
        page_seo = page_seo_for_page(content_service.get_public_by_slug("pages", page))

    document = await SiteDocumentService().build(page=page_seo)
    return SiteDocumentResponse(
        title=document.title,
        head=str(render_head(document)),
        body_start=str(render_body_start(document)),
        body_end=str(render_body_end(document)),
    )


__all__ = ["router"]
