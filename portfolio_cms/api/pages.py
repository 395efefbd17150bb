"""
Pages API

Serves the public site and the admin shell as HTML. Every public page is
rendered from a document with the SEO tags, favicon and custom code applied.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from portfolio_cms.core.config import settings
from portfolio_cms.core.exceptions import AuthException, NotFoundException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.document import (
    Document,
    render_body_end,
    render_body_start,
    render_head,
)
from portfolio_cms.models.settings_blobs import PageSEO
from portfolio_cms.services.auth_service import AuthSession, get_auth_service
from portfolio_cms.services.content_service import ContentService
from portfolio_cms.services.homepage_service import HomepageService
from portfolio_cms.services.site_document_service import (
    SiteDocumentService,
    page_seo_for_page,
    page_seo_for_post,
)

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
content_service = ContentService()


def _document_context(document: Document) -> Dict[str, Any]:
    return {
        "document_title": document.title,
        "document_head": render_head(document),
        "document_body_start": render_body_start(document),
        "document_body_end": render_body_end(document),
    }


async def _render_site_page(
    request: Request,
    template: str,
    context: Dict[str, Any],
    page_seo: Optional[PageSEO] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    homepage_service = HomepageService(content_service=content_service)
    navigation = await homepage_service.get_navigation()
    document = await SiteDocumentService(homepage_service.settings_service).build(
        page=page_seo
    )
    return templates.TemplateResponse(
        request,
        template,
        {
            "static_asset_version": settings.static__asset_version,
            **navigation,
            **_document_context(document),
            **context,
        },
        status_code=status_code,
    )


async def render_not_found(request: Request, what: str) -> HTMLResponse:
    """The not-found view, served with status 404."""
    return await _render_site_page(
        request,
        "not_found.html",
        {"missing": what},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _current_session(request: Request) -> Optional[AuthSession]:
    try:
        return get_auth_service().resolve_session(
            request.cookies.get(settings.auth__cookie_name)
        )
    except AuthException:
        return None


@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request):
    """Homepage with every visible section."""
    homepage = await HomepageService(content_service=content_service).get_homepage()
    return await _render_site_page(request, "site.html", {"homepage": homepage})


@router.get("/page/{slug}", response_class=HTMLResponse)
async def custom_page(request: Request, slug: str):
    """Published custom page; the not-found view when there is none."""
    try:
        page = content_service.get_public_by_slug("pages", slug)
    except NotFoundException:
        return await render_not_found(request, f"/page/{slug}")
    return await _render_site_page(
        request, "page.html", {"page": page}, page_seo=page_seo_for_page(page)
    )


@router.get("/blog/{slug}", response_class=HTMLResponse)
async def blog_post_page(request: Request, slug: str):
    """Published blog post; the not-found view when there is none."""
    try:
        post = content_service.get_public_by_slug("blog_posts", slug)
    except NotFoundException:
        return await render_not_found(request, f"/blog/{slug}")
    return await _render_site_page(
        request, "page.html", {"post": post}, page_seo=page_seo_for_post(post)
    )


@router.get("/auth", response_class=HTMLResponse)
async def auth_page(request: Request):
    """Admin sign-in form; signed-in admins go straight to the admin."""
    if _current_session(request) is not None:
        return RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(
        request,
        "auth.html",
        {"static_asset_version": settings.static__asset_version},
    )


@router.get("/admin", response_class=HTMLResponse)
async def admin_page(request: Request):
    """Admin shell; signed-out visitors are sent to ``/auth``."""
    session = _current_session(request)
    if session is None:
        return RedirectResponse("/auth", status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "static_asset_version": settings.static__asset_version,
            "user": session.user,
        },
    )


__all__ = ["render_not_found", "router", "templates"]
