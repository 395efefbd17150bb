"""
Homepage Service

Aggregates everything the homepage shows: typed settings blobs, resolved
section visibility and the visible content lists. Any list that cannot be
read comes back empty instead of failing the page.
"""

import asyncio
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from portfolio_cms.core.exceptions import ApplicationException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.document.sections import resolve_sections, visible_sections
from portfolio_cms.models.settings_blobs import (
    AboutSettings,
    BrandingSettings,
    ContactSettings,
    HeroSettings,
    SectionsSettings,
    StatsSettings,
    load_setting_with_defaults,
)
from portfolio_cms.services.content_service import ContentService
from portfolio_cms.services.settings_service import SettingsService

logger = get_logger(__name__)

RECENT_BLOG_POSTS = 3

Item = Dict[str, Any]


class HomepageData(BaseModel):
    """Everything rendered on ``/``."""

    hero: HeroSettings
    about: AboutSettings
    contact: ContactSettings
    stats: StatsSettings
    branding: BrandingSettings
    sections: SectionsSettings
    visible_sections: List[str]
    projects: List[Item] = Field(default_factory=list)
    featured_projects: List[Item] = Field(default_factory=list)
    skills: List[Item] = Field(default_factory=list)
    services: List[Item] = Field(default_factory=list)
    testimonials: List[Item] = Field(default_factory=list)
    blog_posts: List[Item] = Field(default_factory=list)
    faqs: List[Item] = Field(default_factory=list)
    case_studies: List[Item] = Field(default_factory=list)
    media: List[Item] = Field(default_factory=list)
    nav_items: List[Item] = Field(default_factory=list)
    footer_sections: Dict[str, Any] = Field(default_factory=dict)


class HomepageService:
    """Builds the homepage aggregate."""

    def __init__(
        self,
        settings_service: SettingsService | None = None,
        content_service: ContentService | None = None,
    ) -> None:
        self.settings_service = settings_service or SettingsService()
        self.content_service = content_service or ContentService()

    async def _safe_list(self, collection: str, **kwargs: Any) -> List[Item]:
        try:
            return await asyncio.to_thread(
                self.content_service.list_public, collection, **kwargs
            )
        except ApplicationException as e:
            logger.warning("Homepage list '%s' unavailable: %s", collection, e.message)
            return []

    async def get_navigation(self) -> Dict[str, Any]:
        """Branding, nav items and footer sections shared by every public page."""
        branding_raw, nav_items, footer = await asyncio.gather(
            self.settings_service.fetch("branding"),
            self._safe_list("nav_items"),
            self._safe_list("footer_sections"),
        )
        return {
            "branding": load_setting_with_defaults("branding", branding_raw),
            "nav_items": nav_items,
            "footer_sections": {s["section_key"]: s["section_data"] for s in footer},
        }

    async def get_homepage(self) -> HomepageData:
        raw = await self.settings_service.fetch_all()
        sections = resolve_sections(raw.get("sections"))

        (
            projects,
            skills,
            services,
            testimonials,
            blog_posts,
            faqs,
            case_studies,
            media,
            navigation,
        ) = await asyncio.gather(
            self._safe_list("projects"),
            self._safe_list("skills"),
            self._safe_list("services"),
            self._safe_list("testimonials"),
            self._safe_list("blog_posts", limit=RECENT_BLOG_POSTS),
            self._safe_list("faqs"),
            self._safe_list("case_studies"),
            self._safe_list("media"),
            self.get_navigation(),
        )

        return HomepageData(
            hero=load_setting_with_defaults("hero", raw.get("hero")),
            about=load_setting_with_defaults("about", raw.get("about")),
            contact=load_setting_with_defaults("contact", raw.get("contact")),
            stats=load_setting_with_defaults("stats", raw.get("stats")),
            branding=navigation["branding"],
            sections=sections,
            visible_sections=visible_sections(sections),
            projects=projects,
            featured_projects=[p for p in projects if p.get("is_featured")],
            skills=skills,
            services=services,
            testimonials=testimonials,
            blog_posts=blog_posts,
            faqs=faqs,
            case_studies=case_studies,
            media=media,
            nav_items=navigation["nav_items"],
            footer_sections=navigation["footer_sections"],
        )


__all__ = ["HomepageData", "HomepageService", "RECENT_BLOG_POSTS"]
