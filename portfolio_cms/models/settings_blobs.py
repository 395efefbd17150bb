"""
Settings Blob Schemas

Pydantic shapes for every named JSON blob in ``site_settings``.

Stored values are written by the admin and read by every public page. Reads
go through ``load_setting`` / ``load_setting_with_defaults`` so that a
malformed blob degrades to ``None`` or to the schema defaults instead of
failing deep inside rendering code.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from portfolio_cms.core.logger import get_logger

logger = get_logger(__name__)


class SettingsBlob(BaseModel):
    """Base for settings blobs: unknown keys ignored, nulls fall back to defaults."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_storage(self) -> Dict[str, Any]:
        """JSON-ready value as persisted in ``setting_value``."""
        return self.model_dump(mode="json", by_alias=True)


class HeroSettings(SettingsBlob):
    name: str = ""
    tagline: str = ""
    bio: str = ""
    image_url: str = ""
    cta_primary: str = "View My Work"
    cta_secondary: str = "Get In Touch"


class AboutSettings(SettingsBlob):
    title: str = "About Me"
    content: str = ""
    image_url: str = ""
    highlights: List[str] = Field(default_factory=list)


class SocialLinks(SettingsBlob):
    twitter: str = ""
    linkedin: str = ""
    github: str = ""
    instagram: str = ""


class ContactSettings(SettingsBlob):
    email: str = ""
    phone: str = ""
    location: str = ""
    social_links: SocialLinks = Field(default_factory=SocialLinks)


class StatItem(SettingsBlob):
    label: str
    value: str


def _default_stats() -> List[StatItem]:
    return [
        StatItem(label="Years Experience", value="5+"),
        StatItem(label="Projects Completed", value="50+"),
        StatItem(label="Happy Clients", value="30+"),
        StatItem(label="Awards Won", value="10+"),
    ]


class StatsSettings(SettingsBlob):
    items: List[StatItem] = Field(default_factory=_default_stats)


SECTION_KEYS = (
    "hero",
    "about",
    "skills",
    "featured_projects",
    "portfolio",
    "services",
    "testimonials",
    "blog",
    "media",
    "stats",
    "faq",
    "contact",
)


class SectionsSettings(SettingsBlob):
    """Homepage section visibility; every section is shown unless switched off."""

    hero: bool = True
    about: bool = True
    skills: bool = True
    featured_projects: bool = True
    portfolio: bool = True
    services: bool = True
    testimonials: bool = True
    blog: bool = True
    media: bool = True
    stats: bool = True
    faq: bool = True
    contact: bool = True


class FaviconSettings(SettingsBlob):
    favicon_url: str = ""


class BrandingSettings(SettingsBlob):
    site_name: str = "Portfolio"
    logo_url: str = ""
    use_logo: bool = False


class PageSEO(SettingsBlob):
    """Per-page SEO fields; empty strings mean "not set"."""

    title: str = ""
    description: str = ""
    keywords: str = ""
    og_title: str = ""
    og_description: str = ""
    og_image: str = ""
    og_type: str = ""
    twitter_card: str = ""
    twitter_title: str = ""
    twitter_description: str = ""
    twitter_image: str = ""
    twitter_site: str = ""


class GlobalSEO(SettingsBlob):
    site_name: str = ""
    default_og_image: str = ""
    twitter_site: str = ""


class SEOSettings(SettingsBlob):
    homepage: PageSEO = Field(default_factory=PageSEO)
    global_: GlobalSEO = Field(default_factory=GlobalSEO, alias="global")


class CustomCodeSettings(SettingsBlob):
    head_code: str = ""
    body_start_code: str = ""
    body_end_code: str = ""


SETTING_SCHEMAS: Dict[str, Type[SettingsBlob]] = {
    "hero": HeroSettings,
    "about": AboutSettings,
    "contact": ContactSettings,
    "stats": StatsSettings,
    "sections": SectionsSettings,
    "favicon": FaviconSettings,
    "branding": BrandingSettings,
    "seo_settings": SEOSettings,
    "custom_code": CustomCodeSettings,
}


def load_setting(key: str, raw: Any) -> Optional[SettingsBlob]:
    """
    Parse a stored blob into its schema.

    Returns ``None`` when the value is absent, when the key has no schema, or
    when the stored value does not match the schema.
    """
    schema = SETTING_SCHEMAS.get(key)
    if schema is None or raw is None:
        return None
    try:
        return schema.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            "Ignoring malformed '%s' setting (%d errors)", key, exc.error_count()
        )
        return None


def load_setting_with_defaults(key: str, raw: Any) -> SettingsBlob:
    """Parse a stored blob, falling back to the schema defaults."""
    schema = SETTING_SCHEMAS[key]
    return load_setting(key, raw) or schema()


__all__ = [
    "AboutSettings",
    "BrandingSettings",
    "ContactSettings",
    "CustomCodeSettings",
    "FaviconSettings",
    "GlobalSEO",
    "HeroSettings",
    "PageSEO",
    "SECTION_KEYS",
    "SETTING_SCHEMAS",
    "SEOSettings",
    "SectionsSettings",
    "SettingsBlob",
    "SocialLinks",
    "StatItem",
    "StatsSettings",
    "load_setting",
    "load_setting_with_defaults",
]
