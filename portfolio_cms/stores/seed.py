"""
Default Rows

Rows a fresh database starts with. Seeding is idempotent: rows that already
exist are left alone.
"""

from typing import Any, Dict, List

from portfolio_cms.core.logger import get_logger
from portfolio_cms.models import FooterSection
from portfolio_cms.models.settings_blobs import SectionsSettings
from portfolio_cms.stores.content_store import ContentStore
from portfolio_cms.stores.site_settings_store import SiteSettingsStore

logger = get_logger(__name__)

DEFAULT_FOOTER_SECTIONS: List[Dict[str, Any]] = [
    {"section_key": "copyright", "section_data": {"text": "All rights reserved."}},
    {
        "section_key": "cta_button",
        "section_data": {"text": "Let's Work Together", "href": "#contact"},
    },
    {"section_key": "footer_links", "section_data": {"columns": []}},
]


def seed_defaults() -> Dict[str, int]:
    """
    Insert the default footer sections and section visibility.

    Returns:
        Number of rows created per kind
    """
    created = {"footer_sections": 0, "settings": 0}

    footer_store = ContentStore(FooterSection)
    for position, section in enumerate(DEFAULT_FOOTER_SECTIONS):
        if footer_store.get_by_field("section_key", section["section_key"]):
            continue
        footer_store.create({**section, "display_order": position, "is_visible": True})
        created["footer_sections"] += 1

    settings_store = SiteSettingsStore()
    if settings_store.get_setting("sections") is None:
        settings_store.upsert_setting("sections", SectionsSettings().to_storage())
        created["settings"] += 1

    logger.info("Seeded defaults: %s", created)
    return created


__all__ = ["DEFAULT_FOOTER_SECTIONS", "seed_defaults"]
