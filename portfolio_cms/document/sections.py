"""Homepage section visibility."""

from typing import Any, List

from portfolio_cms.models.settings_blobs import SECTION_KEYS, SectionsSettings


def resolve_sections(raw: Any) -> SectionsSettings:
    """
    Merge a stored ``sections`` blob over the all-visible default.

    A key is hidden only when it is stored as ``False``; absent keys and
    non-boolean values leave the section visible.
    """
    values = raw if isinstance(raw, dict) else {}
    return SectionsSettings(
        **{
            key: values[key] if isinstance(values.get(key), bool) else True
            for key in SECTION_KEYS
        }
    )


def visible_sections(resolved: SectionsSettings) -> List[str]:
    """Keys of the visible sections in homepage order."""
    return [key for key in SECTION_KEYS if getattr(resolved, key)]


__all__ = ["resolve_sections", "visible_sections"]
