"""
Models Package

SQLAlchemy models for portfolio-cms and the pydantic schemas of the
settings blobs stored in ``site_settings``.
"""

from .base import Base, BaseDBModel, TimestampMixin
from .contact_submission import ContactSubmission
from .content import (
    FAQ,
    BlogPost,
    CaseStudy,
    FooterSection,
    MediaItem,
    NavMenuItem,
    Page,
    Project,
    Service,
    Skill,
    Testimonial,
)
from .site_setting import SiteSetting

__all__ = [
    # Base classes
    "Base",
    "BaseDBModel",
    "TimestampMixin",
    # Database models
    "SiteSetting",
    "ContactSubmission",
    "BlogPost",
    "CaseStudy",
    "FAQ",
    "FooterSection",
    "MediaItem",
    "NavMenuItem",
    "Page",
    "Project",
    "Service",
    "Skill",
    "Testimonial",
]
