"""Content SQLAlchemy models shown on the public site and edited from the admin."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel, OrderedMixin, VisibleMixin


class Project(BaseDBModel, OrderedMixin, VisibleMixin):
    """Portfolio project."""

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    short_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    video_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    live_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    github_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Project(id='{self.id}', title='{self.title}')>"


class Skill(BaseDBModel, OrderedMixin, VisibleMixin):
    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    proficiency: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class Service(BaseDBModel, OrderedMixin, VisibleMixin):
    __tablename__ = "services"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    features: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    price: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)


class Testimonial(BaseDBModel, OrderedMixin, VisibleMixin):
    __tablename__ = "testimonials"

    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    client_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    client_company: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    client_avatar: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=5)


class BlogPost(BaseDBModel, OrderedMixin):
    """Blog post; public once ``is_published`` is set."""

    __tablename__ = "blog_posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    author_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    author_avatar: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    def __repr__(self) -> str:
        return f"<BlogPost(id='{self.id}', slug='{self.slug}')>"


class FAQ(BaseDBModel, OrderedMixin, VisibleMixin):
    __tablename__ = "faqs"

    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)


class CaseStudy(BaseDBModel, OrderedMixin, VisibleMixin):
    __tablename__ = "case_studies"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    # [{"label": ..., "value": ...}]
    metrics: Mapped[List[dict]] = mapped_column(JSON, nullable=False, default=list)


class MediaItem(BaseDBModel, OrderedMixin, VisibleMixin):
    """Uploaded file in the media library."""

    __tablename__ = "media"

    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_type: Mapped[str] = mapped_column(String(50), nullable=False, default="other")
    file_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    alt_text: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)


class FooterSection(BaseDBModel, OrderedMixin, VisibleMixin):
    """Footer block keyed by ``copyright``, ``cta_button`` or ``footer_links``."""

    __tablename__ = "footer_content"

    section_key: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    section_data: Mapped[Any] = mapped_column(JSON, nullable=False, default=dict)


class NavMenuItem(BaseDBModel, OrderedMixin, VisibleMixin):
    __tablename__ = "nav_menu_items"

    label: Mapped[str] = mapped_column(String(100), nullable=False)
    href: Mapped[str] = mapped_column(String(1024), nullable=False)
    open_in_new_tab: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )


class Page(BaseDBModel, OrderedMixin):
    """Custom page served under ``/page/{slug}``."""

    __tablename__ = "pages"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    page_type: Mapped[str] = mapped_column(String(50), nullable=False, default="custom")
    is_system: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    seo_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    seo_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    seo_keywords: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Page(id='{self.id}', slug='{self.slug}')>"


__all__ = [
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
