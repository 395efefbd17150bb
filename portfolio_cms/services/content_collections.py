"""
Content Collections

Registry of the content tables editable from the admin: model, payload
schema, public visibility column and orderings for each collection.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.core.error_codes import ContentErrorCode
from portfolio_cms.core.exceptions import NotFoundException
from portfolio_cms.models import (
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
from portfolio_cms.models.base import BaseDBModel

DISPLAY_ORDER = (("display_order", False), ("created_at", False))
NEWEST_FIRST = (("created_at", True),)


class ContentPayload(BaseModel):
    """Fields an admin may write on a content row."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    display_order: Optional[int] = Field(
        None, ge=0, description="Manual sort position; appended at the end if omitted"
    )


class ProjectPayload(ContentPayload):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    is_featured: bool = False
    is_visible: bool = True


class SkillPayload(ContentPayload):
    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    proficiency: Optional[int] = Field(None, ge=0, le=100)
    icon: Optional[str] = None
    is_visible: bool = True


class ServicePayload(ContentPayload):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    price: Optional[str] = None
    is_visible: bool = True


class TestimonialPayload(ContentPayload):
    client_name: str = Field(..., min_length=1)
    client_title: Optional[str] = None
    client_company: Optional[str] = None
    client_avatar: Optional[str] = None
    content: str = Field(..., min_length=1)
    rating: Optional[int] = Field(5, ge=1, le=5)
    is_visible: bool = True


class BlogPostPayload(ContentPayload):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = Field(None, description="Generated from the title if empty")
    excerpt: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    author_name: Optional[str] = None
    author_avatar: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    is_published: bool = False
    published_at: Optional[datetime] = None


class FAQPayload(ContentPayload):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    category: Optional[str] = None
    is_visible: bool = True


class Metric(BaseModel):
    label: str
    value: str


class CaseStudyPayload(ContentPayload):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    metrics: List[Metric] = Field(default_factory=list)
    is_visible: bool = True


class MediaPayload(ContentPayload):
    file_name: str = Field(..., min_length=1)
    file_url: str = Field(..., min_length=1)
    file_type: str = "other"
    file_size: Optional[int] = Field(None, ge=0)
    alt_text: Optional[str] = None
    is_visible: bool = True


class FooterSectionPayload(ContentPayload):
    section_key: str = Field(..., min_length=1)
    section_data: Dict[str, Any] = Field(default_factory=dict)
    is_visible: bool = True


class NavItemPayload(ContentPayload):
    label: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)
    open_in_new_tab: bool = False
    is_visible: bool = True


class PagePayload(ContentPayload):
    title: str = Field(..., min_length=1)
    slug: Optional[str] = Field(None, description="Generated from the title if empty")
    content: Optional[str] = None
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    page_type: str = "custom"
    is_system: bool = False
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: List[str] = Field(default_factory=list)
    is_published: bool = False


@dataclass(frozen=True)
class Collection:
    """How one content table is exposed."""

    name: str
    model: Type[BaseDBModel]
    payload: Type[ContentPayload]
    public_flag: str = "is_visible"
    public_order_by: Tuple[Tuple[str, bool], ...] = DISPLAY_ORDER
    admin_order_by: Tuple[Tuple[str, bool], ...] = DISPLAY_ORDER
    slug_source: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")


COLLECTIONS: Dict[str, Collection] = {
    c.name: c
    for c in (
        Collection("projects", Project, ProjectPayload),
        Collection("skills", Skill, SkillPayload),
        Collection("services", Service, ServicePayload),
        Collection("testimonials", Testimonial, TestimonialPayload),
        Collection(
            "blog_posts",
            BlogPost,
            BlogPostPayload,
            public_flag="is_published",
            public_order_by=(("published_at", True),),
            admin_order_by=NEWEST_FIRST,
            slug_source="title",
        ),
        Collection("faqs", FAQ, FAQPayload),
        Collection("case_studies", CaseStudy, CaseStudyPayload),
        Collection(
            "media",
            MediaItem,
            MediaPayload,
            public_order_by=NEWEST_FIRST,
            admin_order_by=NEWEST_FIRST,
        ),
        Collection("footer_sections", FooterSection, FooterSectionPayload),
        Collection("nav_items", NavMenuItem, NavItemPayload),
        Collection(
            "pages",
            Page,
            PagePayload,
            public_flag="is_published",
            slug_source="title",
        ),
    )
}


def get_collection(name: str) -> Collection:
    """
    Look up a collection by name.

    Raises:
        NotFoundException: For unknown collection names
    """
    collection = COLLECTIONS.get(name)
    if collection is None:
        raise NotFoundException(
            f"Unknown content collection: {name}",
            ContentErrorCode.UNKNOWN_COLLECTION,
            details={"collection": name, "known": sorted(COLLECTIONS)},
        )
    return collection


__all__ = [
    "COLLECTIONS",
    "Collection",
    "ContentPayload",
    "get_collection",
]
