"""
Dashboard Service

Counts shown on the admin dashboard.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.contact_service import (
    ContactService,
    ContactSubmissionData,
)
from portfolio_cms.services.content_service import ContentService

logger = get_logger(__name__)

DASHBOARD_COLLECTIONS = (
    "projects",
    "blog_posts",
    "testimonials",
    "faqs",
    "services",
    "skills",
)
RECENT_SUBMISSIONS = 5


class DashboardData(BaseModel):
    counts: Dict[str, int] = Field(default_factory=dict)
    submissions: int = 0
    unread_submissions: int = 0
    recent_submissions: List[ContactSubmissionData] = Field(default_factory=list)


class DashboardService:
    def __init__(
        self,
        content_service: Optional[ContentService] = None,
        contact_service: Optional[ContactService] = None,
    ) -> None:
        self.content_service = content_service or ContentService()
        self.contact_service = contact_service or ContactService()

    def get_dashboard(self) -> DashboardData:
        counts = {
            name: self.content_service.count(name) for name in DASHBOARD_COLLECTIONS
        }
        submission_counts = self.contact_service.counts()
        logger.debug("Dashboard counts: %s", counts)
        return DashboardData(
            counts=counts,
            submissions=submission_counts["total"],
            unread_submissions=submission_counts["unread"],
            recent_submissions=self.contact_service.recent(RECENT_SUBMISSIONS),
        )


__all__ = ["DashboardData", "DashboardService"]
