"""Dashboard response schemas."""

from typing import Dict, List

from pydantic import BaseModel, Field

from .contact_responses import ContactSubmissionResponse


class DashboardResponse(BaseModel):
    counts: Dict[str, int] = Field(
        default_factory=dict, description="Row counts per content collection"
    )
    submissions: int = Field(0, description="All contact submissions")
    unread_submissions: int = Field(0, description="Submissions not yet read")
    recent_submissions: List[ContactSubmissionResponse] = Field(default_factory=list)
