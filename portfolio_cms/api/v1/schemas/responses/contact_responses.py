"""Contact submission response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ContactSubmissionResponse(BaseModel):
    id: str
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    is_read: bool
    is_archived: bool
    created_at: Optional[datetime] = None


class ContactSubmissionAccepted(BaseModel):
    """Public acknowledgement; the stored row is not echoed back."""

    success: bool = True
    message: str = Field(
        "Message sent! Thank you for reaching out.",
        description="Text shown to the visitor",
    )


class ContactSubmissionListResponse(BaseModel):
    items: List[ContactSubmissionResponse] = Field(default_factory=list)
    total: int
    unread: int
