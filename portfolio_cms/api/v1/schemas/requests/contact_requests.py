"""Contact form request schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class ContactSubmissionRequest(BaseModel):
    """
    Contact form body.

    Field rules are enforced by the contact service so that every rejection
    carries the same error shape.
    """

    name: str = Field("", description="Sender name, at least 2 characters")
    email: str = Field("", description="Sender email address")
    subject: Optional[str] = Field(None, description="Optional subject line")
    message: str = Field("", description="Message body, at least 10 characters")
