"""Contact submission converters."""

from typing import Dict, List

from portfolio_cms.api.v1.schemas.requests import ContactSubmissionRequest
from portfolio_cms.api.v1.schemas.responses import (
    ContactSubmissionListResponse,
    ContactSubmissionResponse,
)
from portfolio_cms.services.contact_service import ContactSubmissionData


def convert_contact_request(request: ContactSubmissionRequest) -> Dict[str, object]:
    """Convert the contact form body to service input."""
    return request.model_dump()


def convert_submission_to_response(
    data: ContactSubmissionData,
) -> ContactSubmissionResponse:
    return ContactSubmissionResponse(
        id=data.id,
        name=data.name,
        email=data.email,
        subject=data.subject,
        message=data.message,
        is_read=data.is_read,
        is_archived=data.is_archived,
        created_at=data.created_at,
    )


def convert_submissions_to_response(
    items: List[ContactSubmissionData], counts: Dict[str, int]
) -> ContactSubmissionListResponse:
    return ContactSubmissionListResponse(
        items=[convert_submission_to_response(item) for item in items],
        total=counts["total"],
        unread=counts["unread"],
    )
