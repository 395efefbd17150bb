"""
Admin Submissions API

Inbox for contact form messages.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.v1.converters import (
    convert_submission_to_response,
    convert_submissions_to_response,
)
from portfolio_cms.api.v1.schemas.responses import (
    ContactSubmissionListResponse,
    ContactSubmissionResponse,
)
from portfolio_cms.services.contact_service import ContactService

router = APIRouter(
    prefix="/admin/submissions",
    tags=["admin-submissions"],
    dependencies=[Depends(require_admin)],
)
contact_service = ContactService()


@router.get("", response_model=ContactSubmissionListResponse)
def list_submissions(
    include_archived: bool = Query(False, description="Include archived messages"),
) -> ContactSubmissionListResponse:
    return convert_submissions_to_response(
        contact_service.list(include_archived=include_archived),
        contact_service.counts(),
    )


@router.post("/{submission_id}/read", response_model=ContactSubmissionResponse)
def mark_read(submission_id: str) -> ContactSubmissionResponse:
    return convert_submission_to_response(contact_service.mark_read(submission_id))


@router.post("/{submission_id}/archive", response_model=ContactSubmissionResponse)
def toggle_archive(submission_id: str) -> ContactSubmissionResponse:
    """Archive the message, or restore it when already archived."""
    return convert_submission_to_response(
        contact_service.toggle_archive(submission_id)
    )


@router.delete("/{submission_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_submission(submission_id: str) -> Response:
    contact_service.delete(submission_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
