"""
Contact API

Public, insert-only contact form endpoint.
"""

from fastapi import APIRouter, status

from portfolio_cms.api.v1.converters import convert_contact_request
from portfolio_cms.api.v1.schemas.requests import ContactSubmissionRequest
from portfolio_cms.api.v1.schemas.responses import ContactSubmissionAccepted
from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.contact_service import ContactService

logger = get_logger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])
contact_service = ContactService()


@router.post(
    "",
    response_model=ContactSubmissionAccepted,
    status_code=status.HTTP_201_CREATED,
)
def submit_contact_form(request: ContactSubmissionRequest) -> ContactSubmissionAccepted:
    """
    Store a contact form message.

    Raises:
        ValidationException: If name, email or message are invalid (400)
    """
    contact_service.submit(convert_contact_request(request))
    return ContactSubmissionAccepted()


__all__ = ["router"]
