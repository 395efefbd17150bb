"""
Contact Service

Public contact-form submissions and their admin inbox.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

from portfolio_cms.core.error_codes import ContentErrorCode, ValidationErrorCode
from portfolio_cms.core.exceptions import NotFoundException, ValidationException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.stores.contact_submission_store import ContactSubmissionStore

logger = get_logger(__name__)


class ContactSubmissionInput(BaseModel):
    """What a visitor may send through the contact form."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=2, max_length=255)
    email: EmailStr
    subject: Optional[str] = Field(None, max_length=255)
    message: str = Field(..., min_length=10)


class ContactSubmissionData(BaseModel):
    """Service layer representation of a stored submission."""

    id: str
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    is_read: bool = False
    is_archived: bool = False
    created_at: Optional[datetime] = None


class ContactService:
    """Service class for contact submissions."""

    def __init__(self, store: Optional[ContactSubmissionStore] = None) -> None:
        self.store = store or ContactSubmissionStore()

    def submit(self, data: Dict[str, Any]) -> ContactSubmissionData:
        """
        Validate and store a visitor's message.

        Raises:
            ValidationException: If name, email or message are invalid
            DatabaseException: If the insert fails
        """
        try:
            payload = ContactSubmissionInput.model_validate(data)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
            raise ValidationException(
                "Invalid contact submission",
                ValidationErrorCode.INVALID_INPUT,
                details={"fields": fields, "errors": e.errors(include_url=False)},
            ) from e

        values = payload.model_dump()
        values["subject"] = values["subject"] or None
        submission = self.store.create(values)
        logger.info("Contact submission %s received", submission.id)
        return ContactSubmissionData.model_validate(submission.to_dict())

    def list(self, include_archived: bool = False) -> List[ContactSubmissionData]:
        return [
            ContactSubmissionData.model_validate(s.to_dict())
            for s in self.store.list(include_archived=include_archived)
        ]

    def recent(self, limit: int = 5) -> List[ContactSubmissionData]:
        return [
            ContactSubmissionData.model_validate(s.to_dict())
            for s in self.store.recent(limit)
        ]

    def mark_read(self, submission_id: str) -> ContactSubmissionData:
        submission = self.store.mark_read(submission_id)
        if submission is None:
            raise self._not_found(submission_id)
        return ContactSubmissionData.model_validate(submission.to_dict())

    def toggle_archive(self, submission_id: str) -> ContactSubmissionData:
        """Flip the archived flag of a submission."""
        current = self.store.get_by_id(submission_id)
        if current is None:
            raise self._not_found(submission_id)
        submission = self.store.set_archived(submission_id, not current.is_archived)
        if submission is None:
            raise self._not_found(submission_id)
        return ContactSubmissionData.model_validate(submission.to_dict())

    def delete(self, submission_id: str) -> None:
        if not self.store.delete(submission_id):
            raise self._not_found(submission_id)

    def counts(self) -> Dict[str, int]:
        return {
            "total": self.store.count(),
            "unread": self.store.count(unread_only=True),
        }

    @staticmethod
    def _not_found(submission_id: str) -> NotFoundException:
        return NotFoundException(
            f"Contact submission not found: {submission_id}",
            ContentErrorCode.NOT_FOUND,
            details={"id": submission_id},
        )


__all__ = [
    "ContactService",
    "ContactSubmissionData",
    "ContactSubmissionInput",
]
