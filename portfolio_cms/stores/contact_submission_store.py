"""Contact Submission Store.

Public visitors may only insert; listing, flag updates and deletes are
admin operations.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import desc, func
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.core.error_codes import DatabaseErrorCode
from portfolio_cms.core.exceptions import DatabaseException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.models import ContactSubmission
from portfolio_cms.stores.database import database_session

logger = get_logger(__name__)


class ContactSubmissionStore:
    """Store class for contact form submissions."""

    def create(self, values: Dict[str, Any]) -> ContactSubmission:
        """
        Insert a new submission, unread and not archived.

        Raises:
            DatabaseException: If creation fails
        """
        try:
            with database_session() as db:
                submission = ContactSubmission(
                    **values, is_read=False, is_archived=False
                )
                db.add(submission)
                db.commit()
                db.refresh(submission)
                logger.info("Stored contact submission: %s", submission.id)
                return submission

        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to store contact submission: %s", e)
            raise DatabaseException(
                f"Failed to store contact submission: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

    def get_by_id(self, submission_id: str) -> Optional[ContactSubmission]:
        try:
            with database_session() as db:
                return db.get(ContactSubmission, submission_id)
        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to get contact submission %s: %s", submission_id, e)
            raise DatabaseException(
                f"Failed to get contact submission: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

    def list(self, include_archived: bool = False) -> List[ContactSubmission]:
        """Newest first; archived submissions only when asked for."""
        try:
            with database_session() as db:
                query = db.query(ContactSubmission)
                if not include_archived:
                    query = query.filter(ContactSubmission.is_archived.is_(False))
                return query.order_by(desc(ContactSubmission.created_at)).all()
        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to list contact submissions: %s", e)
            raise DatabaseException(
                f"Failed to list contact submissions: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

    def recent(self, limit: int = 5) -> List[ContactSubmission]:
        try:
            with database_session() as db:
                return (
                    db.query(ContactSubmission)
                    .order_by(desc(ContactSubmission.created_at))
                    .limit(limit)
                    .all()
                )
        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to load recent contact submissions: %s", e)
            raise DatabaseException(
                f"Failed to load recent contact submissions: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

    def _set_flag(
        self, submission_id: str, field: str, value: bool
    ) -> Optional[ContactSubmission]:
        try:
            with database_session() as db:
                submission = db.get(ContactSubmission, submission_id)
                if submission is None:
                    return None
                setattr(submission, field, value)
                db.commit()
                db.refresh(submission)
                logger.info(
                    "Contact submission %s: %s=%s", submission_id, field, value
                )
                return submission
        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to update contact submission %s: %s", submission_id, e)
            raise DatabaseException(
                f"Failed to update contact submission: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

    def mark_read(self, submission_id: str) -> Optional[ContactSubmission]:
        return self._set_flag(submission_id, "is_read", True)

    def set_archived(
        self, submission_id: str, archived: bool
    ) -> Optional[ContactSubmission]:
        return self._set_flag(submission_id, "is_archived", archived)

    def delete(self, submission_id: str) -> bool:
        try:
            with database_session() as db:
                submission = db.get(ContactSubmission, submission_id)
                if submission is None:
                    return False
                db.delete(submission)
                db.commit()
                logger.info("Deleted contact submission: %s", submission_id)
                return True
        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to delete contact submission %s: %s", submission_id, e)
            raise DatabaseException(
                f"Failed to delete contact submission: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e

    def count(self, unread_only: bool = False) -> int:
        try:
            with database_session() as db:
                query = db.query(func.count(ContactSubmission.id))
                if unread_only:
                    query = query.filter(ContactSubmission.is_read.is_(False))
                return int(query.scalar() or 0)
        except (SQLAlchemyError, DatabaseException) as e:
            logger.error("Failed to count contact submissions: %s", e)
            raise DatabaseException(
                f"Failed to count contact submissions: {str(e)}",
                DatabaseErrorCode.QUERY_FAILED,
            ) from e


__all__ = ["ContactSubmissionStore"]
