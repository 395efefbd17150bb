"""Content Store.

Generic data access layer shared by every content table (projects, skills,
blog posts, ...). One ``ContentStore`` instance is bound to one model class.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.core.error_codes import DatabaseErrorCode
from portfolio_cms.core.exceptions import DatabaseException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.models.base import BaseDBModel
from portfolio_cms.stores.database import database_session, transaction_manager

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseDBModel)

# (column name, descending)
OrderBy = Sequence[Tuple[str, bool]]


class ContentStore(Generic[ModelT]):
    """CRUD operations for a single content model."""

    def __init__(self, model: Type[ModelT]) -> None:
        self.model = model
        self.table = model.__tablename__

    def _column(self, name: str) -> Any:
        return getattr(self.model, name)

    def _query_error(self, action: str, exc: Exception) -> DatabaseException:
        logger.error("Failed to %s %s: %s", action, self.table, exc)
        return DatabaseException(
            f"Failed to {action} {self.table}: {str(exc)}",
            DatabaseErrorCode.QUERY_FAILED,
            details={"table": self.table},
        )

    def list(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: OrderBy = (("display_order", False),),
        limit: Optional[int] = None,
    ) -> List[ModelT]:
        """
        List rows matching equality ``filters``.

        Args:
            filters: Column name to required value
            order_by: Sort keys as (column, descending) pairs
            limit: Maximum number of rows

        Raises:
            DatabaseException: If query fails
        """
        try:
            with database_session() as db:
                query = db.query(self.model)
                for name, value in (filters or {}).items():
                    query = query.filter(self._column(name) == value)
                for name, descending in order_by:
                    column = self._column(name)
                    query = query.order_by(column.desc() if descending else column.asc())
                if limit is not None:
                    query = query.limit(limit)
                return query.all()
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("list", e) from e

    def get_by_id(self, record_id: str) -> Optional[ModelT]:
        try:
            with database_session() as db:
                return db.get(self.model, record_id)
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("get", e) from e

    def get_by_field(
        self, name: str, value: Any, filters: Optional[Dict[str, Any]] = None
    ) -> Optional[ModelT]:
        """First row whose ``name`` column equals ``value``."""
        try:
            with database_session() as db:
                query = db.query(self.model).filter(self._column(name) == value)
                for key, required in (filters or {}).items():
                    query = query.filter(self._column(key) == required)
                return query.first()
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("get", e) from e

    def create(self, values: Dict[str, Any]) -> ModelT:
        try:
            with database_session() as db:
                record = self.model(**values)
                db.add(record)
                db.commit()
                db.refresh(record)
                logger.info("Created %s row: %s", self.table, record.id)
                return record
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("create", e) from e

    def update(self, record_id: str, values: Dict[str, Any]) -> Optional[ModelT]:
        """Apply ``values`` to an existing row; None when it does not exist."""
        try:
            with database_session() as db:
                record = db.get(self.model, record_id)
                if record is None:
                    return None
                for name, value in values.items():
                    setattr(record, name, value)
                db.commit()
                db.refresh(record)
                logger.info("Updated %s row: %s", self.table, record_id)
                return record
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("update", e) from e

    def delete(self, record_id: str) -> bool:
        try:
            with database_session() as db:
                record = db.get(self.model, record_id)
                if record is None:
                    return False
                db.delete(record)
                db.commit()
                logger.info("Deleted %s row: %s", self.table, record_id)
                return True
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("delete", e) from e

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        try:
            with database_session() as db:
                query = db.query(func.count(self.model.id))
                for name, value in (filters or {}).items():
                    query = query.filter(self._column(name) == value)
                return int(query.scalar() or 0)
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("count", e) from e

    def max_display_order(self) -> int:
        """Highest ``display_order`` in the table, -1 when empty."""
        try:
            with database_session() as db:
                value = db.query(func.max(self._column("display_order"))).scalar()
                return -1 if value is None else int(value)
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("read display order of", e) from e

    def set_display_orders(self, orders: Dict[str, int]) -> None:
        """Write ``display_order`` for several rows in one transaction."""
        try:
            with database_session() as db:
                with transaction_manager(db):
                    for record_id, position in orders.items():
                        record = db.get(self.model, record_id)
                        if record is not None:
                            record.display_order = position
                logger.info("Reordered %d %s rows", len(orders), self.table)
        except (SQLAlchemyError, DatabaseException) as e:
            raise self._query_error("reorder", e) from e


__all__ = ["ContentStore", "OrderBy"]
