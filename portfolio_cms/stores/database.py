"""
Database Core

SQLAlchemy engine and sessions for the portfolio tables.

PostgreSQL in deployments (pooled, pre-pinged connections); SQLite works
for local runs and the test suite.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import (
    DatabaseError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import DatabaseErrorCode
from portfolio_cms.core.exceptions import DatabaseException
from portfolio_cms.core.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # TestClient serves requests from a worker thread
        return create_engine(
            database_url,
            echo=settings.database__echo,
            connect_args={"check_same_thread": False},
        )

    try:
        return create_engine(
            database_url,
            echo=settings.database__echo,
            poolclass=QueuePool,
            pool_pre_ping=settings.database__pool_pre_ping,
            pool_size=settings.database__pool_size,
            max_overflow=settings.database__max_overflow,
            pool_timeout=settings.database__pool_timeout,
            pool_recycle=settings.database__pool_recycle,
        )
    except (SQLAlchemyError, ImportError) as e:
        host = database_url.rsplit("@", maxsplit=1)[-1].split("/")[0]
        logger.error("Cannot create database engine for %s: %s", host, e)
        raise DatabaseException(
            f"Database engine creation failed: {e}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"host": host},
        ) from e


engine = _build_engine(str(settings.database__url))

# Stores return ORM rows after their session has closed
SessionLocal = sessionmaker(
    bind=engine, autoflush=False, expire_on_commit=False, future=True
)


@contextmanager
def database_session() -> Generator[Session, None, None]:
    """
    Session for one store operation.

    SQLAlchemy errors roll back and surface as ``DatabaseException``; other
    exceptions raised inside the block propagate unchanged.

    Example:
        with database_session() as db:
            row = db.get(SiteSetting, "hero")
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error("Database session error: %s", e)
        db.rollback()
        raise DatabaseException(
            f"Database session error: {e}", DatabaseErrorCode.QUERY_FAILED
        ) from e
    finally:
        db.close()


@contextmanager
def transaction_manager(db: Session) -> Generator[Session, None, None]:
    """
    Commit on exit, roll back on any exception.

    Used where several rows must change together, like renumbering
    ``display_order`` after a reorder.
    """
    try:
        yield db
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error("Database transaction rolled back: %s", e)
        if isinstance(e, SQLAlchemyError):
            raise DatabaseException(
                f"Database transaction failed: {e}",
                DatabaseErrorCode.TRANSACTION_FAILED,
            ) from e
        raise


def create_tables() -> None:
    """Create every portfolio table that does not exist yet."""
    import portfolio_cms.models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error("Failed to create tables: %s", e)
        raise DatabaseException(
            f"Table creation failed: {e}", DatabaseErrorCode.QUERY_FAILED
        ) from e
    logger.info("Database tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


def dispose_engine() -> None:
    """Close pooled connections; called on application shutdown."""
    engine.dispose()
    logger.info("Database engine disposed")


def get_pool_status() -> Dict[str, int]:
    pool = engine.pool
    return {
        "size": getattr(pool, "size", lambda: 0)(),
        "checked_out": getattr(pool, "checkedout", lambda: 0)(),
        "overflow": getattr(pool, "overflow", lambda: 0)(),
    }


def test_connection() -> Dict[str, Any]:
    """
    Run ``SELECT 1`` and report the pool state.

    Raises:
        DatabaseException: If the database cannot be reached
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except (OperationalError, DatabaseError, InterfaceError) as e:
        logger.error("Database connection test failed: %s", e)
        raise DatabaseException(
            f"Database connection test failed: {e}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"error_type": type(e).__name__},
        ) from e

    return {
        "pool": get_pool_status(),
        "url": engine.url.render_as_string(hide_password=True),
    }
