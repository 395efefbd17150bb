#!/usr/bin/env python3
"""
Database Reset Script

Drops and recreates all tables for portfolio-cms, then inserts the default
rows. WARNING: This will delete all existing data!
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.exc import SQLAlchemyError

import portfolio_cms.models  # noqa: F401  registers every table
from portfolio_cms.core.exceptions import ApplicationException
from portfolio_cms.core.logger import get_logger, setup_logging
from portfolio_cms.stores.database import Base, create_tables, engine, test_connection
from portfolio_cms.stores.seed import seed_defaults

logger = get_logger(__name__)


def main() -> None:
    setup_logging()
    try:
        connection_status = test_connection()
        logger.info("Database connection test passed: %s", connection_status)

        response = input(
            "WARNING: This will delete all existing data! Continue? (y/N): "
        )
        if response.lower() != "y":
            logger.info("Database reset cancelled by user")
            return

        logger.info("Dropping database tables...")
        Base.metadata.drop_all(bind=engine)
        create_tables()
        seed_defaults()

        logger.info("Database reset completed successfully")

    except (ApplicationException, SQLAlchemyError) as e:
        logger.error("Database reset failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
