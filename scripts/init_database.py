#!/usr/bin/env python3
"""
Database Initialization Script

Creates all tables for portfolio-cms and inserts the default rows.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from portfolio_cms.core.exceptions import ApplicationException
from portfolio_cms.core.logger import get_logger, setup_logging
from portfolio_cms.stores.database import create_tables, test_connection
from portfolio_cms.stores.seed import seed_defaults

logger = get_logger(__name__)


def main() -> None:
    setup_logging()
    try:
        logger.info("Starting database initialization...")

        connection_status = test_connection()
        logger.info("Database connection test passed: %s", connection_status)

        create_tables()
        seed_defaults()

        logger.info("Database initialization completed successfully")

    except ApplicationException as e:
        logger.error("Database initialization failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
