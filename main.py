"""
portfolio-cms - Main Entry Point

Runs the API server or initializes the database.
"""

import argparse
import os
import sys

from fastapi import FastAPI

from portfolio_cms.core.config import settings


def create_app() -> FastAPI:
    """
    Factory function to create FastAPI application.

    This function is called by uvicorn in factory mode so that importing this
    module has no side effects.

    Returns:
        FastAPI: Configured application instance
    """
    from portfolio_cms.api.factory import create_api
    from portfolio_cms.core.logger import setup_logging

    setup_logging()

    return create_api(
        title=settings.api__title,
        description=settings.api__description,
        version=settings.api__version,
        docs_url=settings.api__docs_url,
        redoc_url=settings.api__redoc_url,
    )


def run_init_db() -> None:
    """Create the tables and insert the default rows."""
    from portfolio_cms.core.exceptions import ApplicationException
    from portfolio_cms.core.logger import setup_logging
    from portfolio_cms.stores.database import create_tables
    from portfolio_cms.stores.seed import seed_defaults

    setup_logging()
    try:
        create_tables()
        created = seed_defaults()
    except ApplicationException as e:
        print(f"❌ Database initialization failed: {e}")
        sys.exit(1)
    print(f"✅ Database ready ({created})")


def main() -> None:
    """
    Main entry point with CLI argument parsing.
    """
    parser = argparse.ArgumentParser(
        description="portfolio-cms - Portfolio site and admin API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --mode api          # Run the web server (default)
  python main.py --mode init-db      # Create tables and default rows
  python main.py --mode api --host 127.0.0.1 --port 3000  # Custom host/port
        """,
    )

    parser.add_argument(
        "--mode",
        choices=["api", "init-db"],
        default="api",
        help="Run mode: 'api' for the web server, 'init-db' to prepare the database",
    )

    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind the API server (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8080")),
        help="Port to bind the API server (default: 8080)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    args = parser.parse_args()

    if args.mode == "init-db":
        run_init_db()
        return

    print("🚀 Starting portfolio-cms...")
    print(f"📍 Server will run on {args.host}:{args.port}")
    print(f"🌍 Environment: {settings.environment}")
    print(f"🐛 Debug mode: {settings.debug}")
    print(f"📚 API docs: http://{args.host}:{args.port}{settings.api__docs_url}")
    print()

    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload or settings.debug,
        log_level=str(settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
