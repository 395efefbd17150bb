"""
portfolio-cms Package

Portfolio website with an admin content-management API, built on FastAPI,
SQLAlchemy and Redis.
"""

__version__ = "0.1.0"

__all__ = [
    "api",
    "core",
    "document",
    "models",
    "services",
    "stores",
]
