"""
Stores Package

Data persistence for portfolio-cms: the relational database, the Redis
connection behind the settings cache, and uploaded file storage.

Model-backed stores (``site_settings_store``, ``content_store``,
``contact_submission_store``) are imported from their modules directly, since
the models themselves import ``stores.database``.
"""

from .database import (
    Base,
    SessionLocal,
    create_tables,
    database_session,
    dispose_engine,
    engine,
    get_pool_status,
    test_connection,
    transaction_manager,
)
from .file_storage import FileStorage, get_file_storage
from .redis_client import (
    RedisClient,
    close_redis_client,
    get_redis_client,
    test_redis_connection,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "create_tables",
    "database_session",
    "transaction_manager",
    "test_connection",
    "get_pool_status",
    "dispose_engine",
    # Files
    "FileStorage",
    "get_file_storage",
    # Redis
    "RedisClient",
    "get_redis_client",
    "close_redis_client",
    "test_redis_connection",
]
