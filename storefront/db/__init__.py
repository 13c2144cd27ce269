"""Database package with engine and session management."""

from storefront.db.engine import build_engine
from storefront.db.exceptions import StorageOperationError
from storefront.db.session import (
    async_session_maker,
    engine,
    init_models,
    session_scope,
)

__all__ = [
    "StorageOperationError",
    "async_session_maker",
    "build_engine",
    "engine",
    "init_models",
    "session_scope",
]
