"""Async engine construction for PostgreSQL and SQLite."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from storefront.config import settings


def build_engine(database_url: str, **kwargs: Any) -> AsyncEngine:
    """Create an async engine configured for the URL's backend.

    Server databases get a pre-pinged connection pool. SQLite gets foreign
    key enforcement and BEGIN IMMEDIATE transactions: it has no row locks,
    so write transactions must serialize on the database lock instead.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"timeout": settings.db_command_timeout})
        engine = create_async_engine(database_url, echo=False, **kwargs)
        _configure_sqlite(engine)
        return engine

    connect_args: dict[str, Any] = {}
    if url.get_driver_name() == "asyncpg":
        connect_args["command_timeout"] = settings.db_command_timeout

    options: dict[str, Any] = {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_pre_ping": True,  # Verify connections before use
        "pool_recycle": 300,  # Recycle connections after 5 minutes
        "connect_args": connect_args,
    }
    options.update(kwargs)
    return create_async_engine(database_url, echo=False, **options)


def _configure_sqlite(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        # Disable the driver's implicit BEGIN; _on_begin emits our own
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")
