"""Database engine and session configuration."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

# Register all models with SQLModel metadata
import storefront.models  # noqa: F401
from storefront.config import settings
from storefront.db.engine import build_engine

engine = build_engine(settings.database_url)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@asynccontextmanager
async def session_scope(
    session_maker: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """Provide a session wrapped in a single transaction.

    Commits when the block exits normally and rolls back on any exception,
    so a failed operation never leaves partial writes behind. Services do
    not commit on their own; this is the transaction boundary.

    Usage:
        async with session_scope() as session:
            order = await OrderService(session).place(order)
    """
    maker = session_maker or async_session_maker
    async with maker() as session:
        async with session.begin():
            yield session


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

