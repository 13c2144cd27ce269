"""Shared plumbing for row mappers."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable
from sqlmodel import SQLModel

from storefront.db.exceptions import StorageOperationError


class Mapper:
    """Base class for mappers bound to one session.

    Mappers never commit; the caller owns the transaction. Every SQLAlchemy
    error is re-raised as StorageOperationError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @contextmanager
    def storage_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            raise StorageOperationError(f"{operation} failed: {e}") from e

    async def _execute(self, statement: Executable, operation: str) -> Any:
        with self.storage_errors(operation):
            return await self.session.execute(statement)

    async def _insert(self, row: SQLModel, operation: str) -> None:
        """Add a row and flush it so constraint violations surface here."""
        with self.storage_errors(operation):
            self.session.add(row)
            await self.session.flush()

    async def _update(self, statement: Executable, operation: str) -> int:
        """Run an UPDATE, failing when it matched no row."""
        result = await self._execute(statement, operation)
        if result.rowcount == 0:
            raise StorageOperationError(f"{operation} failed: no matching row")
        rowcount: int = result.rowcount
        return rowcount
