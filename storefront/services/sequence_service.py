"""Sequence service issuing increasing ids per named counter."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config import settings
from storefront.mappers.sequence import SequenceMapper
from storefront.models.sequence import Sequence
from storefront.services.exceptions import MissingSequenceError, SequenceConflictError
from storefront.utils.retry import SequenceRetryConfig, get_sequence_retrying

logger = structlog.get_logger(__name__)


class SequenceService:
    """Issue ids from named counters stored in the ``sequence`` table.

    Each claim locks the counter row (SELECT ... FOR UPDATE) and writes the
    new value back with a compare-and-swap UPDATE, so two transactions never
    receive the same id. A CAS miss is retried; the lock makes that rare.

    Must run inside the caller's transaction: the row lock is held, and the
    increment becomes visible, only until that transaction ends.
    """

    def __init__(self, session: AsyncSession, *, max_attempts: int | None = None):
        self.mapper = SequenceMapper(session)
        self.retry_config = SequenceRetryConfig(max_attempts=max_attempts or settings.sequence_max_attempts)

    async def next_id(self, name: str) -> int:
        """Claim the next id of ``name``.

        Raises:
            MissingSequenceError: No counter row exists (nothing is written).
            SequenceConflictError: Every compare-and-swap attempt lost a race.
        """
        issued: int = await get_sequence_retrying(self.retry_config)(self._claim, name)
        return issued

    async def _claim(self, name: str) -> int:
        sequence = await self.mapper.get_sequence(name, for_update=True)
        if sequence is None:
            raise MissingSequenceError(name)

        issued = sequence.next_id
        if not await self.mapper.update_sequence(name, next_id=issued + 1, expected_next_id=issued):
            logger.warning("Sequence changed concurrently, retrying", sequence=name, seen=issued)
            raise SequenceConflictError(name, issued)

        logger.debug("Issued sequence id", sequence=name, value=issued)
        return issued

    async def create_sequence(self, name: str, start: int = 1) -> Sequence:
        """Provision a counter whose first issued id is ``start``."""
        sequence = Sequence(name=name, next_id=start)
        await self.mapper.insert_sequence(sequence)
        logger.info("Created sequence", sequence=name, start=start)
        return sequence

    async def ensure_sequence(self, name: str, start: int = 1) -> bool:
        """Create the counter unless it exists. Returns True when created."""
        if await self.mapper.get_sequence(name) is not None:
            return False
        await self.create_sequence(name, start)
        return True
