"""Sequence row mapper."""

from sqlalchemy import update
from sqlmodel import select

from storefront.mappers.base import Mapper
from storefront.models.sequence import Sequence


class SequenceMapper(Mapper):
    async def get_sequence(self, name: str, *, for_update: bool = False) -> Sequence | None:
        """Load a sequence row, optionally locking it until the transaction ends."""
        statement = select(Sequence).where(Sequence.name == name).execution_options(populate_existing=True)
        if for_update:
            statement = statement.with_for_update()
        result = await self._execute(statement, f"get sequence {name!r}")
        sequence: Sequence | None = result.scalars().first()
        return sequence

    async def update_sequence(self, name: str, *, next_id: int, expected_next_id: int) -> bool:
        """Compare-and-swap the stored next id.

        Returns False when the row no longer holds ``expected_next_id``.
        """
        statement = (
            update(Sequence)
            .where(Sequence.name == name, Sequence.next_id == expected_next_id)  # type: ignore[arg-type]
            .values(next_id=next_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute(statement, f"update sequence {name!r}")
        return bool(result.rowcount == 1)

    async def insert_sequence(self, sequence: Sequence) -> None:
        await self._insert(sequence, f"insert sequence {sequence.name!r}")
