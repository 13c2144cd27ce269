"""Named sequence model for generating identifiers."""

from sqlmodel import Field, SQLModel


class Sequence(SQLModel, table=True):
    """Counter row handing out increasing ids for one name.

    ``next_id`` is the value issued by the next call. Rows are locked with
    SELECT ... FOR UPDATE while an id is claimed so concurrent transactions
    never receive the same value.
    """

    __tablename__ = "sequence"

    name: str = Field(primary_key=True, max_length=30)
    next_id: int
