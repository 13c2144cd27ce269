"""Line item row mapper."""

from sqlmodel import select

from storefront.mappers.base import Mapper
from storefront.models.order import LineItem, LineItemDetail


class LineItemMapper(Mapper):
    async def insert_line_item(self, line_item: LineItemDetail) -> None:
        row = LineItem(**line_item.model_dump(exclude={"item"}))
        await self._insert(row, f"insert line {line_item.line_number} of order {line_item.order_id}")

    async def get_line_items_by_order_id(self, order_id: int) -> list[LineItemDetail]:
        """Load an order's line items in line number order."""
        statement = select(LineItem).where(LineItem.order_id == order_id).order_by(LineItem.line_number)  # type: ignore[arg-type]
        result = await self._execute(statement, f"list line items of order {order_id}")
        return [LineItemDetail.model_validate(row) for row in result.scalars().all()]
