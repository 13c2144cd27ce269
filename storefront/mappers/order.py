"""Order header and status row mapper."""

from typing import Any

from sqlmodel import select

from storefront.mappers.base import Mapper
from storefront.models.order import Order, OrderDetail, OrderStatus


class OrderMapper(Mapper):
    async def insert_order(self, order: OrderDetail) -> None:
        row = Order(**order.model_dump(exclude={"line_items", "status"}))
        await self._insert(row, f"insert order {order.order_id}")

    async def insert_order_status(self, order: OrderDetail) -> None:
        """Insert the status record created alongside the order header."""
        assert order.order_id is not None
        row = OrderStatus(
            order_id=order.order_id,
            # The initial status record is numbered after the order itself
            line_number=order.order_id,
            timestamp=order.order_date,
            status=order.status,
        )
        await self._insert(row, f"insert status of order {order.order_id}")

    async def get_order(self, order_id: int) -> OrderDetail | None:
        """Load an order header with its status, without line items."""
        statement = self._select_with_status().where(Order.order_id == order_id)
        result = await self._execute(statement, f"get order {order_id}")
        row = result.first()
        if row is None:
            return None
        return self._to_detail(*row)

    async def get_orders_by_username(self, username: str) -> list[OrderDetail]:
        statement = (
            self._select_with_status()
            .where(Order.username == username)
            .order_by(Order.order_id)  # type: ignore[arg-type]
        )
        result = await self._execute(statement, f"list orders of {username!r}")
        return [self._to_detail(*row) for row in result.all()]

    @staticmethod
    def _select_with_status() -> Any:
        return select(Order, OrderStatus.status).outerjoin(
            OrderStatus,
            (OrderStatus.order_id == Order.order_id) & (OrderStatus.line_number == Order.order_id),  # type: ignore[arg-type]
        )

    @staticmethod
    def _to_detail(order: Order, status: str | None) -> OrderDetail:
        update: dict[str, Any] = {}
        if status is not None:
            update["status"] = status
        return OrderDetail.model_validate(order, update=update)
