"""Order placement service.

Places orders (id issuance, inventory adjustment, header/status/line item
inserts) and reassembles them with live inventory on read. The service does
not manage transactions: callers wrap each operation in one transaction,
e.g. ``async with session_scope() as session``.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config import settings
from storefront.mappers.item import ItemMapper
from storefront.mappers.line_item import LineItemMapper
from storefront.mappers.order import OrderMapper
from storefront.models.catalog import ItemSnapshot
from storefront.models.enums import OrderStatusCode
from storefront.models.order import OrderDetail
from storefront.services.catalog.exceptions import ItemNotFoundError
from storefront.services.orders.exceptions import InvalidOrderError, OrderNotFoundError
from storefront.services.sequence_service import SequenceService

logger = structlog.get_logger(__name__)


class OrderService:
    """Service for placing and reading orders."""

    def __init__(self, session: AsyncSession, *, sequence_name: str | None = None):
        self.session = session
        self.sequence_name = sequence_name or settings.order_sequence_name
        self.sequences = SequenceService(session)
        self.items = ItemMapper(session)
        self.orders = OrderMapper(session)
        self.line_items = LineItemMapper(session)

    async def place(self, order: OrderDetail) -> OrderDetail:
        """Assign an id to ``order`` and persist it with its line items.

        Works on a copy: the caller's ``order`` is left untouched, so a
        failed placement can be retried with the same object. The returned
        copy carries the new ``order_id``, stamped on every line item along
        with its 1-based position as ``line_number``.

        Every line item's quantity is added to its item's inventory.

        Raises:
            InvalidOrderError: Order already has an id, has no line items
                or does not start as pending.
            MissingSequenceError: The order sequence is not provisioned.
            StorageOperationError: Any write failed, including inventory
                updates for unknown items. The caller must roll back.
        """
        if order.order_id is not None:
            raise InvalidOrderError(f"Order already placed as {order.order_id}")
        if not order.line_items:
            raise InvalidOrderError("Order has no line items")
        if order.status != OrderStatusCode.PENDING:
            raise InvalidOrderError(f"New orders start as pending, got status {order.status!r}")

        order = order.model_copy(deep=True)
        order.order_id = await self.sequences.next_id(self.sequence_name)
        log = logger.bind(order_id=order.order_id, username=order.username)

        for line_item in order.line_items:
            await self.items.update_inventory_quantity(line_item.item_id, increment=line_item.quantity)

        await self.orders.insert_order(order)
        await self.orders.insert_order_status(order)

        for position, line_item in enumerate(order.line_items, start=1):
            line_item.order_id = order.order_id
            line_item.line_number = position
            await self.line_items.insert_line_item(line_item)

        log.info("Placed order", line_items=len(order.line_items), total_price=str(order.total_price))
        return order

    async def get(self, order_id: int) -> OrderDetail:
        """Load an order with its line items and each item's live stock level.

        Item rows and inventory quantities are separate reads, so under
        concurrent placements a snapshot may mix points in time. Use it for
        display, not for stock decisions.
        """
        order = await self.orders.get_order(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        order.line_items = await self.line_items.get_line_items_by_order_id(order_id)
        for line_item in order.line_items:
            item = await self.items.get_item(line_item.item_id)
            if item is None:
                raise ItemNotFoundError(line_item.item_id)
            quantity = await self.items.get_inventory_quantity(line_item.item_id)
            if quantity is None:
                raise ItemNotFoundError(line_item.item_id)
            line_item.item = ItemSnapshot.model_validate(item, update={"quantity": quantity})

        return order

    async def list_for_user(self, username: str) -> list[OrderDetail]:
        """List order headers (without line items) placed by ``username``."""
        return await self.orders.get_orders_by_username(username)
