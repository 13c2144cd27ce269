import asyncio

import pytest
from sqlalchemy import delete, func
from sqlmodel import select

from storefront.db import StorageOperationError, session_scope
from storefront.mappers import ItemMapper, SequenceMapper
from storefront.models import Inventory, LineItem, LineItemDetail, Order, OrderStatus, OrderStatusCode
from storefront.services.catalog import ItemNotFoundError
from storefront.services.exceptions import MissingSequenceError
from storefront.services.orders import InvalidOrderError, OrderNotFoundError, OrderService
from tests.conftest import ORDER_SEQUENCE_START, make_order


async def inventory(session_maker, item_id):
    async with session_scope(session_maker) as session:
        return await ItemMapper(session).get_inventory_quantity(item_id)


async def row_count(session_maker, model):
    async with session_scope(session_maker) as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def place(session_maker, order):
    async with session_scope(session_maker) as session:
        return await OrderService(session).place(order)


async def test_place_assigns_id_and_stamps_line_items(session_maker, catalog):
    order = await place(session_maker, make_order(("EST-1", 3), ("EST-2", 1)))

    assert order.order_id == ORDER_SEQUENCE_START
    assert [li.order_id for li in order.line_items] == [order.order_id, order.order_id]
    assert [li.line_number for li in order.line_items] == [1, 2]


async def test_place_adds_line_quantity_to_inventory(session_maker, catalog):
    # EST-1 starts at 10
    order = await place(session_maker, make_order(("EST-1", 3)))

    assert await inventory(session_maker, "EST-1") == 13
    async with session_scope(session_maker) as session:
        loaded = await OrderService(session).get(order.order_id)
    assert loaded.line_items[0].item.quantity == 13


async def test_get_returns_line_items_in_placement_order(session_maker, catalog):
    lines = [("EST-2", 4), ("EST-1", 1), ("EST-3", 2)]
    order = await place(session_maker, make_order(*lines))

    async with session_scope(session_maker) as session:
        loaded = await OrderService(session).get(order.order_id)

    assert [(li.item_id, li.quantity) for li in loaded.line_items] == lines
    assert loaded.order_id == order.order_id
    assert loaded.username == "j2ee"
    assert loaded.status == OrderStatusCode.PENDING
    assert loaded.ship_city == "Palo Alto"
    assert [li.item.quantity for li in loaded.line_items] == [9, 11, 2]
    assert loaded.line_items[0].item.attribute1 == "Small"


async def test_place_persists_header_status_and_lines(session_maker, catalog):
    order = await place(session_maker, make_order(("EST-1", 1), ("EST-2", 2)))

    async with session_scope(session_maker) as session:
        header = (await session.execute(select(Order).where(Order.order_id == order.order_id))).scalar_one()
        statuses = (await session.execute(select(OrderStatus))).scalars().all()
        lines = (await session.execute(select(LineItem))).scalars().all()

    assert header.username == "j2ee"
    assert [(s.order_id, s.line_number, s.status) for s in statuses] == [(order.order_id, order.order_id, "P")]
    assert {line.order_id for line in lines} == {order.order_id}
    assert len(lines) == 2


async def test_consecutive_orders_get_consecutive_ids(session_maker, catalog):
    first = await place(session_maker, make_order(("EST-1", 1)))
    second = await place(session_maker, make_order(("EST-1", 1)))

    assert second.order_id == first.order_id + 1


async def test_unknown_item_rolls_back_everything(session_maker, catalog):
    with pytest.raises(StorageOperationError):
        await place(session_maker, make_order(("EST-1", 2), ("NOPE-1", 1)))

    assert await inventory(session_maker, "EST-1") == 10
    assert await row_count(session_maker, Order) == 0
    assert await row_count(session_maker, OrderStatus) == 0
    assert await row_count(session_maker, LineItem) == 0
    async with session_scope(session_maker) as session:
        sequence = await SequenceMapper(session).get_sequence("ordernum")
    assert sequence.next_id == ORDER_SEQUENCE_START


async def test_failed_placement_does_not_consume_order_id(session_maker, catalog):
    with pytest.raises(StorageOperationError):
        await place(session_maker, make_order(("NOPE-1", 1)))

    order = await place(session_maker, make_order(("EST-1", 1)))
    assert order.order_id == ORDER_SEQUENCE_START


async def test_concurrent_placements_receive_distinct_ids(session_maker, catalog):
    orders = await asyncio.gather(*(place(session_maker, make_order(("EST-1", 1))) for _ in range(50)))

    ids = sorted(order.order_id for order in orders)
    assert ids == list(range(ORDER_SEQUENCE_START, ORDER_SEQUENCE_START + 50))
    assert await inventory(session_maker, "EST-1") == 60
    assert await row_count(session_maker, Order) == 50


async def test_get_unknown_order_raises_not_found(session_maker, catalog):
    with pytest.raises(OrderNotFoundError) as exc_info:
        async with session_scope(session_maker) as session:
            await OrderService(session).get(424242)

    assert exc_info.value.order_id == 424242


async def test_place_without_line_items_is_rejected(session_maker, catalog):
    with pytest.raises(InvalidOrderError):
        await place(session_maker, make_order())

    assert await row_count(session_maker, Order) == 0


async def test_place_rejects_order_that_already_has_an_id(session_maker, catalog):
    order = make_order(("EST-1", 1))
    order.order_id = 7

    with pytest.raises(InvalidOrderError):
        await place(session_maker, order)


async def test_place_without_provisioned_sequence(session_maker, catalog):
    with pytest.raises(MissingSequenceError):
        async with session_scope(session_maker) as session:
            await OrderService(session, sequence_name="missing").place(make_order(("EST-1", 1)))

    assert await inventory(session_maker, "EST-1") == 10


async def test_list_for_user_returns_headers_in_id_order(session_maker, catalog):
    first = await place(session_maker, make_order(("EST-1", 1)))
    await place(session_maker, make_order(("EST-2", 1), username="acid"))
    third = await place(session_maker, make_order(("EST-2", 2)))

    async with session_scope(session_maker) as session:
        orders = await OrderService(session).list_for_user("j2ee")

    assert [o.order_id for o in orders] == [first.order_id, third.order_id]
    assert all(o.line_items == [] for o in orders)
    assert all(o.status == OrderStatusCode.PENDING for o in orders)


async def test_failed_placement_leaves_order_untouched_for_retry(session_maker, catalog):
    order = make_order(("EST-1", 1), ("NOPE-1", 1))

    with pytest.raises(StorageOperationError):
        await place(session_maker, order)

    assert order.order_id is None
    assert [(li.order_id, li.line_number) for li in order.line_items] == [(None, None), (None, None)]

    order.line_items = order.line_items[:1]
    placed = await place(session_maker, order)

    assert placed.order_id == ORDER_SEQUENCE_START
    assert order.order_id is None


async def test_supplied_line_numbers_are_replaced_by_position(session_maker, catalog):
    order = make_order(("EST-1", 1), ("EST-2", 1))
    order.line_items[0].line_number = 2
    order.line_items[1].line_number = 1

    placed = await place(session_maker, order)
    async with session_scope(session_maker) as session:
        loaded = await OrderService(session).get(placed.order_id)

    assert [(li.item_id, li.line_number) for li in loaded.line_items] == [("EST-1", 1), ("EST-2", 2)]


async def test_mixed_supplied_and_missing_line_numbers_do_not_collide(session_maker, catalog):
    order = make_order(("EST-1", 1))
    order.line_items.append(LineItemDetail(item_id="EST-2", quantity=2, line_number=1))

    placed = await place(session_maker, order)

    assert [li.line_number for li in placed.line_items] == [1, 2]
    assert await row_count(session_maker, LineItem) == 2


async def test_get_raises_when_inventory_row_is_missing(session_maker, catalog):
    placed = await place(session_maker, make_order(("EST-1", 1)))
    async with session_scope(session_maker) as session:
        await session.execute(delete(Inventory).where(Inventory.item_id == "EST-1"))

    with pytest.raises(ItemNotFoundError):
        async with session_scope(session_maker) as session:
            await OrderService(session).get(placed.order_id)


async def test_place_rejects_non_pending_status(session_maker, catalog):
    order = make_order(("EST-1", 1))
    order.status = OrderStatusCode.SHIPPED

    with pytest.raises(InvalidOrderError):
        await place(session_maker, order)

    assert await row_count(session_maker, Order) == 0
    assert await row_count(session_maker, OrderStatus) == 0
    assert await inventory(session_maker, "EST-1") == 10
