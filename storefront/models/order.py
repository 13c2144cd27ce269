"""Order, OrderStatus and LineItem database models."""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from storefront.models.catalog import ItemSnapshot
from storefront.models.enums import OrderStatusCode


def _utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


class OrderBase(SQLModel):
    """Order header fields shared by the table and the order graph."""

    username: str = Field(index=True, max_length=80)
    order_date: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))

    ship_to_first_name: str | None = Field(default=None, max_length=80)
    ship_to_last_name: str | None = Field(default=None, max_length=80)
    ship_address1: str | None = Field(default=None, max_length=80)
    ship_address2: str | None = Field(default=None, max_length=80)
    ship_city: str | None = Field(default=None, max_length=80)
    ship_state: str | None = Field(default=None, max_length=80)
    ship_zip: str | None = Field(default=None, max_length=20)
    ship_country: str | None = Field(default=None, max_length=20)

    bill_to_first_name: str | None = Field(default=None, max_length=80)
    bill_to_last_name: str | None = Field(default=None, max_length=80)
    bill_address1: str | None = Field(default=None, max_length=80)
    bill_address2: str | None = Field(default=None, max_length=80)
    bill_city: str | None = Field(default=None, max_length=80)
    bill_state: str | None = Field(default=None, max_length=80)
    bill_zip: str | None = Field(default=None, max_length=20)
    bill_country: str | None = Field(default=None, max_length=20)

    courier: str = Field(default="UPS", max_length=80)
    total_price: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2)
    credit_card: str | None = Field(default=None, max_length=80)
    expiry_date: str | None = Field(default=None, max_length=7)
    card_type: str | None = Field(default=None, max_length=80)
    locale: str = Field(default="CA", max_length=80)


class Order(OrderBase, table=True):
    """Order header record. ``order_id`` comes from the ordernum sequence."""

    __tablename__ = "orders"

    order_id: int | None = Field(default=None, primary_key=True, sa_column_kwargs={"autoincrement": False})


class OrderStatus(SQLModel, table=True):
    """Status history record for an order."""

    __tablename__ = "order_status"

    order_id: int = Field(foreign_key="orders.order_id", primary_key=True)
    line_number: int = Field(primary_key=True)
    timestamp: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))
    status: str = Field(default=OrderStatusCode.PENDING, max_length=2)


class LineItemBase(SQLModel):
    """Line item fields shared by the table and the order graph."""

    item_id: str = Field(foreign_key="item.item_id", max_length=10)
    quantity: int
    unit_price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)


class LineItem(LineItemBase, table=True):
    """One (item, quantity) entry of a persisted order."""

    __tablename__ = "line_items"

    order_id: int = Field(foreign_key="orders.order_id", primary_key=True)
    line_number: int = Field(primary_key=True)


class LineItemDetail(LineItemBase):
    """Line item as carried by an order graph.

    ``order_id`` and ``line_number`` are filled in at placement time.
    ``item`` is attached on read and never persisted.
    """

    order_id: int | None = None
    line_number: int | None = None
    item: ItemSnapshot | None = None


class OrderDetail(OrderBase):
    """Order header together with its status and line items."""

    order_id: int | None = None
    status: OrderStatusCode = OrderStatusCode.PENDING
    line_items: list[LineItemDetail] = Field(default_factory=list)
