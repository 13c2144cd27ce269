"""Category, Product, Item and Inventory database models."""

from decimal import Decimal

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    """Top-level catalog grouping (e.g. FISH, DOGS)."""

    __tablename__ = "category"

    category_id: str = Field(primary_key=True, max_length=10)
    name: str | None = Field(default=None, max_length=80)
    description: str | None = Field(default=None, max_length=255)


class Product(SQLModel, table=True):
    """Product within a category; items are concrete variants of it."""

    __tablename__ = "product"

    product_id: str = Field(primary_key=True, max_length=10)
    category_id: str = Field(foreign_key="category.category_id", index=True, max_length=10)
    name: str | None = Field(default=None, index=True, max_length=80)
    description: str | None = Field(default=None, max_length=255)


class ItemBase(SQLModel):
    """Fields shared by the item table and item snapshots."""

    item_id: str = Field(primary_key=True, max_length=10)
    product_id: str = Field(foreign_key="product.product_id", index=True, max_length=10)
    list_price: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    unit_cost: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    supplier_id: int | None = None
    status: str | None = Field(default=None, max_length=2)
    attribute1: str | None = Field(default=None, max_length=80)
    attribute2: str | None = Field(default=None, max_length=80)
    attribute3: str | None = Field(default=None, max_length=80)


class Item(ItemBase, table=True):
    """Sellable catalog item. Stock level lives in Inventory."""

    __tablename__ = "item"


class Inventory(SQLModel, table=True):
    """Live stock count for an item, mutated by order placement."""

    __tablename__ = "inventory"

    item_id: str = Field(foreign_key="item.item_id", primary_key=True, max_length=10)
    quantity: int


class ItemSnapshot(ItemBase):
    """Item with its inventory quantity as read at one point in time."""

    quantity: int | None = None
