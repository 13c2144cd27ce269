"""Item and inventory row mapper."""

from sqlalchemy import update
from sqlmodel import select

from storefront.mappers.base import Mapper
from storefront.models.catalog import Inventory, Item


class ItemMapper(Mapper):
    async def get_item(self, item_id: str) -> Item | None:
        result = await self._execute(select(Item).where(Item.item_id == item_id), f"get item {item_id!r}")
        item: Item | None = result.scalars().first()
        return item

    async def get_items_by_product(self, product_id: str) -> list[Item]:
        statement = select(Item).where(Item.product_id == product_id).order_by(Item.item_id)  # type: ignore[arg-type]
        result = await self._execute(statement, f"list items of product {product_id!r}")
        return list(result.scalars().all())

    async def get_inventory_quantity(self, item_id: str) -> int | None:
        """Read the current stock level straight from the inventory table."""
        statement = select(Inventory.quantity).where(Inventory.item_id == item_id)
        result = await self._execute(statement, f"get inventory of {item_id!r}")
        quantity: int | None = result.scalar_one_or_none()
        return quantity

    async def update_inventory_quantity(self, item_id: str, increment: int) -> None:
        """Add ``increment`` to the item's stock level in a single UPDATE."""
        statement = (
            update(Inventory)
            .where(Inventory.item_id == item_id)  # type: ignore[arg-type]
            .values(quantity=Inventory.quantity + increment)
            .execution_options(synchronize_session=False)
        )
        await self._update(statement, f"update inventory of {item_id!r}")

    async def insert_item(self, item: Item, quantity: int = 0) -> None:
        """Insert an item together with its inventory row."""
        await self._insert(item, f"insert item {item.item_id!r}")
        await self._insert(Inventory(item_id=item.item_id, quantity=quantity), f"insert inventory of {item.item_id!r}")
