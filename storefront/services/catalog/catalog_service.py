"""Catalog browsing service."""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.mappers.catalog import CatalogMapper
from storefront.mappers.item import ItemMapper
from storefront.models.catalog import Category, Item, ItemSnapshot, Product
from storefront.services.catalog.exceptions import (
    CategoryNotFoundError,
    ItemNotFoundError,
    ProductNotFoundError,
)


class CatalogService:
    """Read-only access to categories, products and items."""

    def __init__(self, session: AsyncSession):
        self.catalog = CatalogMapper(session)
        self.items = ItemMapper(session)

    async def list_categories(self) -> list[Category]:
        return await self.catalog.get_category_list()

    async def get_category(self, category_id: str) -> Category:
        category = await self.catalog.get_category(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def get_product(self, product_id: str) -> Product:
        product = await self.catalog.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def list_products_by_category(self, category_id: str) -> list[Product]:
        return await self.catalog.get_products_by_category(category_id)

    async def search_products(self, keywords: str) -> list[Product]:
        """Match each whitespace-separated keyword against product names.

        Matching is a case-insensitive substring test. Results are
        concatenated in keyword order, so a product matching two keywords
        appears twice.
        """
        products: list[Product] = []
        for keyword in keywords.split():
            products.extend(await self.catalog.search_products(f"%{keyword.lower()}%"))
        return products

    async def list_items_by_product(self, product_id: str) -> list[Item]:
        return await self.items.get_items_by_product(product_id)

    async def get_item(self, item_id: str) -> ItemSnapshot:
        """Get an item with its current inventory quantity."""
        item = await self.items.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        quantity = await self.items.get_inventory_quantity(item_id)
        return ItemSnapshot.model_validate(item, update={"quantity": quantity})

    async def is_item_in_stock(self, item_id: str) -> bool:
        quantity = await self.items.get_inventory_quantity(item_id)
        if quantity is None:
            raise ItemNotFoundError(item_id)
        return quantity > 0
