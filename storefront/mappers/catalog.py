"""Category and product row mapper."""

from sqlalchemy import func
from sqlmodel import select

from storefront.mappers.base import Mapper
from storefront.models.catalog import Category, Product


class CatalogMapper(Mapper):
    async def get_category_list(self) -> list[Category]:
        statement = select(Category).order_by(Category.category_id)  # type: ignore[arg-type]
        result = await self._execute(statement, "list categories")
        return list(result.scalars().all())

    async def get_category(self, category_id: str) -> Category | None:
        statement = select(Category).where(Category.category_id == category_id)
        result = await self._execute(statement, f"get category {category_id!r}")
        category: Category | None = result.scalars().first()
        return category

    async def get_product(self, product_id: str) -> Product | None:
        statement = select(Product).where(Product.product_id == product_id)
        result = await self._execute(statement, f"get product {product_id!r}")
        product: Product | None = result.scalars().first()
        return product

    async def get_products_by_category(self, category_id: str) -> list[Product]:
        statement = (
            select(Product)
            .where(Product.category_id == category_id)
            .order_by(Product.product_id)  # type: ignore[arg-type]
        )
        result = await self._execute(statement, f"list products of {category_id!r}")
        return list(result.scalars().all())

    async def search_products(self, pattern: str) -> list[Product]:
        """Find products whose lower-cased name matches a LIKE pattern."""
        statement = (
            select(Product)
            .where(func.lower(Product.name).like(pattern))
            .order_by(Product.product_id)  # type: ignore[arg-type]
        )
        result = await self._execute(statement, f"search products {pattern!r}")
        return list(result.scalars().all())

    async def insert_category(self, category: Category) -> None:
        await self._insert(category, f"insert category {category.category_id!r}")

    async def insert_product(self, product: Product) -> None:
        await self._insert(product, f"insert product {product.product_id!r}")
