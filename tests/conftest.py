from collections.abc import AsyncIterator
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from storefront.db import build_engine, init_models, session_scope
from storefront.mappers import CatalogMapper, ItemMapper
from storefront.models import Category, Item, LineItemDetail, OrderDetail, Product
from storefront.services.sequence_service import SequenceService

ORDER_SEQUENCE_START = 1000


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}", poolclass=NullPool)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def catalog(session_maker: async_sessionmaker[AsyncSession]) -> None:
    """Seed one category, product, two stocked items and the order sequence."""
    async with session_scope(session_maker) as session:
        catalog = CatalogMapper(session)
        items = ItemMapper(session)
        await catalog.insert_category(Category(category_id="FISH", name="Fish"))
        await catalog.insert_category(Category(category_id="DOGS", name="Dogs"))
        await catalog.insert_product(Product(product_id="FI-SW-01", category_id="FISH", name="Angelfish"))
        await catalog.insert_product(Product(product_id="FI-SW-02", category_id="FISH", name="Tiger Shark"))
        await catalog.insert_product(Product(product_id="K9-BD-01", category_id="DOGS", name="Bulldog"))
        await items.insert_item(
            Item(item_id="EST-1", product_id="FI-SW-01", list_price=Decimal("16.50"), attribute1="Large"),
            quantity=10,
        )
        await items.insert_item(
            Item(item_id="EST-2", product_id="FI-SW-01", list_price=Decimal("16.50"), attribute1="Small"),
            quantity=5,
        )
        await items.insert_item(Item(item_id="EST-3", product_id="FI-SW-02", list_price=Decimal("18.50")), quantity=0)
        await SequenceService(session).create_sequence("ordernum", ORDER_SEQUENCE_START)


def make_order(*lines: tuple[str, int], username: str = "j2ee") -> OrderDetail:
    return OrderDetail(
        username=username,
        ship_city="Palo Alto",
        bill_city="Palo Alto",
        total_price=Decimal("49.50"),
        line_items=[
            LineItemDetail(item_id=item_id, quantity=quantity, unit_price=Decimal("16.50"))
            for item_id, quantity in lines
        ],
    )
