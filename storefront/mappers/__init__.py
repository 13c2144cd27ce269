"""Row mappers: one per entity group, each bound to a session."""

from storefront.mappers.account import AccountMapper
from storefront.mappers.catalog import CatalogMapper
from storefront.mappers.item import ItemMapper
from storefront.mappers.line_item import LineItemMapper
from storefront.mappers.order import OrderMapper
from storefront.mappers.sequence import SequenceMapper

__all__ = [
    "AccountMapper",
    "CatalogMapper",
    "ItemMapper",
    "LineItemMapper",
    "OrderMapper",
    "SequenceMapper",
]
