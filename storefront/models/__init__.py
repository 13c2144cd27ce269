"""Database models."""

from sqlmodel import SQLModel

from storefront.models.account import (
    Account,
    AccountDetail,
    AccountForm,
    AccountUpdate,
    Profile,
    Signon,
)
from storefront.models.catalog import Category, Inventory, Item, ItemSnapshot, Product
from storefront.models.enums import OrderStatusCode
from storefront.models.order import LineItem, LineItemDetail, Order, OrderDetail, OrderStatus
from storefront.models.sequence import Sequence

__all__ = [
    "SQLModel",
    "Account",
    "AccountDetail",
    "AccountForm",
    "AccountUpdate",
    "Profile",
    "Signon",
    "Category",
    "Product",
    "Item",
    "ItemSnapshot",
    "Inventory",
    "Order",
    "OrderDetail",
    "OrderStatus",
    "OrderStatusCode",
    "LineItem",
    "LineItemDetail",
    "Sequence",
]
