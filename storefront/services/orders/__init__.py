"""Order placement and retrieval."""

from storefront.services.orders.exceptions import InvalidOrderError, OrderNotFoundError
from storefront.services.orders.order_service import OrderService

__all__ = ["InvalidOrderError", "OrderNotFoundError", "OrderService"]
