"""Order domain exceptions."""

from storefront.services.exceptions import NotFoundError, ValidationError


class OrderNotFoundError(NotFoundError):
    """Order not found."""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class InvalidOrderError(ValidationError):
    """Order cannot be placed as submitted."""

    pass
