"""Catalog domain exceptions."""

from storefront.services.exceptions import NotFoundError


class CategoryNotFoundError(NotFoundError):
    """Category not found."""

    pass


class ProductNotFoundError(NotFoundError):
    """Product not found."""

    pass


class ItemNotFoundError(NotFoundError):
    """Item not found."""

    pass
