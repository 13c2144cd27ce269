"""Enum definitions for database models."""

from enum import StrEnum


class OrderStatusCode(StrEnum):
    """Status code stored on an order's status record."""

    PENDING = "P"
    SHIPPED = "S"
    CANCELLED = "C"
