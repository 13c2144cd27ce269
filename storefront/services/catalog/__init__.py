"""Catalog browsing."""

from storefront.services.catalog.catalog_service import CatalogService
from storefront.services.catalog.exceptions import (
    CategoryNotFoundError,
    ItemNotFoundError,
    ProductNotFoundError,
)

__all__ = ["CatalogService", "CategoryNotFoundError", "ItemNotFoundError", "ProductNotFoundError"]
