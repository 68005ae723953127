"""Catalog business layer: input records and the catalog service."""

from .entities import NewCompleteProduct, NewVariantValue
from .services import LIST_PAGE_SIZE, CatalogService, ProductListing

__all__ = [
    "LIST_PAGE_SIZE",
    "CatalogService",
    "NewCompleteProduct",
    "NewVariantValue",
    "ProductListing",
]
