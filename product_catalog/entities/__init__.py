"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model read back from the database, plus its insert payload
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .catalog.product import NewProduct, Product, ProductRepository, ProductTable
from .catalog.product_variant import (
    NewProductVariant,
    ProductVariant,
    ProductVariantRepository,
    ProductVariantTable,
    VariantAssignment,
)
from .catalog.variant import NewVariant, Variant, VariantRepository, VariantTable

__all__ = [
    "NewProduct",
    "Product",
    "ProductRepository",
    "ProductTable",
    "NewVariant",
    "Variant",
    "VariantRepository",
    "VariantTable",
    "NewProductVariant",
    "ProductVariant",
    "ProductVariantRepository",
    "ProductVariantTable",
    "VariantAssignment",
]
