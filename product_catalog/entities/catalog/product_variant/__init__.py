"""Entity package: ProductVariant."""

from .entity import NewProductVariant, ProductVariant, VariantAssignment
from .repository import ProductVariantRepository
from .table import ProductVariantTable

__all__ = [
    "NewProductVariant",
    "ProductVariant",
    "ProductVariantRepository",
    "ProductVariantTable",
    "VariantAssignment",
]
