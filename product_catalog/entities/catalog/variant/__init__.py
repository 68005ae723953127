"""Entity package: Variant."""

from .entity import NewVariant, Variant
from .repository import VariantRepository
from .table import VariantTable

__all__ = ["NewVariant", "Variant", "VariantRepository", "VariantTable"]
