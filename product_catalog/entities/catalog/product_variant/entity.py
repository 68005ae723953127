"""Entity: ProductVariant."""

from pydantic import BaseModel, Field

from product_catalog.entities._base import Entity
from product_catalog.entities.catalog.variant.entity import Variant


class NewProductVariant(BaseModel):
    """Insert payload for one variant value attached to a product."""

    product_id: int = Field(description="Owning product id")
    variant_id: int = Field(description="Variant type id")
    value: str | None = Field(default=None, description="Variant value, e.g. '12'")


class ProductVariant(Entity):
    """One concrete variant value on one product, e.g. size '12' on boots."""

    variant_id: int = Field(description="Variant type id")
    product_id: int = Field(description="Owning product id")
    value: str | None = Field(default=None, description="Variant value, e.g. '12'")


VariantAssignment = tuple[ProductVariant, Variant]
