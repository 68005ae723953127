"""Input records for product creation.

These shape the payload of ``CatalogService.create_product`` and are never
persisted themselves.
"""

from pydantic import BaseModel, Field

from product_catalog.entities.catalog.product.entity import NewProduct
from product_catalog.entities.catalog.variant.entity import NewVariant


class NewVariantValue(BaseModel):
    """A variant type together with the values to attach for it."""

    variant: NewVariant
    values: list[str | None] = Field(
        default_factory=list, description="Values in the order they should be stored"
    )


class NewCompleteProduct(BaseModel):
    """A product and all of its variant values, created in one transaction."""

    product: NewProduct
    variants: list[NewVariantValue] = Field(default_factory=list)
