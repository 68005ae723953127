"""ProductVariant database table model."""

from sqlmodel import Field

from product_catalog.entities._base import EntityTable


class ProductVariantTable(EntityTable, table=True):
    """Join table linking a product to a variant type with a value."""

    __tablename__ = "products_variants"

    variant_id: int = Field(foreign_key="variants.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    value: str | None = Field(default=None, max_length=255)
