"""Entity: Variant."""

from pydantic import BaseModel, Field

from product_catalog.entities._base import Entity


class NewVariant(BaseModel):
    """Insert payload for a variant type."""

    name: str = Field(description="Variant type name, e.g. 'size'")


class Variant(Entity):
    """A named dimension of product variation shared across products."""

    name: str = Field(description="Variant type name, e.g. 'size'")
