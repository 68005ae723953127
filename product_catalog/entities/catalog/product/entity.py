"""Entity: Product."""

from pydantic import BaseModel, Field

from product_catalog.entities._base import Entity


class NewProduct(BaseModel):
    """Insert payload for a product row."""

    name: str = Field(description="Product name")
    cost: float = Field(description="Unit cost")
    active: bool = Field(default=True, description="Whether the product is on sale")


class Product(Entity):
    """Product row as stored in the catalog."""

    name: str = Field(description="Product name")
    cost: float = Field(description="Unit cost")
    active: bool = Field(description="Whether the product is on sale")
