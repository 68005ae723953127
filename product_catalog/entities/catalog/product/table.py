"""Product database table model."""

from sqlmodel import Field

from product_catalog.entities._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    __tablename__ = "products"

    name: str = Field(max_length=255)
    cost: float
    active: bool
