"""Variant database table model."""

from sqlmodel import Field

from product_catalog.entities._base import EntityTable


class VariantTable(EntityTable, table=True):
    """Database persistence model for variant types.

    Names are unique so that concurrent inserts of the same new name
    collapse onto one row.
    """

    __tablename__ = "variants"

    name: str = Field(max_length=255, unique=True, index=True)
