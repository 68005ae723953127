from collections.abc import Sequence

from sqlmodel import Session, col, select

from product_catalog.entities.catalog.variant.entity import Variant
from product_catalog.entities.catalog.variant.table import VariantTable

from .entity import NewProductVariant, ProductVariant, VariantAssignment
from .table import ProductVariantTable


class ProductVariantRepository:
    """Data-access layer for product variant values."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, new_product_variant: NewProductVariant) -> ProductVariant:
        row = ProductVariantTable(**new_product_variant.model_dump())
        self._session.add(row)
        self._session.flush()
        return ProductVariant.model_validate(row)

    def list_for_products(self, product_ids: Sequence[int]) -> list[VariantAssignment]:
        """Return the join rows of the given products with their variant types.

        Rows come back in insertion order, which is the order the values
        were supplied when each product was created.
        """
        if not product_ids:
            return []

        statement = (
            select(ProductVariantTable, VariantTable)
            .join(VariantTable, col(ProductVariantTable.variant_id) == col(VariantTable.id))
            .where(col(ProductVariantTable.product_id).in_(product_ids))
            .order_by(col(ProductVariantTable.id))
        )
        return [
            (ProductVariant.model_validate(join_row), Variant.model_validate(variant_row))
            for join_row, variant_row in self._session.exec(statement)
        ]
