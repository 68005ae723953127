from sqlmodel import Session, col, select

from .entity import NewProduct, Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, new_product: NewProduct) -> Product:
        """Insert a product and flush so the generated id is available."""
        row = ProductTable(**new_product.model_dump())
        self._session.add(row)
        self._session.flush()
        return Product.model_validate(row)

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row)

    def list_page(self, limit: int) -> list[Product]:
        """Return the first ``limit`` products in insertion order."""
        statement = select(ProductTable).order_by(col(ProductTable.id)).limit(limit)
        return [Product.model_validate(row) for row in self._session.exec(statement)]

    def search_by_name(self, text: str) -> list[Product]:
        """Return every product whose name contains ``text`` literally.

        LIKE wildcards in ``text`` are escaped, so "50%" only matches names
        containing the characters "50%".
        """
        statement = (
            select(ProductTable)
            .where(col(ProductTable.name).contains(text, autoescape=True))
            .order_by(col(ProductTable.id))
        )
        return [Product.model_validate(row) for row in self._session.exec(statement)]
