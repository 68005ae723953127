"""Catalog-level exceptions.

Callers can catch CatalogError to handle every failure raised by the
catalog service uniformly.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class StorageFailure(CatalogError):
    """The database rejected or failed to run an operation.

    Covers connection loss, constraint violations and aborted transactions.
    The underlying SQLAlchemy error is chained as ``__cause__``.
    """


class ProductNotFoundError(CatalogError):
    """No product exists with the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id
