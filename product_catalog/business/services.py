"""Catalog service: create, list, show and search products with their variants."""

from collections.abc import Sequence

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from product_catalog.core.exceptions import ProductNotFoundError, StorageFailure
from product_catalog.entities.catalog.product import NewProduct, Product, ProductRepository
from product_catalog.entities.catalog.product_variant import (
    NewProductVariant,
    ProductVariantRepository,
    VariantAssignment,
)
from product_catalog.entities.catalog.variant import VariantRepository

from .entities import NewCompleteProduct

LIST_PAGE_SIZE = 10

ProductListing = tuple[Product, list[VariantAssignment]]


def group_by_product(
    products: Sequence[Product], assignments: Sequence[VariantAssignment]
) -> list[ProductListing]:
    """Pair each product with its own assignments, keeping both orders intact."""
    grouped: dict[int, list[VariantAssignment]] = {product.id: [] for product in products}
    for product_variant, variant in assignments:
        grouped[product_variant.product_id].append((product_variant, variant))
    return [(product, grouped[product.id]) for product in products]


class CatalogService:
    """Product catalog operations on top of a single SQLModel session."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._products = ProductRepository(session)
        self._variants = VariantRepository(session)
        self._product_variants = ProductVariantRepository(session)

    def create_product(self, new_product: NewCompleteProduct) -> int:
        """Create a product with all its variant values and return its id.

        Runs as one transaction: on any error nothing from this call is kept.
        Database errors are raised as StorageFailure, anything else as is.
        """
        try:
            product = self._products.create(new_product.product)
            value_count = 0

            for variant_value in new_product.variants:
                variant = self._variants.get_or_create(variant_value.variant)

                for value in variant_value.values:
                    self._product_variants.create(
                        NewProductVariant(
                            product_id=product.id,
                            variant_id=variant.id,
                            value=value,
                        )
                    )
                    value_count += 1

            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                "Creating product '{}' failed: {}: {}",
                new_product.product.name,
                type(e).__name__,
                e,
            )
            raise StorageFailure(
                f"Could not create product '{new_product.product.name}'"
            ) from e
        except Exception:
            self._session.rollback()
            raise

        logger.info(
            "Created product {} ('{}') with {} variant values",
            product.id,
            product.name,
            value_count,
        )
        return product.id

    def insert_product(self, new_product: NewProduct) -> Product:
        """Insert a bare product row without any variants."""
        try:
            product = self._products.create(new_product)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Inserting product '{}' failed: {}", new_product.name, e)
            raise StorageFailure(f"Could not insert product '{new_product.name}'") from e
        return product

    def list_products(self) -> list[ProductListing]:
        """Return the first page of products with their variant assignments."""
        try:
            products = self._products.list_page(LIST_PAGE_SIZE)
            assignments = self._product_variants.list_for_products(
                [product.id for product in products]
            )
        except SQLAlchemyError as e:
            logger.error("Listing products failed: {}", e)
            raise StorageFailure("Could not list products") from e
        return group_by_product(products, assignments)

    def show_product(self, product_id: int) -> ProductListing:
        """Return one product with its full, unpaginated variant list.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        try:
            product = self._products.get(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            assignments = self._product_variants.list_for_products([product.id])
        except SQLAlchemyError as e:
            logger.error("Loading product {} failed: {}", product_id, e)
            raise StorageFailure(f"Could not load product {product_id}") from e
        return product, assignments

    def search_products(self, text: str) -> list[ProductListing]:
        """Return every product whose name contains ``text``."""
        try:
            products = self._products.search_by_name(text)
            assignments = self._product_variants.list_for_products(
                [product.id for product in products]
            )
        except SQLAlchemyError as e:
            logger.error("Searching products for '{}' failed: {}", text, e)
            raise StorageFailure(f"Could not search products for '{text}'") from e
        logger.debug("Search '{}' matched {} products", text, len(products))
        return group_by_product(products, assignments)
