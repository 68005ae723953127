"""Database initialization script."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from product_catalog.entities.catalog.product import ProductTable  # noqa: F401
from product_catalog.entities.catalog.product_variant import ProductVariantTable  # noqa: F401
from product_catalog.entities.catalog.variant import VariantTable  # noqa: F401


def init_db(engine: Engine) -> None:
    """Create all catalog tables."""
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized with tables.")


if __name__ == "__main__":
    from product_catalog.core.services.database.db_session import DbSessionService
    from product_catalog.runtime.logging_setup import configure_logging

    configure_logging()
    init_db(DbSessionService().engine)
