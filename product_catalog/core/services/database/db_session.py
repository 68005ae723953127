"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from product_catalog.runtime.config.config_data import DatabaseConfig
from product_catalog.runtime.context import get_config


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine and session factory."""
        db_config = db_config or get_config().database
        self._config = db_config

        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(db_config),
        }
        if db_config.is_in_memory:
            # Every connection must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool

        logger.info("Initializing {} database engine", db_config.backend)
        self._engine = create_engine(db_config.url, **engine_kwargs)

        if db_config.backend == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

    @staticmethod
    def _get_connect_args(db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}
        if db_config.backend == "sqlite":
            connect_args.update(
                {
                    "check_same_thread": False,
                    "timeout": db_config.sqlite_timeout,
                }
            )
        return connect_args

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
