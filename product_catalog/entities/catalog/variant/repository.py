from loguru import logger
from sqlalchemy import insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.sql.dml import Insert
from sqlmodel import Session, col, select

from .entity import NewVariant, Variant
from .table import VariantTable


def build_insert_ignore(dialect: str, name: str) -> Insert | None:
    """Build an insert of a variant name that does nothing if the name exists.

    Returns None for dialects without an insert-or-ignore form.
    """
    table = VariantTable.__table__  # type: ignore[attr-defined]

    if dialect == "sqlite":
        return sqlite_insert(table).values(name=name).on_conflict_do_nothing(index_elements=["name"])
    if dialect == "postgresql":
        return postgresql_insert(table).values(name=name).on_conflict_do_nothing(index_elements=["name"])
    if dialect in ("mysql", "mariadb"):
        return insert(table).values(name=name).prefix_with("IGNORE")
    return None


class VariantRepository:
    """Data-access layer for variant types."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_name(self, name: str) -> Variant | None:
        statement = select(VariantTable).where(col(VariantTable.name) == name).limit(1)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Variant.model_validate(row)

    def get_or_create(self, new_variant: NewVariant) -> Variant:
        """Return the variant with this exact name, inserting it if absent.

        The insert is a no-op when the name already exists, so two sessions
        creating the same new name never produce two rows.
        """
        connection = self._session.connection()
        dialect = connection.dialect.name

        statement = build_insert_ignore(dialect, new_variant.name)
        if statement is None:
            existing = self.get_by_name(new_variant.name)
            if existing is not None:
                return existing
            logger.warning(
                "No upsert support for dialect {}; variant '{}' created without conflict handling",
                dialect,
                new_variant.name,
            )
            statement = insert(VariantTable.__table__).values(name=new_variant.name)  # type: ignore[attr-defined]

        connection.execute(statement)

        variant = self.get_by_name(new_variant.name)
        if variant is None:
            raise LookupError(f"Variant '{new_variant.name}' missing after upsert")
        return variant
