"""Store Gateway — single-table SQLAlchemy accessor for one entity type.

Invariants:
    - Every write is committed on its own (single-row atomicity comes from the store)
    - Lists are ordered by primary key (insertion order) before offset/limit
    - Search ORs a literal "contains" over the configured columns; % and _ match literally
    - replace() raises ConcurrencyError when the UPDATE matches no row
    - IntegrityError/DataError surface as ConstraintViolationError, after rollback
    - A write that matched no row changed nothing and is not rolled back, so
      instances already loaded in the session stay usable

Design Decisions:
    - Bound to a request-scoped AsyncSession passed in by the caller, never a global
    - replace() issues one UPDATE ... WHERE id = :id carrying every column, so
      the stored row is fully replaced without a prior read
    - Reads use populate_existing so eager relationships are refreshed even for
      instances already in the session identity map
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_api.core.domain_types import EntityId, PageWindow
from warehouse_api.core.errors import (
    ConcurrencyError, ConstraintViolationError, ErrorContext,
)

logger = logging.getLogger(__name__)


class SqlStoreGateway:
    """EntityStore implementation over an AsyncSession."""

    def __init__(
        self,
        db: AsyncSession,
        model: type,
        search_fields: Sequence[str] = (),
    ):
        self._db = db
        self._model = model
        self._table = model.__tablename__
        self._pk = model.__mapper__.primary_key[0]
        self._search_columns = [getattr(model, name) for name in search_fields]

    async def find_by_id(self, entity_id: EntityId) -> Any | None:
        result = await self._db.execute(
            select(self._model)
            .where(self._pk == entity_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def list_page(
        self, window: PageWindow, search: str | None = None,
    ) -> list[Any]:
        query = select(self._model)
        if search and self._search_columns:
            query = query.where(or_(*(
                column.contains(search, autoescape=True)
                for column in self._search_columns
            )))
        query = (
            query.order_by(self._pk)
            .offset(window.offset)
            .limit(window.limit)
        )
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def exists(self, entity_id: EntityId) -> bool:
        result = await self._db.execute(
            select(self._pk).where(self._pk == entity_id),
        )
        return result.first() is not None

    async def insert(self, values: dict[str, Any]) -> Any:
        """Insert a row; the store assigns the key. Returns the reloaded row."""
        entity = self._model(**values)
        self._db.add(entity)
        async with self._guard("insert"):
            await self._db.flush()
            entity_id = EntityId(getattr(entity, self._pk.key))
            await self._db.commit()
        return await self.find_by_id(entity_id)

    async def replace(self, entity_id: EntityId, values: dict[str, Any]) -> None:
        """Overwrite every column of the row with the given values."""
        async with self._guard("update"):
            result = await self._db.execute(
                update(self._model)
                .where(self._pk == entity_id)
                .values(**values)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount != 1:
                raise ConcurrencyError(
                    f"UPDATE of {self._table} row {entity_id} "
                    f"matched {result.rowcount} rows, expected 1",
                    ErrorContext(resource=self._table, entity_id=entity_id),
                )
            await self._db.commit()

    async def delete(self, entity_id: EntityId) -> bool:
        """Remove the row. False when no row had that key."""
        async with self._guard("delete"):
            result = await self._db.execute(
                delete(self._model)
                .where(self._pk == entity_id)
                .execution_options(synchronize_session=False),
            )
            if result.rowcount == 0:
                return False
            await self._db.commit()
        return True

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Roll back and translate store constraint violations."""
        try:
            yield
        except (IntegrityError, DataError) as e:
            await self._db.rollback()
            logger.warning(
                f"Store rejected {operation} on {self._table}: {e.orig}",
                extra={"resource": self._table},
            )
            raise ConstraintViolationError(
                f"{self._model.__name__} {operation} violates a store constraint",
                ErrorContext(resource=self._table),
            ) from e
