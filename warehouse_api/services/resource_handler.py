"""Resource Handler — the list/get/create/update/delete contract shared by every catalog resource.

Invariants:
    - One generic class; per-resource differences live in ResourceDefinition only
    - List: search filter first, then (page_number-1)*page_size offset, page_size limit
    - Get/Delete of a missing id raise ResourceNotFoundError
    - Ids outside the store key range are missing by definition: NotFound,
      without a store call
    - Create ignores the body id; the store assigns it
    - Update rejects a body id that differs from the path id before touching the store
    - Update conflict: re-check existence; absent → ResourceNotFoundError,
      present → the ConcurrencyError propagates unrecovered

Design Decisions:
    - Depends on the EntityStore protocol, so tests drive it with an in-memory fake
    - Returns read schemas (not ORM rows): routes serialize without touching the session
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from warehouse_api.core.boundary_protocols import EntityStore
from warehouse_api.core.domain_types import EntityId, ResourceKind, is_storable_id
from warehouse_api.core.errors import (
    ConcurrencyError, ErrorContext, IdentityMismatchError, ResourceNotFoundError,
)
from warehouse_api.core.pagination import normalize_search, page_window

logger = logging.getLogger(__name__)


def body_id(payload: BaseModel) -> int | None:
    """Default key accessor: the `id` field of a write body."""
    return getattr(payload, "id", None)


@dataclass(frozen=True)
class ResourceDefinition:
    """Everything that differs between two catalog resources."""
    kind: ResourceKind
    label: str
    model: type
    write_schema: type[BaseModel]
    read_schema: type[BaseModel]
    search_fields: tuple[str, ...]
    key_of: Callable[[BaseModel], int | None] = body_id


class ResourceHandler:
    """Applies the resource access contract to one resource over one store."""

    def __init__(self, resource: ResourceDefinition, store: EntityStore):
        self._resource = resource
        self._store = store

    async def list_page(
        self, page_number: int, page_size: int, search: str | None = None,
    ) -> list[BaseModel]:
        window = page_window(page_number, page_size)
        logger.debug(
            f"Listing {self._resource.kind.value}",
            extra={
                "resource": self._resource.kind.value,
                "page_number": page_number,
                "page_size": page_size,
            },
        )
        rows = await self._store.list_page(window, normalize_search(search))
        return [self._read(row) for row in rows]

    async def get(self, entity_id: EntityId) -> BaseModel:
        if not is_storable_id(entity_id):
            raise self._not_found(entity_id)
        row = await self._store.find_by_id(entity_id)
        if row is None:
            raise self._not_found(entity_id)
        return self._read(row)

    async def create(self, payload: BaseModel) -> BaseModel:
        row = await self._store.insert(self._values(payload))
        created = self._read(row)
        logger.info(
            f"{self._resource.label} created",
            extra={"resource": self._resource.kind.value, "entity_id": created.id},
        )
        return created

    async def update(self, entity_id: EntityId, payload: BaseModel) -> None:
        payload_id = self._resource.key_of(payload)
        if payload_id != entity_id:
            raise IdentityMismatchError(
                entity_id, payload_id, self._context(entity_id),
            )
        if not is_storable_id(entity_id):
            raise self._not_found(entity_id)
        try:
            await self._store.replace(entity_id, self._values(payload))
        except ConcurrencyError:
            if not await self._store.exists(entity_id):
                raise self._not_found(entity_id) from None
            logger.warning(
                f"{self._resource.label} update conflicted but row still exists",
                extra={"resource": self._resource.kind.value, "entity_id": entity_id},
            )
            raise
        logger.info(
            f"{self._resource.label} updated",
            extra={"resource": self._resource.kind.value, "entity_id": entity_id},
        )

    async def delete(self, entity_id: EntityId) -> None:
        if not is_storable_id(entity_id):
            raise self._not_found(entity_id)
        if not await self._store.delete(entity_id):
            raise self._not_found(entity_id)
        logger.info(
            f"{self._resource.label} deleted",
            extra={"resource": self._resource.kind.value, "entity_id": entity_id},
        )

    def _read(self, row: Any) -> BaseModel:
        return self._resource.read_schema.model_validate(row)

    def _values(self, payload: BaseModel) -> dict[str, Any]:
        return payload.model_dump(exclude={"id"})

    def _context(self, entity_id: EntityId) -> ErrorContext:
        return ErrorContext(resource=self._resource.kind.value, entity_id=entity_id)

    def _not_found(self, entity_id: EntityId) -> ResourceNotFoundError:
        logger.info(
            f"{self._resource.label} {entity_id} not found",
            extra={"resource": self._resource.kind.value, "entity_id": entity_id},
        )
        return ResourceNotFoundError(
            self._resource.label, entity_id, self._context(entity_id),
        )
