"""Boundary Protocols — contracts between the resource handler and its collaborators.

Invariants:
    - Handlers depend on these Protocols, never on SQLAlchemy or settings directly
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - EntityStore is async because implementations do IO; CredentialVerifier is
      sync because the configured identity store is in-process
"""

from typing import Any, Protocol

from warehouse_api.core.domain_types import EntityId, PageWindow


class EntityStore(Protocol):
    """Contract for single-table persistence of one entity type."""
    async def find_by_id(self, entity_id: EntityId) -> Any | None: ...
    async def list_page(
        self, window: PageWindow, search: str | None = None,
    ) -> list[Any]: ...
    async def insert(self, values: dict[str, Any]) -> Any: ...
    async def replace(self, entity_id: EntityId, values: dict[str, Any]) -> None: ...
    async def exists(self, entity_id: EntityId) -> bool: ...
    async def delete(self, entity_id: EntityId) -> bool: ...


class CredentialVerifier(Protocol):
    """Contract for the identity store consulted by the authentication gate."""
    def verify(self, username: str, password: str) -> bool: ...
