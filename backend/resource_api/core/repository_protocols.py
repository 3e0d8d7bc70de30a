"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never await — the service orchestrates the calls
"""

from typing import Protocol, TypeVar

from resource_api.core.domain_types import EntityId

EntityT = TypeVar("EntityT")


class EntityStore(Protocol[EntityT]):
    """Contract for single-table entity persistence — implemented by shell.

    insert/save raise ConstraintViolationError when the table rejects the row.
    """
    async def find_by_id(self, entity_id: EntityId) -> EntityT | None: ...
    async def find_all(self) -> list[EntityT]: ...
    async def insert(self, entity: EntityT) -> EntityT: ...
    async def save(self, entity: EntityT) -> EntityT: ...
    async def delete(self, entity: EntityT) -> None: ...
