"""Resource Service — fetch-or-404, validate, map, persist for the five CRUD operations.

Invariants:
    - Every operation returns Ok(value) or Failed(ResourceError); expected failures never raise
    - create validates every rule (FULL); update validates only the fields it carries (PARTIAL)
    - create ignores any client-supplied id; update never changes the stored id
    - ConstraintViolationError from the store becomes Failed; any other store failure propagates
    - No entity is cached between calls — the store owns canonical state
    - Successful writes logged here; failures logged once, by api/error_translation.py

Design Decisions:
    - Generic over ResourceDefinition: Product and Student share this class
      (ADR: one validated-CRUD pattern parameterized by entity type and rule set)
    - Validation runs before the lookup on update: a bad payload is a 400 even for a missing id
"""

import logging
from typing import Generic

from resource_api.core.domain_types import EntityId, ValidationMode
from resource_api.core.errors import (
    ConstraintViolationError, NotFoundError, ValidationFailedError,
)
from resource_api.core.mapping import merge, to_dto, to_entity
from resource_api.core.outcome import Failed, Ok, Outcome
from resource_api.core.repository_protocols import EntityStore
from resource_api.core.resource_definition import DtoT, EntityT, ResourceDefinition
from resource_api.core.validation import validate

logger = logging.getLogger(__name__)


class ResourceService(Generic[EntityT, DtoT]):
    """CRUD orchestration for one resource over one entity store."""

    def __init__(
        self,
        definition: ResourceDefinition[EntityT, DtoT],
        store: EntityStore[EntityT],
    ):
        self.definition = definition
        self.store = store

    @property
    def _name(self) -> str:
        return self.definition.name

    def _check(self, dto: DtoT, mode: ValidationMode) -> Failed | None:
        values = {name: getattr(dto, name, None) for name in self.definition.fields}
        violations = validate(values, self.definition.rules, mode)
        if not violations:
            return None
        return Failed(ValidationFailedError(violations, resource=self._name))

    async def _find(self, entity_id: EntityId) -> EntityT | Failed:
        entity = await self.store.find_by_id(entity_id)
        if entity is None:
            return Failed(NotFoundError(self._name, entity_id))
        return entity

    async def create(self, dto: DtoT) -> Outcome[DtoT]:
        rejected = self._check(dto, ValidationMode.FULL)
        if rejected:
            return rejected
        entity = to_entity(dto.model_copy(update={"id": None}), self.definition)
        try:
            saved = await self.store.insert(entity)
        except ConstraintViolationError as e:
            return Failed(e)
        logger.info(
            f"{self._name} created with id: {saved.id}",
            extra={"resource": self._name, "entity_id": saved.id},
        )
        return Ok(to_dto(saved, self.definition))

    async def get(self, entity_id: EntityId) -> Outcome[DtoT]:
        found = await self._find(entity_id)
        if isinstance(found, Failed):
            return found
        return Ok(to_dto(found, self.definition))

    async def list_all(self) -> Outcome[list[DtoT]]:
        entities = await self.store.find_all()
        return Ok([to_dto(e, self.definition) for e in entities])

    async def update(self, entity_id: EntityId, dto: DtoT) -> Outcome[DtoT]:
        rejected = self._check(dto, ValidationMode.PARTIAL)
        if rejected:
            return rejected
        found = await self._find(entity_id)
        if isinstance(found, Failed):
            return found
        merge(dto, found, self.definition)
        try:
            saved = await self.store.save(found)
        except ConstraintViolationError as e:
            return Failed(e)
        logger.info(
            f"{self._name} updated with id: {entity_id}",
            extra={"resource": self._name, "entity_id": entity_id},
        )
        return Ok(to_dto(saved, self.definition))

    async def delete(self, entity_id: EntityId) -> Outcome[None]:
        found = await self._find(entity_id)
        if isinstance(found, Failed):
            return found
        await self.store.delete(found)
        logger.info(
            f"{self._name} deleted with id: {entity_id}",
            extra={"resource": self._name, "entity_id": entity_id},
        )
        return Ok(None)
