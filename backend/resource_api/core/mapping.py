"""Entity/DTO Mapping — copies between persisted entities and wire DTOs, and merges partial updates.

Invariants:
    - to_dto(None) and to_entity(None) return None, never raise
    - to_entity copies id when present; merge never touches id
    - merge only overwrites fields whose DTO value is not None (absent and null both mean "keep")
    - merge is idempotent: applying the same DTO twice equals applying it once

Design Decisions:
    - Driven by ResourceDefinition.fields, not by introspecting ORM/pydantic internals
      (ADR: core stays free of persistence imports)
"""

from typing import Any

from resource_api.core.resource_definition import ResourceDefinition, EntityT, DtoT


def present_fields(dto: Any, definition: ResourceDefinition) -> dict[str, Any]:
    """Domain fields the DTO actually carries (non-None), in declaration order."""
    values = {}
    for name in definition.fields:
        value = getattr(dto, name, None)
        if value is not None:
            values[name] = value
    return values


def to_dto(entity: EntityT | None, definition: ResourceDefinition[EntityT, DtoT]) -> DtoT | None:
    if entity is None:
        return None
    data = {name: getattr(entity, name) for name in definition.fields}
    return definition.dto_type(id=entity.id, **data)


def to_entity(dto: DtoT | None, definition: ResourceDefinition[EntityT, DtoT]) -> EntityT | None:
    if dto is None:
        return None
    data = {name: getattr(dto, name, None) for name in definition.fields}
    entity_id = getattr(dto, "id", None)
    if entity_id is not None:
        data["id"] = entity_id
    return definition.entity_type(**data)


def merge(dto: DtoT, entity: EntityT, definition: ResourceDefinition[EntityT, DtoT]) -> EntityT:
    """Apply the DTO's non-None fields onto entity in place. Returns the same entity."""
    for name, value in present_fields(dto, definition).items():
        setattr(entity, name, value)
    return entity
