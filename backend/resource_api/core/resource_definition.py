"""Resource Definition — everything the generic CRUD pattern needs to know about one resource.

Invariants:
    - fields lists the domain fields only (never "id"), in wire order
    - every key of rules is one of fields
    - entity_type accepts id + fields as keyword arguments; dto_type likewise

Design Decisions:
    - One frozen dataclass per resource instead of per-resource service/mapper classes
      (ADR: Product and Student differ only in fields and rules)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from resource_api.core.validation import FieldRules

EntityT = TypeVar("EntityT")
DtoT = TypeVar("DtoT")


@dataclass(frozen=True)
class ResourceDefinition(Generic[EntityT, DtoT]):
    """Entity type, wire type, field list and rule set of a single resource."""
    name: str
    entity_type: type[EntityT]
    dto_type: type[DtoT]
    fields: tuple[str, ...]
    rules: FieldRules

    def __post_init__(self) -> None:
        if "id" in self.fields:
            raise ValueError(f"{self.name}: 'id' is not a domain field")
        unknown = set(self.rules) - set(self.fields)
        if unknown:
            raise ValueError(
                f"{self.name}: rules for unknown field(s): {', '.join(sorted(unknown))}",
            )
