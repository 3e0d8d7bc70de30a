"""Field Validation — declarative per-field rule sets checked against incoming payloads.

Invariants:
    - Every rule is evaluated independently — all violations collected, never short-circuited
    - Violations ordered by field declaration, then by rule declaration within the field
    - NotBlank and NotNull are separate rules: a None value can fire both for one field
    - MinValue, MaxValue, MaxLength and EmailFormat accept None (null-ness belongs to NotNull/NotBlank)
    - PARTIAL mode skips fields whose value is None; present values still face every rule
    - Pure check: no side effects, no IO

Design Decisions:
    - Rules as frozen dataclasses with is_satisfied(): a rule set is plain data that a
      resource definition can declare (ADR: one generic pattern instead of per-resource code)
    - Own rule engine over pydantic field constraints: pydantic stops at the first failure
      per field, but clients expect every broken rule reported at once
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Protocol

from resource_api.core.domain_types import ValidationMode


# local part: dot-separated atoms, no leading/trailing/double dots
_ATEXT = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
_EMAIL_PATTERN = re.compile(
    rf"{_ATEXT}(?:\.{_ATEXT})*@{_LABEL}(?:\.{_LABEL})*"
)


@dataclass(frozen=True)
class Violation:
    """A single broken rule for a single field."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class FieldRule(Protocol):
    """Structural contract every rule satisfies."""
    message: str

    def is_satisfied(self, value: Any) -> bool: ...


@dataclass(frozen=True)
class NotNull:
    message: str

    def is_satisfied(self, value: Any) -> bool:
        return value is not None


@dataclass(frozen=True)
class NotBlank:
    """Fails on None or on a string with no non-whitespace character."""
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return True


@dataclass(frozen=True)
class MinValue:
    """Inclusive lower bound for ints and Decimals."""
    minimum: Decimal
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        try:
            return Decimal(str(value)) >= self.minimum
        except InvalidOperation:
            return False


@dataclass(frozen=True)
class MaxValue:
    """Inclusive upper bound for ints and Decimals."""
    maximum: Decimal
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        try:
            return Decimal(str(value)) <= self.maximum
        except InvalidOperation:
            return False


@dataclass(frozen=True)
class MaxLength:
    """Upper bound on string length; keeps values inside their column width."""
    maximum: int
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if not isinstance(value, str):
            return True
        return len(value) <= self.maximum


@dataclass(frozen=True)
class EmailFormat:
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if value is None or value == "":
            return True
        return isinstance(value, str) and bool(_EMAIL_PATTERN.fullmatch(value))


FieldRules = Mapping[str, tuple[FieldRule, ...]]


def validate(
    values: Mapping[str, Any],
    rules: FieldRules,
    mode: ValidationMode = ValidationMode.FULL,
) -> list[Violation]:
    """Check values against rules. Empty list means the payload is accepted."""
    violations: list[Violation] = []
    for field_name, field_rules in rules.items():
        value = values.get(field_name)
        if mode is ValidationMode.PARTIAL and value is None:
            continue
        for rule in field_rules:
            if not rule.is_satisfied(value):
                violations.append(Violation(field_name, rule.message))
    return violations
