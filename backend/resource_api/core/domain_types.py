"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps the store-assigned integer key — never reused within a store's lifetime
    - ValidationMode encodes create (full) vs update (partial) — no boolean flags in signatures

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ValidationMode(str, Enum):
    """How a payload is checked against a resource's rule set."""
    FULL = "full"          # create: every rule on every field
    PARTIAL = "partial"    # update: absent (None) fields are skipped
