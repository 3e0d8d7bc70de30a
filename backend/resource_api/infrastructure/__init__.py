"""Infrastructure Layer — persistence and cross-cutting concerns.

Invariants:
    - Infrastructure imports nothing from core/ except the error hierarchy and boundary types
    - Every driver-level failure is either mapped to a ResourceError or re-raised untouched

Design Decisions:
    - Thin wrappers over SQLAlchemy (ADR: single responsibility per module)
"""
