"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (error timestamps aside)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
