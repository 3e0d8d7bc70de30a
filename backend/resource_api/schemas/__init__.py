"""Pydantic Schemas — wire shapes for API requests and responses.

Invariants:
    - Schemas only parse and serialize; business rules live in core/validation.py
    - Every DTO field is optional so a partial update can omit what it keeps

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
