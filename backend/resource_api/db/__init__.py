"""Database Metadata — the SQLAlchemy declarative Base shared by every model.

Invariants:
    - All sessions are async (AsyncSession), created by infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
    - aiosqlite for tests and local runs (ADR: no external DB needed for development)
"""
