"""API Layer — FastAPI routes, error translation and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every error body is built by api/error_translation.error_response

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
