"""Services Layer — resource orchestration between HTTP routes and entity stores.

Invariants:
    - Services never build HTTP responses; they return outcomes
    - Resources registered explicitly in resource_catalog (no auto-discovery)

Design Decisions:
    - One generic service class, one definition per resource (ADR: no per-resource copies)
"""
