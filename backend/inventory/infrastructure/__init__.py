"""Infrastructure Layer — database pool and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All engine faults leave this layer as core/errors.py exceptions

Design Decisions:
    - Thin wrappers over SQLAlchemy: the pool stays the only long-lived resource
"""
