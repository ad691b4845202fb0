"""Core Layer — domain types, errors, identifiers and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async database access

Design Decisions:
    - Functional core separated from imperative shell
"""
