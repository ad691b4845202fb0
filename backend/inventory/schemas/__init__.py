"""Pydantic Schemas — JSON record shapes for the API boundary.

Invariants:
    - Field names are snake_case, identical to the table columns
    - Schemas validate at the system boundary (request bodies, responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - from_attributes=True: stores validate ORM rows straight into records
"""
