"""Services Layer — entity registry, Record Stores, and transactional services.

Invariants:
    - Record Stores do persistence only; services own transaction boundaries
    - Entities are described as data (entities.py), not as copied classes

Design Decisions:
    - One generic store and one generic service, instantiated per entity
"""
