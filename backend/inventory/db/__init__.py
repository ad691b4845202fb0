"""Database Package — declarative base shared by every ORM model.

Invariants:
    - Table metadata lives on db.base.Base only

Design Decisions:
    - Schema is assumed to exist; create_all is a development convenience
      (infrastructure/database.py), there is no migration tree
"""
