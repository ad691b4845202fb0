"""Route Modules — one file per resource family.

Invariants:
    - Each module exposes the APIRouters it builds; main.py includes them
    - Routes never contain business logic (delegate to services)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
