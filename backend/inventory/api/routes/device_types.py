"""Type Routes — device types and their property schemas.

Invariants:
    - GET /types/{type_id}/properties lists that type's TypeProperty records
    - TypeProperty CRUD lives under /type-properties
"""

from inventory.api.crud_router import add_child_list_route, build_crud_router
from inventory.services.entities import DEVICE_TYPES, TYPE_PROPERTIES

router = build_crud_router(DEVICE_TYPES)
add_child_list_route(router, "/{parent_id}/properties", TYPE_PROPERTIES)

properties_router = build_crud_router(TYPE_PROPERTIES)
