"""Device Routes — devices, their property values, and their logs.

Invariants:
    - GET /devices/{device_id}/properties and /devices/{device_id}/logs list
      child records; an unknown device id yields an empty list
    - Device logs have no update route
"""

from inventory.api.crud_router import add_child_list_route, build_crud_router
from inventory.services.entities import DEVICES, DEVICE_LOGS, DEVICE_PROPERTIES

router = build_crud_router(DEVICES)
add_child_list_route(router, "/{parent_id}/properties", DEVICE_PROPERTIES)
add_child_list_route(router, "/{parent_id}/logs", DEVICE_LOGS)

properties_router = build_crud_router(DEVICE_PROPERTIES)
logs_router = build_crud_router(DEVICE_LOGS)
