"""ORM Models — SQLAlchemy declarative models for all inventory entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every table is keyed by an opaque string id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from inventory.models.owner import Owner  # noqa: F401
from inventory.models.device_type import DeviceType  # noqa: F401
from inventory.models.type_property import TypeProperty  # noqa: F401
from inventory.models.device import Device  # noqa: F401
from inventory.models.device_property import DeviceProperty  # noqa: F401
from inventory.models.device_log import DeviceLog  # noqa: F401
