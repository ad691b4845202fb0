"""Entity Registry — the six inventory entities described once, as data.

Invariants:
    - Every EntityDefinition pairs one ORM model with one record schema whose
      fields are exactly the model's columns
    - parent_column names the filter used by get_many(filter_key), if any
    - updatable=False entities (device logs) refuse update at the service

Design Decisions:
    - One generic Record Store / Service / router parameterized by these
      definitions instead of six hand-copied verticals
"""

from dataclasses import dataclass

from inventory.db.base import Base
from inventory.models import (
    Device, DeviceLog, DeviceProperty, DeviceType, Owner, TypeProperty,
)
from inventory.schemas.base import Record
from inventory.schemas.catalog import DeviceTypeRecord, TypePropertyRecord
from inventory.schemas.device import (
    DeviceLogRecord, DevicePropertyRecord, DeviceRecord,
)
from inventory.schemas.owner import OwnerRecord


@dataclass(frozen=True)
class EntityDefinition:
    """Static description of one table and its JSON shape."""
    name: str
    collection: str
    model: type[Base]
    schema: type[Record]
    parent_column: str | None = None
    order_by: str = "id"
    updatable: bool = True
    lookup_columns: tuple[str, ...] = ()


OWNERS = EntityDefinition(
    name="Owner",
    collection="owners",
    model=Owner,
    schema=OwnerRecord,
    lookup_columns=("campus_id", "email"),
)

DEVICE_TYPES = EntityDefinition(
    name="Type",
    collection="types",
    model=DeviceType,
    schema=DeviceTypeRecord,
)

TYPE_PROPERTIES = EntityDefinition(
    name="TypeProperty",
    collection="type-properties",
    model=TypeProperty,
    schema=TypePropertyRecord,
    parent_column="type_id",
)

DEVICES = EntityDefinition(
    name="Device",
    collection="devices",
    model=Device,
    schema=DeviceRecord,
)

DEVICE_PROPERTIES = EntityDefinition(
    name="DeviceProperty",
    collection="device-properties",
    model=DeviceProperty,
    schema=DevicePropertyRecord,
    parent_column="device_id",
)

DEVICE_LOGS = EntityDefinition(
    name="DeviceLog",
    collection="device-logs",
    model=DeviceLog,
    schema=DeviceLogRecord,
    parent_column="device_id",
    order_by="created_at",
    updatable=False,
)

ENTITIES: tuple[EntityDefinition, ...] = (
    OWNERS, DEVICE_TYPES, TYPE_PROPERTIES,
    DEVICES, DEVICE_PROPERTIES, DEVICE_LOGS,
)
