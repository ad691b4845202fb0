"""Device Schemas — devices, their property values, and their logs.

Invariants:
    - DevicePropertyRecord.value is text; "true" stays the string "true"
    - DeviceLogRecord.created_at defaults to the time the record is built (UTC)
"""

from datetime import date, datetime, timezone

from pydantic import Field

from inventory.models.columns import RECORD_ID_LENGTH
from inventory.schemas.base import Record


class DeviceRecord(Record):
    serial_number: str = Field(max_length=255)
    name: str = Field(max_length=255)
    type_id: str = Field(max_length=RECORD_ID_LENGTH)
    owner_id: str = Field(max_length=RECORD_ID_LENGTH)
    purchase_date: date
    status: str = Field(max_length=32)


class DevicePropertyRecord(Record):
    device_id: str = Field(max_length=RECORD_ID_LENGTH)
    type_property_id: str = Field(max_length=RECORD_ID_LENGTH)
    value: str


class DeviceLogRecord(Record):
    device_id: str = Field(max_length=RECORD_ID_LENGTH)
    log_type: str = Field(max_length=64)
    note: str = ""
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    created_by: str = Field(max_length=255)
