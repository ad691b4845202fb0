"""Catalog Schemas — device types and the property schema each type defines.

Invariants:
    - TypePropertyRecord.data_type is a free-form tag; nothing checks it
      against the values stored in DevicePropertyRecord
"""

from pydantic import Field

from inventory.models.columns import RECORD_ID_LENGTH
from inventory.schemas.base import Record


class DeviceTypeRecord(Record):
    name: str = Field(max_length=255)
    description: str | None = None


class TypePropertyRecord(Record):
    type_id: str = Field(max_length=RECORD_ID_LENGTH)
    name: str = Field(max_length=255)
    data_type: str = Field(max_length=32)
    required: bool = False
