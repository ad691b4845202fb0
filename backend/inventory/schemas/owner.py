"""Owner Schema — people that devices are assigned to."""

from pydantic import Field

from inventory.schemas.base import Record


class OwnerRecord(Record):
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    campus_id: str | None = Field(None, max_length=64)
    email: str = Field(max_length=320)
