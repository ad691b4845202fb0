"""Record Base — fields and config shared by every entity schema.

Invariants:
    - id is optional on input; an empty or missing id is generated on create
    - Records are mutable so the store can write the assigned id back
"""

from pydantic import BaseModel, ConfigDict, Field

from inventory.models.columns import RECORD_ID_LENGTH


class Record(BaseModel):
    """Common base: an opaque string id and ORM-row validation."""

    model_config = ConfigDict(from_attributes=True)

    id: str | None = Field(None, max_length=RECORD_ID_LENGTH)
