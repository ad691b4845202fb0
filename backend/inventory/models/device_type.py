"""DeviceType ORM — a device category (table `types`).

Invariants:
    - Named DeviceType in Python to avoid shadowing the `type` builtin
    - description is optional
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base
from inventory.models.columns import RECORD_ID_LENGTH


class DeviceType(Base):
    __tablename__ = "types"

    id: Mapped[str] = mapped_column(String(RECORD_ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
