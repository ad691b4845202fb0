"""Device ORM — one tracked piece of equipment.

Invariants:
    - References DeviceType and Owner by id; deleting either while devices
      still point at it is refused by the engine (no cascade)
    - status is free-form ("active", "retired", ...)
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base
from inventory.models.columns import RECORD_ID_LENGTH


class Device(Base):
    __tablename__ = "devices"

    id: Mapped[str] = mapped_column(String(RECORD_ID_LENGTH), primary_key=True)
    serial_number: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type_id: Mapped[str] = mapped_column(
        String(RECORD_ID_LENGTH), ForeignKey("types.id"), nullable=False,
    )
    owner_id: Mapped[str] = mapped_column(
        String(RECORD_ID_LENGTH), ForeignKey("owners.id"), nullable=False,
    )
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
