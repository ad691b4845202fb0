"""DeviceProperty ORM — a device's value for one TypeProperty.

Invariants:
    - value is stored as text whatever the TypeProperty's data_type says
    - Removed together with its device (device_id FK cascades)
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base
from inventory.models.columns import RECORD_ID_LENGTH


class DeviceProperty(Base):
    __tablename__ = "device_properties"

    id: Mapped[str] = mapped_column(String(RECORD_ID_LENGTH), primary_key=True)
    device_id: Mapped[str] = mapped_column(
        String(RECORD_ID_LENGTH),
        ForeignKey("devices.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    type_property_id: Mapped[str] = mapped_column(
        String(RECORD_ID_LENGTH), ForeignKey("type_properties.id"),
        nullable=False,
    )
    value: Mapped[str] = mapped_column(Text, nullable=False)
