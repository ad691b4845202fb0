"""DeviceLog ORM — append-mostly journal entries for a device.

Invariants:
    - Never updated; only created, read, and deleted by id
    - created_at defaults to insert time (UTC) when the caller leaves it out
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base
from inventory.models.columns import RECORD_ID_LENGTH


class DeviceLog(Base):
    __tablename__ = "device_logs"

    id: Mapped[str] = mapped_column(String(RECORD_ID_LENGTH), primary_key=True)
    device_id: Mapped[str] = mapped_column(
        String(RECORD_ID_LENGTH),
        ForeignKey("devices.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    log_type: Mapped[str] = mapped_column(String(64), nullable=False)
    note: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
