"""TypeProperty ORM — one entry of a device type's property schema.

Invariants:
    - Always belongs to a DeviceType (type_id FK, cascades on type delete)
    - data_type is a free-form tag ("string", "float", "bool", ...), never validated
"""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base
from inventory.models.columns import RECORD_ID_LENGTH


class TypeProperty(Base):
    __tablename__ = "type_properties"

    id: Mapped[str] = mapped_column(String(RECORD_ID_LENGTH), primary_key=True)
    type_id: Mapped[str] = mapped_column(
        String(RECORD_ID_LENGTH),
        ForeignKey("types.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    data_type: Mapped[str] = mapped_column(String(32), nullable=False)
    required: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
