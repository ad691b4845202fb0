"""Owner ORM — a person devices are assigned to.

Invariants:
    - id is an opaque string primary key (caller-supplied or generated)
    - campus_id is optional; email is unique in practice but not enforced here
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from inventory.db.base import Base
from inventory.models.columns import RECORD_ID_LENGTH


class Owner(Base):
    __tablename__ = "owners"

    id: Mapped[str] = mapped_column(String(RECORD_ID_LENGTH), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    campus_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
