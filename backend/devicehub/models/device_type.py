"""DeviceType ORM — catalogue of device kinds referenced by name from the API.

Invariants:
    - Name is unique; create/update resolve it by exact match
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devicehub.db.base import Base


class DeviceType(Base):
    """Device kind (laptop, phone, ...)."""
    __tablename__ = "DeviceType"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column(
        "Name", String(100), nullable=False, unique=True,
    )
