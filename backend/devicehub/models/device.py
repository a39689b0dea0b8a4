"""Device ORM — inventory item with a type, an enabled flag and free-form extras.

Invariants:
    - additional_properties holds serialized JSON text (or NULL), never a parsed value
    - device_type_id is set from a DeviceType name lookup on every write
    - Deleting a device deletes its assignment rows

Design Decisions:
    - Text column for additional_properties: the existing store keeps it as a blob
      and parsing is deferred to read time (core/additional_properties.py)
    - device_type_id nullable: legacy rows may lack a type, reads render it as null
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devicehub.db.base import Base


class Device(Base):
    """Device aggregate root — owns its assignment history."""
    __tablename__ = "Device"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
    device_type_id: Mapped[int | None] = mapped_column(
        "DeviceTypeId", Integer, ForeignKey("DeviceType.Id"), nullable=True,
    )
    is_enabled: Mapped[bool] = mapped_column(
        "IsEnabled", Boolean, nullable=False,
        default=False, server_default=false(),
    )
    additional_properties: Mapped[str | None] = mapped_column(
        "AdditionalProperties", Text, nullable=True,
    )

    # Relationships
    device_type: Mapped["DeviceType"] = relationship("DeviceType")
    assignments: Mapped[list["DeviceEmployee"]] = relationship(
        "DeviceEmployee", back_populates="device",
        cascade="all, delete-orphan",
    )
