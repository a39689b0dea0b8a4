"""DeviceEmployee ORM — assignment of a device to an employee from an issue date on.

Invariants:
    - Many rows per device; the latest issue_date is the current assignment
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devicehub.db.base import Base


class DeviceEmployee(Base):
    """Join entity between Device and Employee."""
    __tablename__ = "DeviceEmployee"
    __table_args__ = (Index("ix_DeviceEmployee_DeviceId", "DeviceId"),)

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    device_id: Mapped[int] = mapped_column(
        "DeviceId", Integer,
        ForeignKey("Device.Id", ondelete="CASCADE"),
        nullable=False,
    )
    employee_id: Mapped[int] = mapped_column(
        "EmployeeId", Integer, ForeignKey("Employee.Id"), nullable=False,
    )
    issue_date: Mapped[datetime] = mapped_column(
        "IssueDate", DateTime, nullable=False,
    )

    # Relationships
    device: Mapped["Device"] = relationship(
        "Device", back_populates="assignments",
    )
    employee: Mapped["Employee"] = relationship(
        "Employee", back_populates="device_assignments",
    )
