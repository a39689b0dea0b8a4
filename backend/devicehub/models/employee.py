"""Employee ORM — salaried employee linked to a person and a position.

Invariants:
    - Every employee has a position (position_id NOT NULL); the detail
      endpoint relies on it and does not handle a missing one
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devicehub.db.base import Base


class Employee(Base):
    __tablename__ = "Employee"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    salary: Mapped[Decimal] = mapped_column(
        "Salary", Numeric(10, 2), nullable=False,
    )
    hire_date: Mapped[date] = mapped_column("HireDate", Date, nullable=False)
    person_id: Mapped[int] = mapped_column(
        "PersonId", Integer, ForeignKey("Person.Id"), nullable=False,
    )
    position_id: Mapped[int] = mapped_column(
        "PositionId", Integer, ForeignKey("Position.Id"), nullable=False,
    )

    # Relationships
    person: Mapped["Person"] = relationship("Person")
    position: Mapped["Position"] = relationship("Position")
    device_assignments: Mapped[list["DeviceEmployee"]] = relationship(
        "DeviceEmployee", back_populates="employee",
    )
