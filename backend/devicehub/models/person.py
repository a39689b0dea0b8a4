"""Person ORM — identity fields of an employee."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devicehub.db.base import Base


class Person(Base):
    """Name parts; middle name may be empty or NULL."""
    __tablename__ = "Person"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(
        "FirstName", String(100), nullable=False,
    )
    middle_name: Mapped[str | None] = mapped_column(
        "MiddleName", String(100), nullable=True,
    )
    last_name: Mapped[str] = mapped_column(
        "LastName", String(100), nullable=False,
    )
