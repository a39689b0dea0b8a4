"""Position ORM — job position held by employees."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from devicehub.db.base import Base


class Position(Base):
    __tablename__ = "Position"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True)
    name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
