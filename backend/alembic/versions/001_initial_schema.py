"""Initial schema — devices, device types, assignments, employees, people, positions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "DeviceType",
        sa.Column("Id", sa.Integer, primary_key=True),
        sa.Column("Name", sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        "Person",
        sa.Column("Id", sa.Integer, primary_key=True),
        sa.Column("FirstName", sa.String(100), nullable=False),
        sa.Column("MiddleName", sa.String(100), nullable=True),
        sa.Column("LastName", sa.String(100), nullable=False),
    )

    op.create_table(
        "Position",
        sa.Column("Id", sa.Integer, primary_key=True),
        sa.Column("Name", sa.String(100), nullable=False),
    )

    op.create_table(
        "Device",
        sa.Column("Id", sa.Integer, primary_key=True),
        sa.Column("Name", sa.String(100), nullable=False),
        sa.Column("DeviceTypeId", sa.Integer, sa.ForeignKey("DeviceType.Id"), nullable=True),
        sa.Column("IsEnabled", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("AdditionalProperties", sa.Text, nullable=True),
    )

    op.create_table(
        "Employee",
        sa.Column("Id", sa.Integer, primary_key=True),
        sa.Column("Salary", sa.Numeric(10, 2), nullable=False),
        sa.Column("HireDate", sa.Date, nullable=False),
        sa.Column("PersonId", sa.Integer, sa.ForeignKey("Person.Id"), nullable=False),
        sa.Column("PositionId", sa.Integer, sa.ForeignKey("Position.Id"), nullable=False),
    )

    op.create_table(
        "DeviceEmployee",
        sa.Column("Id", sa.Integer, primary_key=True),
        sa.Column(
            "DeviceId", sa.Integer,
            sa.ForeignKey("Device.Id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("EmployeeId", sa.Integer, sa.ForeignKey("Employee.Id"), nullable=False),
        sa.Column("IssueDate", sa.DateTime, nullable=False),
    )
    op.create_index("ix_DeviceEmployee_DeviceId", "DeviceEmployee", ["DeviceId"])


def downgrade() -> None:
    op.drop_index("ix_DeviceEmployee_DeviceId", table_name="DeviceEmployee")
    op.drop_table("DeviceEmployee")
    op.drop_table("Employee")
    op.drop_table("Device")
    op.drop_table("Position")
    op.drop_table("Person")
    op.drop_table("DeviceType")
