"""Employee Schemas — transfer objects for the /api/employees resource.

Invariants:
    - salary stays a Decimal in Python and is written as a JSON number, not a
      string (pydantic's default for Decimal)
"""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]


class EmployeeSummary(BaseModel):
    """List item — id and composed full name."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    full_name: str = Field(alias="fullName")


class PositionRef(BaseModel):
    id: int
    name: str


class EmployeeDetail(BaseModel):
    """GET /api/employees/{id} response body."""
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias="fullName")
    salary: Money
    hire_date: date = Field(alias="hireDate")
    position: PositionRef
