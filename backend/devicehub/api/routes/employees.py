"""Employees Resource — read-only list and detail of employee records.

Invariants:
    - Full names skip empty parts (compose_full_name), unlike the device endpoint
    - Every employee has a position; a missing one is a store defect and
      surfaces as a 500, not a handled case
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from devicehub.core.errors import ResourceNotFoundError
from devicehub.core.full_name import compose_full_name
from devicehub.infrastructure.database import get_db
from devicehub.models.employee import Employee
from devicehub.schemas.employee import (
    EmployeeDetail, EmployeeSummary, PositionRef,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeSummary])
async def list_employees(db: AsyncSession = Depends(get_db)):
    """List every employee's id and full name."""
    result = await db.execute(
        select(Employee).options(selectinload(Employee.person)),
    )
    return [
        EmployeeSummary(id=e.id, full_name=compose_full_name(e.person))
        for e in result.scalars()
    ]


@router.get("/{employee_id}", response_model=EmployeeDetail)
async def get_employee(employee_id: int, db: AsyncSession = Depends(get_db)):
    """Get employee details with position."""
    result = await db.execute(
        select(Employee)
        .options(
            selectinload(Employee.person),
            selectinload(Employee.position),
        )
        .where(Employee.id == employee_id),
    )
    employee = result.scalar_one_or_none()
    if employee is None:
        raise ResourceNotFoundError("Employee", str(employee_id))

    return EmployeeDetail(
        full_name=compose_full_name(employee.person),
        salary=employee.salary,
        hire_date=employee.hire_date,
        position=PositionRef(
            id=employee.position.id, name=employee.position.name,
        ),
    )
