"""Boundary Protocols — structural contracts for records passed into core helpers.

Invariants:
    - Core NEVER imports ORM models — dependency arrows point inward only
    - Anything with the right attributes (ORM row, dataclass, SimpleNamespace) fits

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from datetime import datetime
from typing import Protocol


class PersonLike(Protocol):
    """Name parts of a person record."""
    first_name: str | None
    middle_name: str | None
    last_name: str | None


class EmployeeLike(Protocol):
    """Employee record with its linked person."""
    id: int
    person: PersonLike


class AssignmentLike(Protocol):
    """Device-to-employee assignment row."""
    issue_date: datetime
    employee: EmployeeLike | None
