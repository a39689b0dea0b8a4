"""Current Assignment — picks the assignment that defines a device's current employee.

Invariants:
    - The current assignment is the one with the latest issue_date
    - No assignments -> None
    - Ties on issue_date resolve to whichever row the store returned first
"""

from collections.abc import Iterable

from devicehub.core.repository_protocols import AssignmentLike, EmployeeLike


def pick_current_assignment(
    assignments: Iterable[AssignmentLike],
) -> AssignmentLike | None:
    """Return the assignment with the maximum issue date, or None."""
    return max(assignments, key=lambda a: a.issue_date, default=None)


def current_employee(
    assignments: Iterable[AssignmentLike],
) -> EmployeeLike | None:
    """Employee on the current assignment, if any."""
    current = pick_current_assignment(assignments)
    if current is None:
        return None
    return current.employee
