"""Full Name Composition — the two name-rendering policies used by the API.

Invariants:
    - compose_full_name skips empty/None parts: ("Jane", "", "Doe") -> "Jane Doe"
    - concat_full_name never skips: ("Jane", "", "Doe") -> "Jane  Doe"
    - Employee endpoints use compose_full_name; a device's current employee uses
      concat_full_name. The two are NOT interchangeable.

Design Decisions:
    - Two functions instead of one with a flag: call sites read as what they render
    - concat_full_name renders None as "" so a missing middle name still yields
      the double space clients of the device endpoint already see
"""

from devicehub.core.repository_protocols import PersonLike


def compose_full_name(person: PersonLike) -> str:
    """Join the non-empty name parts with single spaces."""
    parts = (person.first_name, person.middle_name, person.last_name)
    return " ".join(p for p in parts if p)


def concat_full_name(person: PersonLike) -> str:
    """Concatenate first, middle and last name verbatim, space-separated."""
    return (
        (person.first_name or "") + " "
        + (person.middle_name or "") + " "
        + (person.last_name or "")
    )
