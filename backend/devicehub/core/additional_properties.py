"""Additional Properties — JSON text <-> generic JSON value for device extras.

Invariants:
    - serialize() always returns strict JSON text; None serializes to "null"
    - serialize() raises ValueError for NaN and Infinity instead of writing them
    - deserialize(None) is None (column absent); deserialize("null") is None too
    - Malformed stored text raises json.JSONDecodeError — never silently dropped
    - NaN/Infinity tokens in stored text are malformed too (ValueError on read)

Design Decisions:
    - stdlib json over an ORM JSON column: the store keeps the blob as plain text
    - ensure_ascii=False keeps non-ASCII values readable in the database
"""

import json

from devicehub.core.domain_types import AdditionalProperties


def serialize(value: AdditionalProperties) -> str:
    """Serialize a JSON value for storage."""
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


def _reject_constant(token: str):
    raise ValueError(f"non-JSON token {token} in stored additional properties")


def deserialize(text: str | None) -> AdditionalProperties:
    """Deserialize stored text into a JSON value."""
    if text is None:
        return None
    return json.loads(text, parse_constant=_reject_constant)
