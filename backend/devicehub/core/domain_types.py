"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AdditionalProperties is any JSON value (object/array/string/number/bool/null)

Design Decisions:
    - pydantic.JsonValue for the open-ended payload: validated at the API boundary
      without fixing a schema, stored as text (core/additional_properties.py)
"""

from pydantic import JsonValue


# ─── Value Types ─────────────────────────────────────────────────

AdditionalProperties = JsonValue
