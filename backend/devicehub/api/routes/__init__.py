"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Projection rules live in core/; routes only query, map and persist
"""
