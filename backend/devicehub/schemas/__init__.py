"""Pydantic Schemas — request/response transfer objects for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - JSON keys are camelCase; snake_case names are accepted on input too

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
