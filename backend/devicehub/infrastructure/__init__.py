"""Infrastructure Layer — database session management and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All SQLAlchemy failures mapped to DatabaseError (core/errors.py)
"""
