"""Database Package — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - All sessions are async (AsyncSession), created in infrastructure/database.py
"""
