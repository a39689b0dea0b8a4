"""ORM Models — SQLAlchemy declarative models for all directory entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names follow the existing store's PascalCase schema

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from devicehub.models.device_type import DeviceType  # noqa: F401
from devicehub.models.device import Device  # noqa: F401
from devicehub.models.device_employee import DeviceEmployee  # noqa: F401
from devicehub.models.person import Person  # noqa: F401
from devicehub.models.position import Position  # noqa: F401
from devicehub.models.employee import Employee  # noqa: F401
