"""API test fixtures — async DB + FastAPI test client + directory seed data.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows seeded through test_db are visible to the routes
    - make_client builds extra clients that return 500s instead of raising,
      for tests that exercise the catch-all handler
"""

from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from devicehub.db.base import Base
from devicehub.infrastructure.database import get_db, DatabaseSessionManager
from devicehub.models import (
    Device, DeviceEmployee, DeviceType, Employee, Person, Position,
)
import devicehub.infrastructure.database as db_module
from devicehub.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def make_client(test_engine, test_session_factory):
    """Factory for FastAPI test clients with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    clients = []

    def _make(raise_app_exceptions: bool = True) -> AsyncClient:
        c = AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )
        clients.append(c)
        return c

    yield _make

    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(make_client):
    """FastAPI test client with DB dependency overridden."""
    return make_client()


@pytest.fixture
async def lenient_client(make_client):
    """Client that returns 500 responses instead of raising app exceptions."""
    return make_client(raise_app_exceptions=False)


# ─── Seed data ──────────────────────────────────────────────────

@pytest.fixture
async def device_types(test_db):
    """Insert the Laptop and Phone device types."""
    laptop = DeviceType(name="Laptop")
    phone = DeviceType(name="Phone")
    test_db.add_all([laptop, phone])
    await test_db.commit()
    return {"Laptop": laptop, "Phone": phone}


@pytest.fixture
async def position(test_db):
    pos = Position(name="Engineer")
    test_db.add(pos)
    await test_db.commit()
    return pos


async def _add_employee(db, position, first, middle, last, salary="5000.00"):
    person = Person(first_name=first, middle_name=middle, last_name=last)
    employee = Employee(
        salary=Decimal(salary), hire_date=date(2021, 3, 1),
        person=person, position_id=position.id,
    )
    db.add(employee)
    await db.commit()
    return employee


@pytest.fixture
async def jane(test_db, position):
    """Employee with an empty middle name."""
    return await _add_employee(test_db, position, "Jane", "", "Doe")


@pytest.fixture
async def john(test_db, position):
    """Employee with a middle name."""
    return await _add_employee(
        test_db, position, "John", "Quincy", "Smith", salary="7250.50",
    )


@pytest.fixture
async def seed_device(test_db, device_types):
    """A laptop with stored additional properties and no assignments."""
    device = Device(
        name="ThinkPad X1",
        device_type_id=device_types["Laptop"].id,
        is_enabled=True,
        additional_properties='{"ram": 16, "os": "linux"}',
    )
    test_db.add(device)
    await test_db.commit()
    return device


@pytest.fixture
async def assign(test_db):
    """Insert a DeviceEmployee row: await assign(device, employee, issue_date)."""
    async def _assign(device, employee, issue_date: datetime):
        row = DeviceEmployee(
            device_id=device.id, employee_id=employee.id, issue_date=issue_date,
        )
        test_db.add(row)
        await test_db.commit()
        return row
    return _assign
