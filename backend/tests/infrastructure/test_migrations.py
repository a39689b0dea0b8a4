"""Schema Migrations — the Alembic history builds exactly the ORM schema.

Invariants:
    - upgrade head creates every table in Base.metadata with the same columns,
      nullability, primary keys, foreign keys, unique constraints and indexes
    - IsEnabled defaults to false at the database level
    - downgrade base removes every table again

Design Decisions:
    - Tests are sync: env.py drives the async engine itself via asyncio.run
    - Config() built in code (no alembic.ini) so logging.config.fileConfig
      never reconfigures the test process's loggers
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import UniqueConstraint, create_engine, inspect, text

from devicehub.db.base import Base
import devicehub.models  # noqa: F401

ALEMBIC_DIR = Path(__file__).resolve().parents[2] / "alembic"


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "migrations.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    return path


@pytest.fixture
def alembic_config(db_path):
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    return cfg


@pytest.fixture
def inspector_for(db_path):
    engines = []

    def _inspect():
        engine = create_engine(f"sqlite:///{db_path}")
        engines.append(engine)
        return inspect(engine)

    yield _inspect
    for engine in engines:
        engine.dispose()


def _app_tables(inspector) -> set[str]:
    return set(inspector.get_table_names()) - {"alembic_version"}


def test_upgrade_creates_all_model_tables(alembic_config, inspector_for):
    command.upgrade(alembic_config, "head")
    assert _app_tables(inspector_for()) == set(Base.metadata.tables)


def test_upgrade_matches_model_columns(alembic_config, inspector_for):
    command.upgrade(alembic_config, "head")
    inspector = inspector_for()

    for name, table in Base.metadata.tables.items():
        reflected = {c["name"]: c for c in inspector.get_columns(name)}
        assert set(reflected) == {c.name for c in table.columns}, name
        for column in table.columns:
            assert reflected[column.name]["nullable"] == column.nullable, (
                f"{name}.{column.name}"
            )
        assert (
            inspector.get_pk_constraint(name)["constrained_columns"]
            == [c.name for c in table.primary_key.columns]
        ), name


def test_upgrade_matches_model_foreign_keys(alembic_config, inspector_for):
    command.upgrade(alembic_config, "head")
    inspector = inspector_for()

    for name, table in Base.metadata.tables.items():
        reflected = {
            (
                tuple(fk["constrained_columns"]),
                fk["referred_table"],
                tuple(fk["referred_columns"]),
            )
            for fk in inspector.get_foreign_keys(name)
        }
        expected = {
            (
                tuple(c.name for c in fk.columns),
                fk.referred_table.name,
                tuple(e.column.name for e in fk.elements),
            )
            for fk in table.foreign_key_constraints
        }
        assert reflected == expected, name


def test_upgrade_matches_model_indexes_and_uniques(alembic_config, inspector_for):
    command.upgrade(alembic_config, "head")
    inspector = inspector_for()

    for name, table in Base.metadata.tables.items():
        reflected_indexes = {
            (ix["name"], tuple(ix["column_names"]))
            for ix in inspector.get_indexes(name)
        }
        expected_indexes = {
            (ix.name, tuple(c.name for c in ix.columns)) for ix in table.indexes
        }
        assert reflected_indexes == expected_indexes, name

        reflected_uniques = {
            tuple(uc["column_names"])
            for uc in inspector.get_unique_constraints(name)
        }
        expected_uniques = {
            tuple(c.name for c in uc.columns)
            for uc in table.constraints
            if isinstance(uc, UniqueConstraint)
        }
        assert reflected_uniques == expected_uniques, name

    assert ("ix_DeviceEmployee_DeviceId", ("DeviceId",)) in {
        (ix["name"], tuple(ix["column_names"]))
        for ix in inspector.get_indexes("DeviceEmployee")
    }


def test_is_enabled_defaults_to_false_in_database(
    alembic_config, db_path, inspector_for,
):
    command.upgrade(alembic_config, "head")
    columns = {c["name"]: c for c in inspector_for().get_columns("Device")}
    assert columns["IsEnabled"]["default"] is not None

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        with engine.begin() as conn:
            conn.execute(text('INSERT INTO "Device" ("Name") VALUES (\'bare\')'))
            enabled = conn.execute(
                text('SELECT "IsEnabled" FROM "Device" WHERE "Name" = \'bare\''),
            ).scalar_one()
    finally:
        engine.dispose()
    assert not enabled


def test_downgrade_base_drops_all_tables(alembic_config, inspector_for):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")
    assert _app_tables(inspector_for()) == set()
