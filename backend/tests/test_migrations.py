"""
Tests for the idempotent Alembic helpers and the initial revision.
"""
import importlib.util
from pathlib import Path

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations

from linkbio.db.models import Base

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def load_module(name, path):
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


initial_schema = load_module("initial_schema", ALEMBIC_DIR / "versions" / "0001_initial_schema.py")
helpers = load_module("migration_helpers", ALEMBIC_DIR / "migration_helpers.py")


def run_operations(engine, func):
    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            return func()


def table_names(engine):
    return set(sa.inspect(engine).get_table_names())


def test_upgrade_creates_every_model_table_and_is_repeatable():
    engine = sa.create_engine("sqlite://")

    run_operations(engine, initial_schema.upgrade)
    run_operations(engine, initial_schema.upgrade)

    assert table_names(engine) == set(Base.metadata.tables)


def test_upgrade_on_top_of_create_all():
    engine = sa.create_engine("sqlite://")
    Base.metadata.create_all(engine)

    run_operations(engine, initial_schema.upgrade)

    assert table_names(engine) == set(Base.metadata.tables)


def test_downgrade_drops_everything():
    engine = sa.create_engine("sqlite://")
    run_operations(engine, initial_schema.upgrade)

    run_operations(engine, initial_schema.downgrade)
    run_operations(engine, initial_schema.downgrade)

    assert table_names(engine) == set()


def test_helpers_report_whether_they_acted():
    engine = sa.create_engine("sqlite://")

    def widget_columns():
        return sa.Column("id", sa.Integer(), primary_key=True), sa.Column("name", sa.String(50))

    def create_twice():
        return [
            helpers.create_table_if_not_exists("widgets", *widget_columns()),
            helpers.create_table_if_not_exists("widgets", *widget_columns()),
            helpers.create_index_if_not_exists("ix_widgets_name", "widgets", ["name"]),
            helpers.create_index_if_not_exists("ix_widgets_name", "widgets", ["name"]),
        ]

    assert run_operations(engine, create_twice) == [True, False, True, False]
    assert run_operations(engine, lambda: helpers.drop_table_if_exists("widgets")) is True
    assert run_operations(engine, lambda: helpers.drop_table_if_exists("widgets")) is False
