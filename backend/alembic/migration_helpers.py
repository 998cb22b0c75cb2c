"""
Helper utilities for creating idempotent Alembic migrations.

Databases created by the application itself (CREATE_TABLES=true) already
contain the tables, so every migration must be safe to run on top of them.
The checks go through the SQLAlchemy inspector and work on Postgres and SQLite.

Usage Example
-------------

Create a table idempotently:

    def upgrade():
        create_table_if_not_exists(
            'issues',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('title', sa.String(length=255), nullable=False),
        )
"""

from alembic import op
import sqlalchemy as sa
from typing import List


def _inspector() -> sa.engine.reflection.Inspector:
    return sa.inspect(op.get_bind())


def table_exists(table_name: str) -> bool:
    return table_name in _inspector().get_table_names()


def index_exists(table_name: str, index_name: str) -> bool:
    if not table_exists(table_name):
        return False
    return any(index["name"] == index_name for index in _inspector().get_indexes(table_name))


def create_table_if_not_exists(table_name: str, *columns, **kwargs) -> bool:
    """
    Create a table only if it doesn't already exist.

    Returns:
        True if the table was created, False if it already existed
    """
    if table_exists(table_name):
        return False
    op.create_table(table_name, *columns, **kwargs)
    return True


def create_index_if_not_exists(index_name: str, table_name: str, columns: List[str], unique: bool = False) -> bool:
    if index_exists(table_name, index_name):
        return False
    op.create_index(index_name, table_name, columns, unique=unique)
    return True


def drop_table_if_exists(table_name: str) -> bool:
    if not table_exists(table_name):
        return False
    op.drop_table(table_name)
    return True
