"""
Alembic environment for the link-in-bio schema.

The database URL always comes from the application settings (DATABASE_URL in
the environment or .env); the value in alembic.ini is only a placeholder.
"""
import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import engine_from_config, pool

from alembic import context

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# backend/ for the linkbio package, alembic/ for migration_helpers
ALEMBIC_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(ALEMBIC_DIR.parent))
sys.path.insert(0, str(ALEMBIC_DIR))

from linkbio.core.config import settings  # noqa: E402
from linkbio.db.models import Base  # noqa: E402

target_metadata = Base.metadata

SYNC_DRIVERS = {
    "postgresql+asyncpg://": "postgresql://",
    "sqlite+aiosqlite://": "sqlite://",
}


def sync_database_url(url: str) -> str:
    """Migrations run synchronously, so async driver prefixes are swapped out."""
    for async_prefix, sync_prefix in SYNC_DRIVERS.items():
        if url.startswith(async_prefix):
            return sync_prefix + url[len(async_prefix):]
    return url


config.set_main_option("sqlalchemy.url", sync_database_url(settings.DATABASE_URL))


def _configure(**kwargs) -> None:
    # SQLite cannot ALTER most things in place
    is_sqlite = config.get_main_option("sqlalchemy.url").startswith("sqlite")
    context.configure(target_metadata=target_metadata, render_as_batch=is_sqlite, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Emit SQL to stdout without connecting."""
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        _configure(connection=connection)


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
