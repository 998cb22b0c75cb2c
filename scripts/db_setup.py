#!/usr/bin/env python
"""
db_setup.py

Script to create the PostgreSQL database, user, and tables for the link-in-bio
backend. It reads database credentials from a .env file located at the
project root.

Required .env variables:
  DB_SUPERUSER_PASSWORD
  DB_USER
  DB_PASSWORD

Optional:
  DB_HOST (default 127.0.0.1), DB_PORT (default 5432),
  DB_SUPERUSER (default postgres), DB_NAME (default linkbio),
  SEED_DEMO_DATA=true to create the demo account

Usage:
  python scripts/db_setup.py
"""
import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
import psycopg2
from psycopg2.extensions import ISOLATION_LEVEL_AUTOCOMMIT

# Load environment variables from .env at project root
dotenv_path = Path(__file__).resolve().parent.parent / '.env'
load_dotenv(dotenv_path)

DB_HOST = os.getenv('DB_HOST', '127.0.0.1')
DB_PORT = os.getenv('DB_PORT', '5432')
SUPERUSER = os.getenv('DB_SUPERUSER', 'postgres')
SUPERUSER_PASSWORD = os.getenv('DB_SUPERUSER_PASSWORD')
DB_USER = os.getenv('DB_USER')
DB_PASSWORD = os.getenv('DB_PASSWORD')
DB_NAME = os.getenv('DB_NAME', 'linkbio')

if not all([SUPERUSER_PASSWORD, DB_USER, DB_PASSWORD]):
    print("ERROR: Missing one of DB_SUPERUSER_PASSWORD, DB_USER, or DB_PASSWORD in .env")
    sys.exit(1)

# The application settings read DATABASE_URL; point them at the new database
os.environ['DATABASE_URL'] = f"postgresql+asyncpg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / 'backend'))


def setup_database() -> bool:
    """Create the database user and database if they are missing."""
    print(f"\nConnecting to PostgreSQL at {DB_HOST}:{DB_PORT} as {SUPERUSER}...")
    try:
        conn = psycopg2.connect(
            dbname='postgres',
            user=SUPERUSER,
            password=SUPERUSER_PASSWORD,
            host=DB_HOST,
            port=DB_PORT
        )
    except psycopg2.Error as e:
        print(f"Error connecting to PostgreSQL: {e}")
        return False

    conn.set_isolation_level(ISOLATION_LEVEL_AUTOCOMMIT)
    cur = conn.cursor()
    try:
        try:
            cur.execute(f"CREATE USER {DB_USER} WITH PASSWORD %s;", (DB_PASSWORD,))
            print(f"User '{DB_USER}' created.")
        except psycopg2.errors.DuplicateObject:
            print(f"User '{DB_USER}' already exists.")

        cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (DB_NAME,))
        if cur.fetchone():
            print(f"Database '{DB_NAME}' already exists.")
        else:
            cur.execute(f'CREATE DATABASE "{DB_NAME}" WITH OWNER = {DB_USER};')
            print(f"Database '{DB_NAME}' created.")

        cur.execute(f'GRANT ALL PRIVILEGES ON DATABASE "{DB_NAME}" TO {DB_USER};')
        return True
    except psycopg2.Error as e:
        print(f"Error in database setup: {e}")
        return False
    finally:
        cur.close()
        conn.close()


async def create_tables(seed: bool) -> None:
    """Create all tables (and optionally the demo account) through the app models."""
    from linkbio.crud.demo import initialize_demo_data
    from linkbio.db.models import Base
    from linkbio.db.session import SessionLocal, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created successfully!")

    if seed:
        async with SessionLocal() as session:
            created = await initialize_demo_data(session)
            await session.commit()
        print("Demo data created." if created else "Database not empty, demo data skipped.")

    await engine.dispose()


if __name__ == "__main__":
    if not setup_database():
        sys.exit(1)
    asyncio.run(create_tables(seed=os.getenv('SEED_DEMO_DATA', '').lower() in ('1', 'true', 'yes')))
    print("\nDatabase setup completed.")
