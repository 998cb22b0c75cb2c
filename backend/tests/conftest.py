"""
Shared fixtures: the real app bound to an in-memory SQLite database.
"""
import os
import tempfile

# Settings are read at import time, so the environment must be ready first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="linkbio-uploads-")
os.environ["CREATE_TABLES"] = "false"
for name in ("PERPLEXITY_API_KEY", "GITHUB_TOKEN", "SENTRY_DSN", "VITE_SENTRY_DSN", "DEMO_USER_ID"):
    os.environ.pop(name, None)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from main import app  # noqa: E402
from linkbio.db.models import Base  # noqa: E402
from linkbio.db.session import SessionLocal, engine  # noqa: E402


@pytest_asyncio.fixture(autouse=True)
async def database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session():
    async with SessionLocal() as session:
        yield session


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def register(client: AsyncClient, username: str = "alice", password: str = "secret123") -> dict:
    """
    Register an account and return the decoded response plus ready headers.
    """
    response = await client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    data = response.json()
    data["headers"] = auth_headers(data["token"])
    return data


@pytest_asyncio.fixture
async def alice(client):
    return await register(client, "alice")


@pytest_asyncio.fixture
async def bob(client):
    return await register(client, "bob")


@pytest.fixture
def upload_dir():
    from linkbio.core.config import settings
    settings.upload_path.mkdir(parents=True, exist_ok=True)
    return settings.upload_path
