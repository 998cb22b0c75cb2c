"""
Main module for the FastAPI application.
"""
import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from linkbio.__version__ import __version__
from linkbio.api import routers as api_routers
from linkbio.auth.routes import router as auth_router
from linkbio.core import sentry
from linkbio.core.config import settings
from linkbio.core.uploads import UPLOADS_URL_PREFIX
from linkbio.crud.demo import initialize_demo_data
from linkbio.db.base import Base
from linkbio.db.session import SessionLocal, engine
import linkbio.db.models  # noqa: F401  registers all tables on Base.metadata

# Setup logging
logger = logging.getLogger(__name__)


async def create_tables() -> None:
    """
    Create missing tables. Production deployments use Alembic instead
    (CREATE_TABLES=false).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_demo_data() -> None:
    async with SessionLocal() as session:
        await initialize_demo_data(session)
        await session.commit()


# Lifespan event handler
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler - runs on startup and shutdown.
    """
    # Startup
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sentry_enabled = sentry.init_sentry()
    settings.upload_path.mkdir(parents=True, exist_ok=True)

    if settings.CREATE_TABLES:
        await create_tables()
    if settings.SEED_DEMO_DATA:
        await seed_demo_data()

    port = int(os.getenv("PORT", settings.API_PORT))
    database = settings.DATABASE_URL.split("://", 1)[0]

    print("\n" + "=" * 80)
    print("🚀 Link-in-bio API Starting")
    print("=" * 80)
    print(f"\n📦 Version: {__version__} ({settings.ENVIRONMENT})")
    print(f"🗄️  Database driver: {database}")
    print(f"{'✅' if settings.PERPLEXITY_API_KEY else '⚠️ '} Perplexity: {'configured' if settings.PERPLEXITY_API_KEY else 'PERPLEXITY_API_KEY not set, analysis disabled'}")
    print(f"{'✅' if settings.GITHUB_TOKEN else 'ℹ️ '} GitHub source: {'GraphQL API' if settings.GITHUB_TOKEN else 'public calendar page'}")
    print(f"{'✅' if sentry_enabled else '⚠️ '} Sentry: {'enabled' if sentry_enabled else 'disabled'}")
    print(f"📁 Uploads: {settings.upload_path}")
    print(f"\n🌐 Server: http://0.0.0.0:{port}")
    print(f"📖 Docs: http://localhost:{port}/docs")
    print("=" * 80 + "\n")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Link-in-bio API shutting down")


app = FastAPI(
    title="Link-in-bio API",
    description="Profile page, admin panel and contact book backend",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Schema rejections are reported as 400 with one entry per failing field.
    """
    errors = [
        {
            "path": [str(part) for part in error["loc"][1:]] or [str(part) for part in error["loc"]],
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid data", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    sentry.capture_exception(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Include routers
app.include_router(auth_router)
for api_router in api_routers:
    app.include_router(api_router)

# Uploaded images
app.mount(UPLOADS_URL_PREFIX, StaticFiles(directory=str(settings.upload_path), check_dir=False), name="uploads")


@app.get("/")
async def root():
    """
    Root endpoint for health checks.
    """
    return {"message": "Link-in-bio API is running"}


@app.get("/health", tags=["health"])
async def health():
    """
    Health check endpoint.
    """
    return {"status": "ok"}


@app.get("/version", tags=["health"])
async def get_version():
    """
    Get API version and feature flags.
    """
    from linkbio.core.version import get_version_info
    return get_version_info()


if __name__ == "__main__":
    """
    Run the application directly.
    """
    import uvicorn

    port = int(os.getenv("API_PORT", settings.API_PORT))
    host = os.getenv("API_HOST", settings.API_HOST)

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=settings.ENVIRONMENT == "development",
    )
