"""FastAPI application entry point.

Configures CORS, structured logging, lifespan events (database connection,
schema and default content) and router registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.constants import CATCH_ALL_MESSAGE
from app.core.logging import setup_logging
from app.db.schema import init_schema, seed_defaults
from app.db.sqlite import Database
from app.routers import education, health, profile, projects, skills, uploads

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    Opens the SQLite file named by ``settings.DATABASE_PATH``, creates the
    tables and seeds empty ones, then closes the connection on exit.
    """
    setup_logging()
    logger.info("Application starting up")
    db = Database(settings.DATABASE_PATH)
    await db.connect()
    await init_schema(db)
    if settings.SEED_DEFAULTS:
        await seed_defaults(db)
    application.state.db = db
    try:
        yield
    finally:
        await db.close()
        logger.info("Application shutting down")


app = FastAPI(
    title="Portfolio API",
    description="Content backend for a personal portfolio: profile, skills, projects, education and CV",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(profile.router, prefix="/api", tags=["Profile"])
app.include_router(skills.router, prefix="/api", tags=["Skills"])
app.include_router(projects.router, prefix="/api", tags=["Projects"])
app.include_router(education.router, prefix="/api", tags=["Education"])
app.include_router(uploads.router, tags=["CV"])


# Registered last so every API route above takes precedence.
@app.get("/{full_path:path}", include_in_schema=False)
async def catch_all(full_path: str) -> dict[str, str]:
    return {"message": CATCH_ALL_MESSAGE}
