"""Health check endpoint.

Returns service status including database connectivity.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from app.db.sqlite import Database, get_database

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: Database = Depends(get_database)) -> Any:
    """Return health status including a real SQLite round-trip.

    Returns 200 OK when healthy, 503 when the database is unreachable.
    """
    db_status = "disconnected"

    try:
        row = await db.fetch_one("SELECT 1 AS ok")
        if row is not None:
            db_status = "connected"
    except Exception:
        logger.warning("Health check: database query failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
