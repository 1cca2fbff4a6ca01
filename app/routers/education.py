"""Education endpoints.

GET/POST /api/education, PUT/DELETE /api/education/{education_id}.
``courses`` and ``achievements`` travel as string arrays and are decoded on
every read; a stored value that is not a JSON array yields a 500.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.db.sqlite import Database, PersistenceError, get_database
from app.models.education import Education, EducationCreate, EducationUpdate
from app.services.resources import (
    EDUCATION,
    create_record,
    delete_record,
    list_records,
    update_record,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/education", response_model=list[Education])
async def list_education(db: Database = Depends(get_database)) -> list[dict[str, Any]]:
    try:
        return await list_records(db, EDUCATION)
    except PersistenceError as exc:
        logger.error("list_education_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to list education") from exc


@router.post("/education")
async def create_education(
    body: EducationCreate,
    db: Database = Depends(get_database),
) -> dict[str, Any]:
    try:
        return await create_record(db, EDUCATION, body.model_dump(exclude_unset=True))
    except PersistenceError as exc:
        logger.error("create_education_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to create education") from exc


@router.put("/education/{education_id}")
async def update_education(
    education_id: int,
    body: EducationUpdate,
    db: Database = Depends(get_database),
) -> dict[str, str]:
    try:
        await update_record(db, EDUCATION, education_id, body.model_dump(exclude_unset=True))
    except PersistenceError as exc:
        logger.error(
            "update_education_failed",
            extra={"record_id": education_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to update education") from exc
    return {"message": "Education updated"}


@router.delete("/education/{education_id}")
async def delete_education(
    education_id: int,
    db: Database = Depends(get_database),
) -> dict[str, str]:
    try:
        await delete_record(db, EDUCATION, education_id)
    except PersistenceError as exc:
        logger.error(
            "delete_education_failed",
            extra={"record_id": education_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to delete education") from exc
    return {"message": "Education deleted"}
