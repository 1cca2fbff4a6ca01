"""Skills endpoints.

GET/POST /api/skills, PUT/DELETE /api/skills/{skill_id}.  Updates are
partial: only the keys present in the body are written.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.db.sqlite import Database, PersistenceError, get_database
from app.models.skill import Skill, SkillCreate, SkillUpdate
from app.services.resources import (
    SKILLS,
    create_record,
    delete_record,
    list_records,
    update_record,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/skills", response_model=list[Skill])
async def list_skills(db: Database = Depends(get_database)) -> list[dict[str, Any]]:
    """Return all skills ordered by ``order_index``."""
    try:
        return await list_records(db, SKILLS)
    except PersistenceError as exc:
        logger.error("list_skills_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to list skills") from exc


@router.post("/skills")
async def create_skill(
    body: SkillCreate,
    db: Database = Depends(get_database),
) -> dict[str, Any]:
    try:
        return await create_record(db, SKILLS, body.model_dump(exclude_unset=True))
    except PersistenceError as exc:
        logger.error("create_skill_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to create skill") from exc


@router.put("/skills/{skill_id}")
async def update_skill(
    skill_id: int,
    body: SkillUpdate,
    db: Database = Depends(get_database),
) -> dict[str, str]:
    try:
        await update_record(db, SKILLS, skill_id, body.model_dump(exclude_unset=True))
    except PersistenceError as exc:
        logger.error(
            "update_skill_failed",
            extra={"record_id": skill_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to update skill") from exc
    return {"message": "Skill updated"}


@router.delete("/skills/{skill_id}")
async def delete_skill(skill_id: int, db: Database = Depends(get_database)) -> dict[str, str]:
    try:
        await delete_record(db, SKILLS, skill_id)
    except PersistenceError as exc:
        logger.error(
            "delete_skill_failed",
            extra={"record_id": skill_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to delete skill") from exc
    return {"message": "Skill deleted"}
