"""Profile endpoints.

GET /api/profile returns the active profile (``{}`` when there is none).
PUT /api/profile/{profile_id} replaces every writable field.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.db.sqlite import Database, PersistenceError, get_database
from app.models.profile import ProfileCreate, ProfileFields
from app.services import profile as profile_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/profile")
async def get_profile(db: Database = Depends(get_database)) -> dict[str, Any]:
    try:
        profile = await profile_service.get_active_profile(db)
    except PersistenceError as exc:
        logger.error("get_profile_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to load profile") from exc
    return profile or {}


@router.post("/profile")
async def create_profile(
    body: ProfileCreate,
    db: Database = Depends(get_database),
) -> dict[str, Any]:
    """Insert a new profile and make it the active one."""
    try:
        return await profile_service.create_profile(db, body.model_dump())
    except PersistenceError as exc:
        logger.error("create_profile_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to create profile") from exc


@router.put("/profile/{profile_id}")
async def update_profile(
    profile_id: int,
    body: ProfileFields,
    db: Database = Depends(get_database),
) -> dict[str, str]:
    try:
        await profile_service.replace_profile(db, profile_id, body.model_dump())
    except PersistenceError as exc:
        logger.error(
            "update_profile_failed",
            extra={"record_id": profile_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to update profile") from exc
    return {"message": "Profile updated"}
