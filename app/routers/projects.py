"""Projects endpoints.

GET/POST /api/projects, PUT/DELETE /api/projects/{project_id}.
``featured`` is accepted as a boolean and stored as 0/1.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.db.sqlite import Database, PersistenceError, get_database
from app.models.project import Project, ProjectCreate, ProjectUpdate
from app.services.resources import (
    PROJECTS,
    create_record,
    delete_record,
    list_records,
    update_record,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/projects", response_model=list[Project])
async def list_projects(db: Database = Depends(get_database)) -> list[dict[str, Any]]:
    try:
        return await list_records(db, PROJECTS)
    except PersistenceError as exc:
        logger.error("list_projects_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to list projects") from exc


@router.post("/projects")
async def create_project(
    body: ProjectCreate,
    db: Database = Depends(get_database),
) -> dict[str, Any]:
    try:
        return await create_record(db, PROJECTS, body.model_dump(exclude_unset=True))
    except PersistenceError as exc:
        logger.error("create_project_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to create project") from exc


@router.put("/projects/{project_id}")
async def update_project(
    project_id: int,
    body: ProjectUpdate,
    db: Database = Depends(get_database),
) -> dict[str, str]:
    try:
        await update_record(db, PROJECTS, project_id, body.model_dump(exclude_unset=True))
    except PersistenceError as exc:
        logger.error(
            "update_project_failed",
            extra={"record_id": project_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to update project") from exc
    return {"message": "Project updated"}


@router.delete("/projects/{project_id}")
async def delete_project(project_id: int, db: Database = Depends(get_database)) -> dict[str, str]:
    try:
        await delete_record(db, PROJECTS, project_id)
    except PersistenceError as exc:
        logger.error(
            "delete_project_failed",
            extra={"record_id": project_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to delete project") from exc
    return {"message": "Project deleted"}
