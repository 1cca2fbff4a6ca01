"""CV upload/download endpoints and the public uploads directory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.responses import FileResponse

from app.core.constants import CV_UPLOADED_MESSAGE
from app.db.sqlite import Database, PersistenceError, get_database
from app.models.profile import UploadResponse
from app.services import uploads as upload_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/upload-cv", response_model=UploadResponse)
async def upload_cv(
    cv: UploadFile | None = File(default=None),
    db: Database = Depends(get_database),
) -> UploadResponse:
    """Store the multipart ``cv`` file and link it to the active profile."""
    if cv is None:
        raise HTTPException(status_code=400, detail="No file provided.")

    try:
        stored = await upload_service.receive_upload(db, cv)
    except PersistenceError as exc:
        logger.error("upload_cv_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to update profile with CV") from exc
    finally:
        await cv.close()

    return UploadResponse(
        filename=stored.original_name,
        url=stored.url,
        message=CV_UPLOADED_MESSAGE,
    )


@router.get("/api/download-cv")
async def download_cv(db: Database = Depends(get_database)) -> FileResponse:
    try:
        cv_file = await upload_service.current_cv(db)
    except PersistenceError as exc:
        logger.error("download_cv_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to load CV") from exc
    return FileResponse(cv_file.path, filename=cv_file.download_name)


@router.get("/uploads/{name}")
async def get_uploaded_file(name: str) -> FileResponse:
    return FileResponse(await upload_service.uploaded_file(name))
