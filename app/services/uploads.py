"""CV upload and download.

Upload is a two-phase write: the file lands in the uploads directory first,
then the active profile is pointed at it.  When the second phase fails the
file is removed again so no orphan is left behind.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from fastapi import HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.db.sqlite import Database, PersistenceError
from app.services import profile as profile_service

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024  # 1 MiB


@dataclass(frozen=True)
class StoredUpload:
    original_name: str
    stored_name: str
    url: str


@dataclass(frozen=True)
class CvFile:
    path: Path
    download_name: str


def safe_original_name(filename: str | None) -> str:
    """Strip any directory part a client may have sent with the filename."""
    name = PurePosixPath((filename or "").replace("\\", "/")).name
    if name in ("", ".", ".."):
        raise HTTPException(status_code=400, detail="No file provided.")
    return name


def stored_name_for(original_name: str, *, now: float | None = None) -> str:
    """``<epoch-ms>-<original-name>``; unique at millisecond granularity."""
    epoch_ms = int((time.time() if now is None else now) * 1000)
    return f"{epoch_ms}-{original_name}"


async def read_upload_bytes(file: UploadFile, max_bytes: int) -> bytes:
    """
    Read the upload into memory, enforcing a maximum size.
    """
    buf = bytearray()
    while True:
        chunk = await file.read(_CHUNK_SIZE)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Max is {max_bytes} bytes.",
            )
    return bytes(buf)


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


async def receive_upload(db: Database, file: UploadFile) -> StoredUpload:
    """Persist an uploaded CV and link it to the active profile.

    Raises ``HTTPException`` (400/404/413) for client-facing conditions and
    lets ``PersistenceError`` propagate after cleaning up the written file.
    """
    original_name = safe_original_name(file.filename)
    data = await read_upload_bytes(file, max_bytes=settings.MAX_UPLOAD_BYTES)

    stored_name = stored_name_for(original_name)
    uploads_dir = settings.uploads_dir
    target = uploads_dir / stored_name
    url = f"/{settings.UPLOADS_DIR_NAME}/{stored_name}"

    await run_in_threadpool(uploads_dir.mkdir, parents=True, exist_ok=True)
    await run_in_threadpool(target.write_bytes, data)
    logger.info(
        "cv_written",
        extra={"stored_name": stored_name, "size_bytes": len(data)},
    )

    try:
        updated = await profile_service.link_cv(db, original_name, url)
    except PersistenceError:
        await run_in_threadpool(_remove_quietly, target)
        logger.warning("cv_orphan_removed", extra={"stored_name": stored_name})
        raise

    if updated == 0:
        await run_in_threadpool(_remove_quietly, target)
        logger.warning("cv_upload_without_profile", extra={"stored_name": stored_name})
        raise HTTPException(status_code=404, detail="No profile on record.")

    return StoredUpload(original_name=original_name, stored_name=stored_name, url=url)


def resolve_public_path(url: str) -> Path | None:
    """Map a public URL such as ``/uploads/x.pdf`` to a file under PUBLIC_DIR.

    Returns None when the URL escapes the public root.
    """
    root = Path(settings.PUBLIC_DIR).resolve()
    candidate = (root / url.lstrip("/")).resolve()
    if not candidate.is_relative_to(root):
        return None
    return candidate


def _existing_public_file(url: str, within: Path | None = None) -> Path | None:
    path = resolve_public_path(url)
    if path is None or not path.is_file():
        return None
    if within is not None and not path.is_relative_to(within.resolve()):
        return None
    return path


async def current_cv(db: Database) -> CvFile:
    """Locate the active profile's CV on disk, or raise a 404."""
    profile = await profile_service.get_active_profile(db)
    if profile is None or not profile.get("cv_url"):
        raise HTTPException(status_code=404, detail="CV not found.")

    path = await run_in_threadpool(_existing_public_file, profile["cv_url"])
    if path is None:
        logger.warning("cv_file_missing", extra={"cv_url": profile["cv_url"]})
        raise HTTPException(status_code=404, detail="CV not found.")

    download_name = profile.get("cv_filename") or path.name
    return CvFile(path=path, download_name=download_name)


async def uploaded_file(name: str) -> Path:
    """Resolve a file inside the uploads directory, or raise a 404."""
    path = await run_in_threadpool(
        _existing_public_file,
        f"{settings.UPLOADS_DIR_NAME}/{name}",
        settings.uploads_dir,
    )
    if path is None:
        raise HTTPException(status_code=404, detail="File not found.")
    return path
