"""Pydantic models for the ``profile`` table.

``updated_at`` is managed by the database and is read-only.  ``cv_filename``
and ``cv_url`` are normally written by the CV upload endpoint.  ``language``
and ``theme`` are chosen when a profile is created and are never touched by
the full-replace update.
"""

from pydantic import BaseModel, ConfigDict

from app.core.constants import DEFAULT_LANGUAGE, DEFAULT_THEME


class ProfileFields(BaseModel):
    """Columns written by the full-replace update.

    Omitted fields are written as NULL.
    """
    name: str | None = None
    title: str | None = None
    description: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    about: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    cv_filename: str | None = None
    cv_url: str | None = None


class ProfileCreate(ProfileFields):
    """Payload for creating a profile (insert)."""
    name: str
    title: str
    language: str | None = DEFAULT_LANGUAGE
    theme: str | None = DEFAULT_THEME


class Profile(ProfileFields):
    """Full profile record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    language: str | None = None
    theme: str | None = None
    updated_at: str | None = None


class UploadResponse(BaseModel):
    filename: str
    url: str
    message: str
