"""Pydantic models for the ``projects`` table.

``technologies`` is free text (e.g. ``"FastAPI, SQLite"``), not a list.
``featured`` is stored as 0/1.
"""

from pydantic import BaseModel, ConfigDict


class ProjectCreate(BaseModel):
    """Payload for creating a project (insert)."""
    title: str
    description: str | None = None
    technologies: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    order_index: int = 0


class ProjectUpdate(BaseModel):
    """Sparse payload for a partial update; only supplied keys are written."""
    title: str | None = None
    description: str | None = None
    technologies: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool | None = None
    order_index: int | None = None


class Project(BaseModel):
    """Full projects record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    technologies: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    order_index: int | None = None
    created_at: str | None = None
