"""Pydantic models for the ``education`` table.

Dates are free text and never parsed.  ``courses`` and ``achievements`` are
ordered lists of strings persisted as JSON text.
"""

from pydantic import BaseModel, ConfigDict


class EducationCreate(BaseModel):
    """Payload for creating an education entry (insert)."""
    degree: str
    institution: str
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    gpa: str | None = None
    honors: str | None = None
    courses: list[str] | None = None
    achievements: list[str] | None = None
    featured: bool = False
    order_index: int = 0


class EducationUpdate(BaseModel):
    """Sparse payload for a partial update; only supplied keys are written."""
    degree: str | None = None
    institution: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    gpa: str | None = None
    honors: str | None = None
    courses: list[str] | None = None
    achievements: list[str] | None = None
    featured: bool | None = None
    order_index: int | None = None


class Education(BaseModel):
    """Full education record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    degree: str
    institution: str
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None
    gpa: str | None = None
    honors: str | None = None
    courses: list[str] = []
    achievements: list[str] = []
    featured: bool = False
    order_index: int | None = None
    created_at: str | None = None
