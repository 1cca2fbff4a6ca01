"""Pydantic models for the ``skills`` table."""

from pydantic import BaseModel, ConfigDict

from app.core.constants import DEFAULT_SKILL_COLOR, DEFAULT_SKILL_LEVEL


class SkillCreate(BaseModel):
    """Payload for creating a skill (insert)."""
    name: str
    category: str
    level: int = DEFAULT_SKILL_LEVEL
    icon: str | None = None
    color: str = DEFAULT_SKILL_COLOR
    order_index: int = 0


class SkillUpdate(BaseModel):
    """Sparse payload for a partial update; only supplied keys are written."""
    name: str | None = None
    category: str | None = None
    level: int | None = None
    icon: str | None = None
    color: str | None = None
    order_index: int | None = None


class Skill(BaseModel):
    """Full skills record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    level: int | None = None
    icon: str | None = None
    color: str | None = None
    order_index: int | None = None
    created_at: str | None = None
