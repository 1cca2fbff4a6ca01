"""List/create/update/delete over one table.

Each portfolio table is described by an ``Entity``; the operations below
are shared by the skills, projects and education routers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.db.sqlite import Database
from app.models.education import EducationUpdate
from app.models.profile import ProfileCreate
from app.models.project import ProjectUpdate
from app.models.skill import SkillUpdate
from app.services.mapper import Entity, from_storage_row, to_storage_row
from app.services.partial_update import apply_partial_update, select_updatable

logger = logging.getLogger(__name__)

SKILLS = Entity(
    table="skills",
    updatable_fields=tuple(SkillUpdate.model_fields),
)

PROJECTS = Entity(
    table="projects",
    updatable_fields=tuple(ProjectUpdate.model_fields),
    boolean_fields=frozenset({"featured"}),
)

EDUCATION = Entity(
    table="education",
    updatable_fields=tuple(EducationUpdate.model_fields),
    boolean_fields=frozenset({"featured"}),
    list_fields=frozenset({"courses", "achievements"}),
)

PROFILE = Entity(
    table="profile",
    updatable_fields=tuple(ProfileCreate.model_fields),
    order_column=None,
)


async def list_records(db: Database, entity: Entity) -> list[dict[str, Any]]:
    """Return every row ordered by the explicit order column.

    Ties keep insertion order.  An empty table yields ``[]``.
    """
    order_by = f"{entity.order_column} ASC, id ASC" if entity.order_column else "id ASC"
    rows = await db.fetch_all(f"SELECT * FROM {entity.table} ORDER BY {order_by}")
    return [from_storage_row(row, entity) for row in rows]


async def create_record(
    db: Database,
    entity: Entity,
    fields: Mapping[str, Any],
) -> dict[str, Any]:
    """Insert one row and echo it as stored, with the assigned ``id``.

    The echo is read back from the table, so it carries the input as the
    read side decodes it plus any column defaults.
    """
    row = to_storage_row(select_updatable(entity, fields), entity)
    if row:
        columns = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)
        sql = f"INSERT INTO {entity.table} ({columns}) VALUES ({placeholders})"
    else:
        sql = f"INSERT INTO {entity.table} DEFAULT VALUES"
    async with db.transaction() as session:
        result = await session.execute(sql, *row.values())
        stored = await session.fetch_one(
            f"SELECT * FROM {entity.table} WHERE id = ?", result.lastrowid
        )
    logger.info("record_created", extra={"table": entity.table, "record_id": result.lastrowid})
    return from_storage_row(stored, entity)


async def update_record(
    db: Database,
    entity: Entity,
    record_id: int,
    fields: Mapping[str, Any],
) -> None:
    """Write only the supplied fields of one row."""
    result = await apply_partial_update(db, entity, record_id, fields)
    logger.info(
        "record_updated",
        extra={"table": entity.table, "record_id": record_id, "rowcount": result.rowcount},
    )


async def delete_record(db: Database, entity: Entity, record_id: int) -> None:
    """Delete one row.  Deleting a missing id is not an error."""
    result = await db.execute(f"DELETE FROM {entity.table} WHERE id = ?", record_id)
    logger.info(
        "record_deleted",
        extra={"table": entity.table, "record_id": record_id, "rowcount": result.rowcount},
    )
