"""Profile persistence.

The authoritative profile is the row named by the single-row
``active_profile`` pointer.  Creating a profile moves the pointer to the new
row inside the same transaction; older rows stay as inert history.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.db.sqlite import Database, ExecuteResult
from app.models.profile import ProfileFields
from app.services.mapper import from_storage_row, to_storage_row
from app.services.partial_update import select_updatable
from app.services.resources import PROFILE

logger = logging.getLogger(__name__)

REPLACEABLE_FIELDS = tuple(ProfileFields.model_fields)

_ACTIVE_PROFILE_SQL = """
    SELECT p.*
    FROM profile p
    JOIN active_profile a ON a.profile_id = p.id
    WHERE a.slot = 1
"""


async def get_active_profile(db: Database) -> dict[str, Any] | None:
    row = await db.fetch_one(_ACTIVE_PROFILE_SQL)
    return from_storage_row(row, PROFILE) if row is not None else None


async def create_profile(db: Database, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Insert a profile and make it the active one."""
    values = select_updatable(PROFILE, fields)
    row = to_storage_row(values, PROFILE)
    columns = ", ".join(row)
    placeholders = ", ".join("?" for _ in row)
    async with db.transaction() as session:
        result = await session.execute(
            f"INSERT INTO profile ({columns}) VALUES ({placeholders})",
            *row.values(),
        )
        await session.execute(
            "INSERT OR REPLACE INTO active_profile (slot, profile_id) VALUES (1, ?)",
            result.lastrowid,
        )
        stored = await session.fetch_one("SELECT * FROM profile WHERE id = ?", result.lastrowid)
    logger.info("profile_created", extra={"record_id": result.lastrowid})
    return from_storage_row(stored, PROFILE)


async def replace_profile(
    db: Database,
    profile_id: int,
    fields: Mapping[str, Any],
) -> ExecuteResult:
    """Full-field update of the replaceable columns, missing ones set to NULL.

    ``language`` and ``theme`` keep their stored values.
    """
    row = to_storage_row(
        {name: fields.get(name) for name in REPLACEABLE_FIELDS},
        PROFILE,
    )
    set_clause = ", ".join(f"{name} = ?" for name in row)
    result = await db.execute(
        f"UPDATE profile SET {set_clause}, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
        *row.values(),
        profile_id,
    )
    logger.info(
        "profile_replaced",
        extra={"record_id": profile_id, "rowcount": result.rowcount},
    )
    return result


async def link_cv(db: Database, cv_filename: str, cv_url: str) -> int:
    """Point the active profile at a résumé file.

    Returns the number of rows updated: 0 when no profile is active.
    """
    result = await db.execute(
        """
        UPDATE profile
        SET cv_filename = ?, cv_url = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = (SELECT profile_id FROM active_profile WHERE slot = 1)
        """,
        cv_filename,
        cv_url,
    )
    return result.rowcount
