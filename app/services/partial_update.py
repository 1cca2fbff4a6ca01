"""Partial update engine.

Builds one ``UPDATE`` touching only the fields a caller supplied and leaves
every other column at its stored value.  Column names come exclusively from
the entity's enumerated ``updatable_fields``; anything else in the request
is dropped before SQL is built.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.db.sqlite import Database, ExecuteResult
from app.services.mapper import Entity, to_storage_row

logger = logging.getLogger(__name__)


def select_updatable(entity: Entity, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Keep the keys of *fields* that *entity* allows, in enumeration order."""
    unknown = sorted(set(fields) - set(entity.updatable_fields))
    if unknown:
        logger.warning(
            "partial_update_unknown_fields_dropped",
            extra={"table": entity.table, "fields": unknown},
        )
    return {name: fields[name] for name in entity.updatable_fields if name in fields}


def build_update_statement(
    entity: Entity,
    record_id: int,
    fields: Mapping[str, Any],
) -> tuple[str, list[Any]]:
    """Return the SQL and parameters for a sparse single-row update.

    An empty field map yields a valid no-op (``SET id = id``).
    """
    row = to_storage_row(select_updatable(entity, fields), entity)
    if row:
        set_clause = ", ".join(f"{name} = ?" for name in row)
    else:
        set_clause = "id = id"
    sql = f"UPDATE {entity.table} SET {set_clause} WHERE id = ?"
    return sql, [*row.values(), record_id]


async def apply_partial_update(
    db: Database,
    entity: Entity,
    record_id: int,
    fields: Mapping[str, Any],
) -> ExecuteResult:
    """Set exactly the supplied fields on the row matching *record_id*.

    Raises ``PersistenceError`` when the statement fails; nothing is retried.
    """
    sql, params = build_update_statement(entity, record_id, fields)
    result = await db.execute(sql, *params)
    logger.debug(
        "partial_update_applied",
        extra={"table": entity.table, "record_id": record_id, "rowcount": result.rowcount},
    )
    return result
