"""Record mapper between API payloads and stored rows.

SQLite has no boolean or array column types, so:

- boolean fields are stored as ``1``/``0`` and read back as ``True``/``False``
  (any non-zero value is true, NULL is false);
- list fields (sequences of strings) are stored as JSON text, ``None`` being
  written as ``"[]"``; NULL or empty text reads back as ``[]``.

A list column holding anything other than a JSON array of strings is a
storage fault and raises ``MalformedRecordError`` instead of being silently
defaulted.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.db.sqlite import PersistenceError


class MalformedRecordError(PersistenceError):
    """A stored row could not be decoded into its API shape."""


@dataclass(frozen=True)
class Entity:
    """Static description of one table exposed by the API."""

    table: str
    updatable_fields: tuple[str, ...]
    boolean_fields: frozenset[str] = field(default_factory=frozenset)
    list_fields: frozenset[str] = field(default_factory=frozenset)
    order_column: str | None = "order_index"


def encode_list(value: Any) -> str:
    if value is None:
        return "[]"
    return json.dumps(list(value), ensure_ascii=False)


def decode_list(raw: Any, *, column: str = "") -> list[str]:
    if raw is None or raw == "":
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise MalformedRecordError(f"Column '{column}' holds malformed list data") from exc
    if not isinstance(value, list):
        raise MalformedRecordError(f"Column '{column}' does not hold a list")
    if not all(isinstance(item, str) for item in value):
        raise MalformedRecordError(f"Column '{column}' holds non-string list items")
    return value


def encode_bool(value: Any) -> int | None:
    if value is None:
        return None
    return 1 if value else 0


def to_storage_row(fields: Mapping[str, Any], entity: Entity) -> dict[str, Any]:
    """Apply the write-side transforms to a field map."""
    row: dict[str, Any] = {}
    for name, value in fields.items():
        if name in entity.list_fields:
            row[name] = encode_list(value)
        elif name in entity.boolean_fields:
            row[name] = encode_bool(value)
        else:
            row[name] = value
    return row


def from_storage_row(row: Mapping[str, Any], entity: Entity) -> dict[str, Any]:
    """Apply the read-side transforms to a stored row."""
    record = dict(row)
    for name in entity.list_fields:
        if name in record:
            record[name] = decode_list(record[name], column=name)
    for name in entity.boolean_fields:
        if name in record:
            record[name] = bool(record[name])
    return record
