"""Async SQLite access helpers (raw SQL) using aiosqlite.

A ``Database`` owns one connection to the portfolio file. FastAPI opens it on
startup, keeps it on ``app.state.db`` and closes it on shutdown (see
``app/main.py``); handlers receive it through the ``get_database``
dependency.

SQL parameter style:
- sqlite uses positional ``?`` placeholders.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiosqlite
from fastapi import Request

logger = logging.getLogger(__name__)


class PersistenceError(RuntimeError):
    """A statement could not be executed against the storage file."""


@dataclass(frozen=True)
class ExecuteResult:
    lastrowid: int | None
    rowcount: int


def _row_to_dict(row: aiosqlite.Row) -> dict[str, Any]:
    return {key: row[key] for key in row.keys()}


class _Session:
    """Statement runner bound to an open connection.

    Does not commit; ``Database`` decides when a unit of work ends.
    """

    def __init__(self, connection: aiosqlite.Connection) -> None:
        self._connection = connection

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        try:
            async with self._connection.execute(sql, args) as cursor:
                row = await cursor.fetchone()
        except aiosqlite.Error as exc:
            raise PersistenceError(str(exc)) from exc
        return _row_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        try:
            async with self._connection.execute(sql, args) as cursor:
                rows = await cursor.fetchall()
        except aiosqlite.Error as exc:
            raise PersistenceError(str(exc)) from exc
        return [_row_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> ExecuteResult:
        try:
            async with self._connection.execute(sql, args) as cursor:
                return ExecuteResult(lastrowid=cursor.lastrowid, rowcount=cursor.rowcount)
        except aiosqlite.Error as exc:
            raise PersistenceError(str(exc)) from exc


class Database:
    """Single-file SQLite store shared by every request.

    Statements are serialized through an ``asyncio.Lock`` so that a
    transaction never interleaves with statements from another request.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._connection: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        if self._connection is not None:
            return None
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._connection = await aiosqlite.connect(self.path)
        self._connection.row_factory = aiosqlite.Row
        logger.info("database_connected", extra={"path": str(self.path)})

    async def close(self) -> None:
        if self._connection is None:
            return None
        await self._connection.close()
        self._connection = None
        logger.info("database_closed", extra={"path": str(self.path)})

    @property
    def connection(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise RuntimeError("Database is not connected. Call connect() on startup.")
        return self._connection

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        async with self._lock:
            return await _Session(self.connection).fetch_one(sql, *args)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self._lock:
            return await _Session(self.connection).fetch_all(sql, *args)

    async def execute(self, sql: str, *args: Any) -> ExecuteResult:
        """
        Run and commit a single statement (INSERT/UPDATE/DELETE).
        """
        async with self.transaction() as session:
            return await session.execute(sql, *args)

    async def executescript(self, script: str) -> None:
        """
        Run a multi-statement script (DDL).
        """
        async with self._lock:
            try:
                await self.connection.executescript(script)
                await self.connection.commit()
            except aiosqlite.Error as exc:
                raise PersistenceError(str(exc)) from exc

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[_Session]:
        """
        Group statements into one unit of work: commit on success, roll back
        on any exception.
        """
        async with self._lock:
            connection = self.connection
            try:
                yield _Session(connection)
                try:
                    await connection.commit()
                except aiosqlite.Error as exc:
                    raise PersistenceError(str(exc)) from exc
            except BaseException:
                await connection.rollback()
                raise


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the database opened during startup."""
    return request.app.state.db
