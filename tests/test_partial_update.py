"""Unit tests for the partial update engine."""

from __future__ import annotations

import pytest

from app.db.sqlite import Database, PersistenceError
from app.services.partial_update import (
    apply_partial_update,
    build_update_statement,
    select_updatable,
)
from app.services.resources import EDUCATION, PROJECTS, SKILLS, create_record


class TestBuildUpdateStatement:
    """SQL construction from a sparse field map."""

    def test_sets_only_supplied_fields(self) -> None:
        sql, params = build_update_statement(SKILLS, 4, {"level": 7})
        assert sql == "UPDATE skills SET level = ? WHERE id = ?"
        assert params == [7, 4]

    def test_columns_follow_enumeration_order(self) -> None:
        sql, params = build_update_statement(SKILLS, 1, {"color": "#fff", "name": "Go"})
        assert sql == "UPDATE skills SET name = ?, color = ? WHERE id = ?"
        assert params == ["Go", "#fff", 1]

    def test_empty_map_is_a_valid_noop(self) -> None:
        sql, params = build_update_statement(SKILLS, 9, {})
        assert sql == "UPDATE skills SET id = id WHERE id = ?"
        assert params == [9]

    def test_unknown_fields_never_reach_sql(self) -> None:
        sql, params = build_update_statement(
            SKILLS, 2, {"level": 3, "id = 0; DROP TABLE skills; --": 1, "created_at": "x"}
        )
        assert sql == "UPDATE skills SET level = ? WHERE id = ?"
        assert params == [3, 2]

    def test_special_fields_are_encoded(self) -> None:
        sql, params = build_update_statement(
            EDUCATION, 5, {"courses": ["A", "B"], "featured": True}
        )
        assert "courses = ?" in sql and "featured = ?" in sql
        assert params == ['["A", "B"]', 1, 5]

    def test_select_updatable_drops_unknown(self) -> None:
        assert select_updatable(PROJECTS, {"title": "x", "bogus": 1}) == {"title": "x"}


class TestApplyPartialUpdate:
    """Execution against a real SQLite file."""

    @pytest.mark.asyncio
    async def test_level_update_leaves_other_fields(self, db: Database) -> None:
        created = await create_record(
            db,
            SKILLS,
            {
                "name": "Go",
                "category": "Backend",
                "level": 6,
                "icon": "go",
                "color": "#00ADD8",
                "order_index": 6,
            },
        )

        result = await apply_partial_update(db, SKILLS, created["id"], {"level": 7})

        assert result.rowcount == 1
        row = await db.fetch_one("SELECT * FROM skills WHERE id = ?", created["id"])
        assert row is not None
        assert row["level"] == 7
        assert row["name"] == "Go"
        assert row["category"] == "Backend"
        assert row["icon"] == "go"
        assert row["color"] == "#00ADD8"
        assert row["order_index"] == 6

    @pytest.mark.asyncio
    async def test_empty_update_succeeds(self, db: Database) -> None:
        created = await create_record(db, SKILLS, {"name": "Rust", "category": "Language"})
        result = await apply_partial_update(db, SKILLS, created["id"], {})
        assert result.rowcount == 1

    @pytest.mark.asyncio
    async def test_missing_row_updates_nothing(self, db: Database) -> None:
        result = await apply_partial_update(db, SKILLS, 404, {"level": 1})
        assert result.rowcount == 0

    @pytest.mark.asyncio
    async def test_constraint_violation_is_persistence_error(self, db: Database) -> None:
        created = await create_record(db, SKILLS, {"name": "Rust", "category": "Language"})

        with pytest.raises(PersistenceError):
            await apply_partial_update(db, SKILLS, created["id"], {"level": 2, "name": None})

        row = await db.fetch_one("SELECT name, level FROM skills WHERE id = ?", created["id"])
        assert row == {"name": "Rust", "level": 50}

    @pytest.mark.asyncio
    async def test_boolean_stored_as_integer(self, db: Database) -> None:
        created = await create_record(db, PROJECTS, {"title": "Site", "featured": False})
        await apply_partial_update(db, PROJECTS, created["id"], {"featured": True})
        row = await db.fetch_one("SELECT featured FROM projects WHERE id = ?", created["id"])
        assert row == {"featured": 1}
