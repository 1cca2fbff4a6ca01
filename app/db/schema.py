"""Table definitions and default content for the portfolio database.

``init_schema`` is idempotent and runs on every startup.  ``seed_defaults``
only touches tables that are still empty.
"""

from __future__ import annotations

import logging

from app.core.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_PROFILE,
    DEFAULT_SKILL_COLOR,
    DEFAULT_SKILL_LEVEL,
    DEFAULT_SKILLS,
    DEFAULT_THEME,
)
from app.db.sqlite import Database

logger = logging.getLogger(__name__)

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS profile (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    title TEXT NOT NULL,
    description TEXT,
    email TEXT,
    phone TEXT,
    location TEXT,
    about TEXT,
    github_url TEXT,
    linkedin_url TEXT,
    cv_filename TEXT,
    cv_url TEXT,
    language TEXT DEFAULT '{DEFAULT_LANGUAGE}',
    theme TEXT DEFAULT '{DEFAULT_THEME}',
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

-- Single-row pointer naming the authoritative profile.
CREATE TABLE IF NOT EXISTS active_profile (
    slot INTEGER PRIMARY KEY CHECK (slot = 1),
    profile_id INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS skills (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    category TEXT NOT NULL,
    level INTEGER DEFAULT {DEFAULT_SKILL_LEVEL},
    icon TEXT,
    color TEXT DEFAULT '{DEFAULT_SKILL_COLOR}',
    order_index INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS projects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    technologies TEXT,
    github_url TEXT,
    live_url TEXT,
    featured BOOLEAN DEFAULT 0,
    order_index INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS education (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    degree TEXT NOT NULL,
    institution TEXT NOT NULL,
    location TEXT,
    start_date TEXT,
    end_date TEXT,
    description TEXT,
    gpa TEXT,
    honors TEXT,
    courses TEXT,
    achievements TEXT,
    featured BOOLEAN DEFAULT 0,
    order_index INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""


async def init_schema(db: Database) -> None:
    """Create every table that does not exist yet."""
    await db.executescript(SCHEMA_SQL)


async def _is_empty(db: Database, table: str) -> bool:
    row = await db.fetch_one(f"SELECT COUNT(*) AS count FROM {table}")
    return row is None or row["count"] == 0


async def seed_defaults(db: Database) -> None:
    """Insert the default profile and skills into empty tables."""
    if await _is_empty(db, "profile"):
        logger.info("seed_profile", extra={"table": "profile"})
        async with db.transaction() as session:
            result = await session.execute(
                "INSERT INTO profile (name, title, description) VALUES (?, ?, ?)",
                DEFAULT_PROFILE["name"],
                DEFAULT_PROFILE["title"],
                DEFAULT_PROFILE["description"],
            )
            await session.execute(
                "INSERT OR REPLACE INTO active_profile (slot, profile_id) VALUES (1, ?)",
                result.lastrowid,
            )
    else:
        logger.info("seed_profile_skipped", extra={"table": "profile"})

    if await _is_empty(db, "skills"):
        logger.info("seed_skills", extra={"count": len(DEFAULT_SKILLS)})
        async with db.transaction() as session:
            for skill in DEFAULT_SKILLS:
                await session.execute(
                    "INSERT INTO skills (name, category, level, icon, color, order_index) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    skill["name"],
                    skill["category"],
                    skill["level"],
                    skill["icon"],
                    skill["color"],
                    skill["order_index"],
                )
    else:
        logger.info("seed_skills_skipped", extra={"table": "skills"})
