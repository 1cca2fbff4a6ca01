"""Application constants.

Contains the default content seeded into an empty database and the
user-facing messages returned by the API.
"""

from typing import Any

# ---------------------------------------------------------------------------
# Default seed content
# Inserted only when the corresponding table is empty at startup.
# ---------------------------------------------------------------------------
DEFAULT_PROFILE: dict[str, Any] = {
    "name": "Analyste Développeur",
    "title": "Développeur Full Stack Senior",
    "description": "Passionné par la création d'expériences numériques exceptionnelles",
}

DEFAULT_SKILLS: list[dict[str, Any]] = [
    {"name": "React", "category": "Frontend", "level": 9, "icon": "react", "color": "#61DAFB", "order_index": 1},
    {"name": "Node.js", "category": "Backend", "level": 8, "icon": "nodejs", "color": "#339933", "order_index": 2},
    {"name": "TypeScript", "category": "Language", "level": 8, "icon": "typescript", "color": "#3178C6", "order_index": 3},
    {"name": "SQLite", "category": "Database", "level": 7, "icon": "database", "color": "#003B57", "order_index": 4},
    {"name": "Tailwind CSS", "category": "Styling", "level": 9, "icon": "css", "color": "#06B6D4", "order_index": 5},
]

# ---------------------------------------------------------------------------
# Column defaults shared by the DDL and the request models
# ---------------------------------------------------------------------------
DEFAULT_SKILL_LEVEL: int = 50
DEFAULT_SKILL_COLOR: str = "#3B82F6"
DEFAULT_LANGUAGE: str = "fr"
DEFAULT_THEME: str = "auto"

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------
CATCH_ALL_MESSAGE: str = "Portfolio API - use /api/... to reach the endpoints"

CV_UPLOADED_MESSAGE: str = "CV uploaded and profile updated"
