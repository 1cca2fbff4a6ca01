"""API tests for /api/profile."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.core.constants import DEFAULT_PROFILE


class TestGetProfile:

    def test_no_profile_returns_empty_object(self, test_client: TestClient) -> None:
        response = test_client.get("/api/profile")
        assert response.status_code == 200
        assert response.json() == {}

    def test_seeded_profile_is_active(self, seeded_client: TestClient) -> None:
        profile = seeded_client.get("/api/profile").json()

        assert profile["name"] == DEFAULT_PROFILE["name"]
        assert profile["title"] == DEFAULT_PROFILE["title"]
        assert profile["language"] == "fr"
        assert profile["theme"] == "auto"
        assert profile["updated_at"]


class TestCreateProfile:

    def test_newest_profile_becomes_active(self, seeded_client: TestClient) -> None:
        created = seeded_client.post(
            "/api/profile", json={"name": "Ada", "title": "Engineer", "language": "en"}
        ).json()

        profile = seeded_client.get("/api/profile").json()

        assert profile["id"] == created["id"]
        assert profile["name"] == "Ada"
        assert profile["language"] == "en"
        assert profile["theme"] == "auto"

    def test_create_echoes_stored_row(self, test_client: TestClient) -> None:
        created = test_client.post("/api/profile", json={"name": "Ada", "title": "Engineer"}).json()

        assert isinstance(created["id"], int)
        assert created["language"] == "fr"
        assert created["theme"] == "auto"
        assert created["email"] is None
        assert created["updated_at"]


class TestUpdateProfile:

    def test_full_update(self, test_client: TestClient) -> None:
        created = test_client.post("/api/profile", json={"name": "Ada", "title": "Engineer"}).json()
        fields = {
            "name": "Ada Lovelace",
            "title": "Analyst",
            "description": "First programmer",
            "email": "ada@example.com",
            "phone": "+44 20 0000 0000",
            "location": "London",
            "about": "Notes on the Analytical Engine",
            "github_url": "https://github.com/ada",
            "linkedin_url": "https://linkedin.com/in/ada",
            "cv_filename": None,
            "cv_url": None,
        }

        response = test_client.put(f"/api/profile/{created['id']}", json=fields)

        assert response.status_code == 200
        assert "message" in response.json()
        profile = test_client.get("/api/profile").json()
        for key, value in fields.items():
            assert profile[key] == value

    def test_language_and_theme_survive_replace(self, seeded_client: TestClient) -> None:
        """A full replace leaves the stored locale and theme alone."""
        profile_id = seeded_client.get("/api/profile").json()["id"]
        fields = {
            "name": "Ada Lovelace",
            "title": "Analyst",
            "description": None,
            "email": "ada@example.com",
            "phone": None,
            "location": "London",
            "about": None,
            "github_url": None,
            "linkedin_url": None,
            "cv_filename": None,
            "cv_url": None,
        }

        response = seeded_client.put(f"/api/profile/{profile_id}", json=fields)

        assert response.status_code == 200
        profile = seeded_client.get("/api/profile").json()
        assert profile["name"] == "Ada Lovelace"
        assert profile["language"] == "fr"
        assert profile["theme"] == "auto"

    def test_language_and_theme_in_body_are_ignored(self, test_client: TestClient) -> None:
        created = test_client.post(
            "/api/profile", json={"name": "Ada", "title": "Engineer", "language": "en"}
        ).json()

        test_client.put(
            f"/api/profile/{created['id']}",
            json={"name": "Ada", "title": "Engineer", "language": "de", "theme": "dark"},
        )

        profile = test_client.get("/api/profile").json()
        assert profile["language"] == "en"
        assert profile["theme"] == "auto"

    def test_update_replaces_omitted_fields(self, test_client: TestClient) -> None:
        created = test_client.post(
            "/api/profile", json={"name": "Ada", "title": "Engineer", "email": "ada@example.com"}
        ).json()

        test_client.put(f"/api/profile/{created['id']}", json={"name": "Ada", "title": "Analyst"})

        profile = test_client.get("/api/profile").json()
        assert profile["title"] == "Analyst"
        assert profile["email"] is None

    def test_missing_required_column_returns_500(self, test_client: TestClient) -> None:
        created = test_client.post("/api/profile", json={"name": "Ada", "title": "Engineer"}).json()

        response = test_client.put(f"/api/profile/{created['id']}", json={"name": "Ada"})

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to update profile"}
