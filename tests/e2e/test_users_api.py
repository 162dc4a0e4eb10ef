"""End-to-end tests for user profile endpoints."""

import pytest
from fastapi.testclient import TestClient

from blog.config import Settings
from blog.domain.value import UserId
from blog.interface.api.app import create_app
from blog.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by the seeded application stores."""
    test_container = build_test_container(unmock={"persistence"})
    app_instance = create_app(test_container)
    with TestClient(app_instance) as test_client:
        yield test_client


def auth_headers(user_id: int = 1, username: str = "demo") -> dict[str, str]:
    token = create_token(UserId(user_id), username, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


class TestUserProfileEndpoints:
    """End-to-end tests for user profile API endpoints."""

    def test_get_profile(self, client):
        response = client.get("/users/1")

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "demo"
        assert data["bio"]
        assert "email" not in data
        assert "password_hash" not in data

    def test_get_missing_profile_fails(self, client):
        assert client.get("/users/42").status_code == 404

    def test_update_profile_requires_auth(self, client):
        response = client.put("/users/profile", json={"bio": "Hello"})

        assert response.status_code == 401

    def test_update_profile(self, client):
        # Act
        response = client.put(
            "/users/profile",
            json={"username": "demo2", "bio": "New bio"},
            headers=auth_headers(),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "demo2"
        assert client.get("/users/1").json()["bio"] == "New bio"
        # Existing content keeps the old attribution
        comments = client.get("/posts/1/comments").json()["comments"]
        assert comments[0]["author"]["username"] == "demo"

    def test_update_to_taken_username_fails(self, client):
        registered = client.post(
            "/auth/register",
            json={"username": "taken", "email": "t@example.com", "password": "secret1"},
        )
        assert registered.status_code == 201

        response = client.put(
            "/users/profile", json={"username": "taken"}, headers=auth_headers()
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Username is already taken"
