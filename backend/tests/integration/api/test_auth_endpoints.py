"""
Integration tests for authentication endpoints.

Covers register, login and bearer-token handling on protected routes.
"""

from datetime import timedelta

import pytest

from app.models.user import User
from app.utils.jwt import create_access_token, read_access_token


def _register(client, email="newuser@example.com", password="password123", name="New User"):
    return client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "name": name},
    )


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    def test_register_success(self, client, test_db):
        """Returns 201 with a token and the public user fields."""
        response = _register(client)

        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"token", "user"}
        assert set(data["user"]) == {"id", "email", "name"}
        assert data["user"]["email"] == "newuser@example.com"
        assert data["user"]["name"] == "New User"

        user = test_db.query(User).filter(User.email == "newuser@example.com").one()
        assert data["user"]["id"] == str(user.id)
        assert user.password_hash != "password123"
        assert read_access_token(data["token"]).user_id == user.id

    def test_register_duplicate_email(self, client, test_db, sample_user):
        """Second registration with the same email is a 400."""
        response = _register(client, email=sample_user.email)

        assert response.status_code == 400
        assert response.json() == {"message": "Email already registered"}
        assert test_db.query(User).count() == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"password": "short"},
            {"password": "a" * 73},
            {"name": ""},
        ],
        ids=["bad-email", "short-password", "long-password", "empty-name"],
    )
    def test_register_invalid_input(self, client, test_db, overrides):
        """Validation failures are 400 with an errors list."""
        body = {"email": "user@example.com", "password": "password123", "name": "User"}
        body.update(overrides)

        response = client.post("/api/auth/register", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"
        assert response.json()["errors"]
        assert test_db.query(User).count() == 0

    def test_register_missing_name(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "user@example.com", "password": "password123"},
        )

        assert response.status_code == 400


class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    def test_login_success(self, client, sample_user):
        response = client.post(
            "/api/auth/login",
            json={"email": sample_user.email, "password": "password123"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == str(sample_user.id)
        assert data["user"]["name"] == sample_user.name
        assert read_access_token(data["token"]).user_id == sample_user.id

    def test_login_wrong_password_and_unknown_email(self, client, sample_user):
        """Both failures are 401 with the same message."""
        wrong_password = client.post(
            "/api/auth/login",
            json={"email": sample_user.email, "password": "wrongpassword"},
        )
        unknown_email = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "password123"},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {
            "message": "Invalid email or password"
        }

    def test_login_missing_fields(self, client):
        assert client.post("/api/auth/login", json={"email": "a@example.com"}).status_code == 400
        assert client.post("/api/auth/login", json={"password": "x"}).status_code == 400


class TestBearerToken:
    """Token handling on protected routes."""

    def test_missing_token(self, client):
        response = client.get("/api/workouts")

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_malformed_token(self, client):
        response = client.get("/api/exercises", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid or expired token"}

    def test_expired_token(self, client, sample_user):
        token = create_access_token(sample_user.id, expires_in=timedelta(seconds=-1))

        response = client.get("/api/workouts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid or expired token"}

    def test_wrong_scheme(self, client, sample_user):
        token = create_access_token(sample_user.id)

        response = client.get("/api/workouts", headers={"Authorization": f"Basic {token}"})

        assert response.status_code == 401

    def test_registered_token_works(self, client):
        """A token from registration authorizes later requests."""
        token = _register(client, email="flow@example.com").json()["token"]

        response = client.get("/api/workouts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == []
