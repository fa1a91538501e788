"""
Pytest configuration and fixtures for service and API tests.
"""

import os
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fastapi.testclient import TestClient

from app.db.database import Base, get_db
from app.main import app

# Import models to register with Base.metadata
from app.models import Exercise, User
from app.utils.jwt import create_access_token
from app.utils.password import hash_password


# Use test database URL from env, or default to SQLite in-memory
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # SQLite in-memory for fast tests
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    else:
        # Postgres for more realistic integration tests
        engine = create_engine(TEST_DATABASE_URL, echo=False)

    # Create all tables
    Base.metadata.create_all(bind=engine)

    yield engine

    # Drop all tables after test
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def override_get_db(test_db):
    """Override get_db dependency for FastAPI."""

    def _get_db():
        try:
            yield test_db
        finally:
            pass  # Don't close, we'll handle it in fixture

    return _get_db


def _make_user(db, email: str, name: str, password: str = "password123") -> User:
    user = User(email=email, name=name, password_hash=hash_password(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def sample_user(test_db):
    """A registered user with password 'password123'."""
    return _make_user(test_db, "john@example.com", "John")


@pytest.fixture
def other_user(test_db):
    """A second user, for ownership checks."""
    return _make_user(test_db, "jane@example.com", "Jane")


@pytest.fixture
def auth_headers():
    """Build an Authorization header carrying a fresh token for a user."""

    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}

    return _headers


@pytest.fixture
def client(override_get_db):
    """TestClient wired to the test database."""
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_exercises(test_db):
    """A small catalog keyed by exercise name."""
    rows = [
        ("Bench Press", "Chest press on a flat bench", "Strength", "Chest"),
        ("Squat", "Barbell back squat", "Strength", "Legs"),
        ("Pull-Up", "Bodyweight pull", "Strength", "Back"),
        ("Running", "Steady-state run", "Cardio", None),
        ("Hamstring Stretch", "Seated stretch", "Flexibility", "Legs"),
    ]
    exercises = {}
    for name, description, category, muscle_group in rows:
        exercise = Exercise(
            name=name,
            description=description,
            category=category,
            muscle_group=muscle_group,
        )
        test_db.add(exercise)
        exercises[name] = exercise
    test_db.commit()
    for exercise in exercises.values():
        test_db.refresh(exercise)
    return exercises
