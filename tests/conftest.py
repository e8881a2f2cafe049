"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from draftpress.config import Settings
from draftpress.database import Base, Database, get_db
from draftpress.main import create_app
from draftpress.services.generation import BlogGenerator, GeneratedPost

TEST_JWT_SECRET = "test-secret"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


class FakeBlogGenerator(BlogGenerator):
    """Generator that answers instantly and records its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.error: Exception | None = None
        self.result: GeneratedPost | None = None

    async def generate(self, topic: str, style: str) -> GeneratedPost:
        self.calls.append((topic, style))
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return GeneratedPost(
            title=f"Mock {style} Blog Post About {topic}",
            content=f"This is a mock {style} blog post about {topic}.",
        )


# Use test database - PostgreSQL in Docker, in-memory SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rsplit("/", 1)[0] + "/draftpress_test"
else:
    SQLALCHEMY_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="session")
def database():
    """Create the test database schema once for the whole session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    test_database = Database(SQLALCHEMY_DATABASE_URL)
    test_database.create_all()
    yield test_database
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db(database):
    """Create a fresh database session for each test with cleanup."""
    session = database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def settings():
    """Settings for an isolated test app."""
    return Settings(
        database_url=SQLALCHEMY_DATABASE_URL,
        jwt_secret=TEST_JWT_SECRET,
        environment="test",
        generation_provider="ollama",
        generation_timeout_seconds=1.0,
    )


@pytest.fixture
def fake_generator():
    """Generator stand-in for the AI backend."""
    return FakeBlogGenerator()


@pytest.fixture
def app(settings, database, fake_generator):
    """Application wired to the test database and fake generator."""
    return create_app(settings=settings, database=database, generator=fake_generator)


@pytest.fixture(scope="function")
def client(app, db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, email: str, password: str = "testpass123") -> AuthHeaders:
    """Sign up a user and return auth headers for it."""
    response = client.post("/api/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201
    data = response.json()["data"]

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return signup(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return signup(client, "other@example.com")
