import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from paperhub.api.deps import get_db
from paperhub.database.db.models import Base
from paperhub.main import app


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_papers(client):
    """
    Three papers:
    - p1: John Doe (full) + Jane Smith (name only)
    - p2: John Doe (same, reused) + Alice Johnson
    - p3: Bob Lee, sole author
    """
    p1 = client.post("/api/papers", json={
        "title": "Example Paper Title",
        "publishedIn": "ICSE 2025",
        "year": 2025,
        "authors": [
            {"name": "John Doe", "email": "john@mail.utoronto.ca", "affiliation": "University of Toronto"},
            {"name": "Jane Smith"},
        ],
    })
    p2 = client.post("/api/papers", json={
        "title": "Another Paper",
        "publishedIn": "NeurIPS 2024",
        "year": 2024,
        "authors": [
            {"name": "John Doe", "email": "john@mail.utoronto.ca", "affiliation": "University of Toronto"},
            {"name": "Alice Johnson", "email": "alice@mail.utoronto.ca"},
        ],
    })
    p3 = client.post("/api/papers", json={
        "title": "Yet Another Paper",
        "publishedIn": "icse 2024 (workshop)",
        "year": 2024,
        "authors": [{"name": "Bob Lee"}],
    })
    assert p1.status_code == 201
    assert p2.status_code == 201
    assert p3.status_code == 201
    return {"p1": p1.json(), "p2": p2.json(), "p3": p3.json()}
