import pytest
import os

# point the app at the test database before it is imported
os.environ["APP_ENV"] = "test"

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from app.main import app
from app.db.database import Base, build_engine, get_session, SQLITE_TEST_DB
from app.services.post_store import PostStore

# Test database configuration
test_engine = build_engine(SQLITE_TEST_DB)
TestSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture(autouse=True)
def clean_db():
    """Drop and recreate the test database"""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield

    # clean up after the test
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def session(clean_db):
    """Session on the test database"""
    test_session = TestSessionLocal()
    yield test_session
    test_session.close()


@pytest.fixture
def store(session):
    """Post store on the test session"""
    return PostStore(session)


@pytest.fixture
def client(clean_db):
    """Create a test client"""
    test_session = TestSessionLocal()

    # override the session dependency
    def override_get_session():
        try:
            yield test_session
        finally:
            test_session.close()

    app.dependency_overrides[get_session] = override_get_session

    client = TestClient(app)
    yield client

    # clean up after the test
    test_session.close()
    app.dependency_overrides.clear()


@pytest.fixture
def test_post_data():
    return {
        "title": "Test Post",
        "content": "This is a test post content that is long enough to be stored.",
        "author": "alice",
        "tags": ["python", "fastapi"],
        "category": "Tech"
    }


@pytest.fixture
def test_post(client, test_post_data):
    """Create a test post and return it"""
    response = client.post("/api/posts", json=test_post_data)
    return response.json()["post"]
