"""
Pytest configuration and fixtures for Admin Portal API tests.
"""
import mongomock
import pytest
from fastapi.testclient import TestClient

from app.bootstrap import REQUESTS_COLLECTION
from app.database import get_db
from app.limiter import limiter
from app.main import app
from app.models.request import new_request_document

# Disable rate limiting for tests
limiter.enabled = False

TEST_DATABASE = "portal_test"


@pytest.fixture(scope="function")
def db():
    """Create a fresh in-memory database for each test."""
    client = mongomock.MongoClient()
    test_db = client[TEST_DATABASE]

    # mongomock has no collection validators, so create the collection up front
    test_db.create_collection(REQUESTS_COLLECTION)

    app.dependency_overrides[get_db] = lambda: test_db

    yield test_db

    app.dependency_overrides.clear()
    client.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def requests_collection(db):
    return db[REQUESTS_COLLECTION]


@pytest.fixture(scope="function")
def pending_request(requests_collection):
    """Insert a single pending request directly into the database."""
    doc = new_request_document("Jane Doe", "Laptop stand")
    doc["_id"] = requests_collection.insert_one(doc).inserted_id
    return doc
