"""
Test fixtures for the DevConnector API.

An in-memory mongomock-motor database replaces MongoDB through
``app.dependency_overrides``, so no Mongo server is needed. The ASGI
transport does not run the app lifespan, so the real Mongo client is never
created.
"""
import pytest
import pytest_asyncio
from datetime import timedelta
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient

from app.main import app
from app.database.mongo_connection import get_database
from app.core.security import create_access_token
from app.models import user as user_model

TEST_DB_NAME = "devconnector_test"

@pytest.fixture
def test_db():
    """Fresh in-memory database for each test."""
    client = AsyncMongoMockClient()
    return client[TEST_DB_NAME]

@pytest_asyncio.fixture
async def async_client(test_db):
    """Async test client with the database dependency overridden."""
    async def override_get_database():
        return test_db

    app.dependency_overrides[get_database] = override_get_database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    return {
        "name": "Test User",
        "email": "TestUser@Example.com",
        "password": "hashed-password",
        "avatar": "//www.gravatar.com/avatar/test"
    }

@pytest.fixture
def test_user_data_2():
    """Second sample user data for testing."""
    return {
        "name": "Test User 2",
        "email": "testuser2@example.com",
        "password": "hashed-password-2",
        "avatar": None
    }

@pytest_asyncio.fixture
async def test_user(test_db, test_user_data):
    return await user_model.create_user(test_db, test_user_data)

@pytest_asyncio.fixture
async def test_user_2(test_db, test_user_data_2):
    return await user_model.create_user(test_db, test_user_data_2)

def make_token(user, expires_delta=None):
    return create_access_token({"user_id": str(user["_id"])}, expires_delta)

@pytest.fixture
def auth_headers(test_user):
    """Authorization headers for the first test user."""
    return {"Authorization": f"Bearer {make_token(test_user)}"}

@pytest.fixture
def auth_headers_2(test_user_2):
    """Authorization headers for the second test user."""
    return {"Authorization": f"Bearer {make_token(test_user_2)}"}

@pytest.fixture
def expired_headers(test_user):
    """Authorization headers carrying an already expired token."""
    return {"Authorization": f"Bearer {make_token(test_user, timedelta(minutes=-5))}"}

@pytest_asyncio.fixture
async def test_post(async_client, auth_headers):
    """A post created through the API by the first test user."""
    response = await async_client.post(
        "/api/posts", json={"text": "Hello developers"}, headers=auth_headers
    )
    assert response.status_code == 200
    return response.json()
