import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

from contact_manager.db.contact_store import ContactStore
from contact_manager.routes.contacts import get_contact_store
from main import app


class UnreachableCollection:
    """Collection whose every call fails like a dead Mongo server."""

    def find(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    async def insert_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    async def delete_one(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")


@pytest.fixture
def collection():
    return AsyncMongoMockClient()["contact-manager-test"]["contacts"]


@pytest.fixture
def store(collection):
    return ContactStore(collection)


@pytest.fixture
def broken_store():
    return ContactStore(UnreachableCollection())


@pytest.fixture
def override_store():
    def _override(store):
        app.dependency_overrides[get_contact_store] = lambda: store
    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def client(store, override_store):
    override_store(store)
    return TestClient(app)


@pytest.fixture
def ada():
    return {"name": "Ada", "email": "ada@example.com", "phone": "123-456-7890", "message": ""}
