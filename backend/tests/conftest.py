"""
Movies Library Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── fake_db: In-memory stand-in for the Motor database (no MongoDB needed)
    ├── failing_db: Database whose every operation raises a driver error
    └── test_client: HTTPX AsyncClient wired to the app, store overridden

The in-memory database implements only what the services call:
find(filter).to_list(), find_one, insert_one, update_one with $set and
delete_one. A scalar filter value matches an array field when the array
contains it, as in MongoDB.
"""

import os
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

# Override settings for testing BEFORE any app imports
os.environ["MONGODB_URL"] = "mongodb://127.0.0.1:27017/movies-lib-test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from movielib.database import get_database


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, expected in query.items():
        actual = document.get(key)
        if isinstance(actual, list) and not isinstance(expected, list):
            if expected not in actual:
                return False
        elif actual != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = [dict(doc) for doc in self._documents]
        return documents if length is None else documents[:length]


class FakeCollection:
    def __init__(self):
        self.documents: List[Dict[str, Any]] = []

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        query = query or {}
        return FakeCursor([doc for doc in self.documents if _matches(doc, query)])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self.documents:
            if _matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, document: Dict[str, Any]) -> SimpleNamespace:
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> SimpleNamespace:
        for doc in self.documents:
            if _matches(doc, query):
                doc.update(update["$set"])
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: Dict[str, Any]) -> SimpleNamespace:
        for index, doc in enumerate(self.documents):
            if _matches(doc, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    name = "movies-lib-test"

    def __init__(self):
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())


class FailingCollection:
    """Every call raises the error a stopped MongoDB server produces."""

    def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("127.0.0.1:27017: connection refused")

    find = _fail

    async def find_one(self, *args, **kwargs):
        self._fail()

    async def insert_one(self, *args, **kwargs):
        self._fail()

    async def update_one(self, *args, **kwargs):
        self._fail()

    async def delete_one(self, *args, **kwargs):
        self._fail()


class FailingDatabase:
    def __getitem__(self, name: str) -> FailingCollection:
        return FailingCollection()


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def failing_db() -> FailingDatabase:
    return FailingDatabase()


@pytest.fixture
def sample_movie() -> Dict[str, Any]:
    return {
        "title": "Alien",
        "genre": ["Horror", "Science Fiction"],
        "releaseDate": "1979-05-25",
        "description": "In space no one can hear you scream.",
    }


@pytest.fixture
def app():
    from movielib.main import app

    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app, fake_db):
    """
    HTTPX AsyncClient talking to the app with `fake_db` as the store.

    Usage:
        async def test_list(test_client, fake_db):
            response = await test_client.get("/movies")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_database] = lambda: fake_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
