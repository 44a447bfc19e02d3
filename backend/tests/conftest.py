"""
StudyMate Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   MongoDB is never contacted. Collections are MagicMocks whose driver
       coroutines are AsyncMocks; the HTTP client talks to the app through
       ASGITransport with `get_store` overridden to return the mock store.

Fixtures:
    ├── mock_store: MongoStore stand-in with `partners` / `requests` collections
    ├── sample_partner: A stored partner document (ObjectId _id, counters set)
    └── test_client: HTTPX AsyncClient bound to the FastAPI app
"""

import os
from datetime import datetime, timezone
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any app import so the settings singleton never points at a real deployment
os.environ["MONGODB_URI"] = "mongodb://localhost:27017"
os.environ["MONGODB_DB"] = "studymate_test"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Mock Builders
# ══════════════════════════════════════════════════════════════════════════

def make_cursor(documents: List[Dict[str, Any]]) -> MagicMock:
    """An AsyncCursor stand-in whose to_list() yields `documents`."""
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


def make_collection() -> MagicMock:
    """
    An AsyncCollection stand-in.

    Defaults model an empty collection: lookups miss, listings are empty and
    inserts get a fresh ObjectId.
    """
    collection = MagicMock()
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.find_one_and_delete = AsyncMock(return_value=None)
    return collection


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a mock MongoStore.

    Usage:
        async def test_get(mock_store):
            mock_store.partners.find_one.return_value = {"_id": oid, "name": "Ann"}
            result = await partner_service.get_partner(mock_store, str(oid))
    """
    store = MagicMock()
    store.partners = make_collection()
    store.requests = make_collection()
    store.ping = AsyncMock(return_value={"ok": 1.0})
    return store


@pytest.fixture
def sample_partner() -> Dict[str, Any]:
    return {
        "_id": ObjectId("65f1c0ffee0000000000beef"),
        "name": "Ann Lee",
        "email": "ann@example.com",
        "subject": "Linear Algebra",
        "studyMode": "online",
        "location": "Dhaka",
        "availabilityTime": "evenings",
        "experienceLevel": "intermediate",
        "profileimage": "https://img.example.com/ann.png",
        "rating": 4,
        "patnerCount": 7,
        "createdAt": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }


@pytest_asyncio.fixture
async def test_client(mock_store):
    """
    Provides an async HTTP test client for endpoint testing.

    The lifespan is not run by ASGITransport, so no MongoDB connection is made;
    routes receive `mock_store` through the dependency override.
    """
    from studymate.database import get_store
    from studymate.main import app

    app.dependency_overrides[get_store] = lambda: mock_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
