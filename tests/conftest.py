"""Pytest configuration and fixtures."""
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from app.database import get_database
from app.main import app
from app.utils.session_token import create_session_token


PLAYER_ID = "65a000000000000000000001"


def make_collection(docs=None):
    """
    Create a Motor collection double.

    ``find`` is synchronous in Motor and returns a cursor; everything
    else is awaited.
    """
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=list(docs or []))
    collection.find.return_value = cursor
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.update_one = AsyncMock(return_value=MagicMock(modified_count=1))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=0))
    return collection


def make_db(**collections):
    """Create a database double whose collections are looked up by name."""
    store = {}

    def get_collection(name):
        if name not in store:
            store[name] = collections.get(name) or make_collection()
        return store[name]

    db = MagicMock()
    db.__getitem__.side_effect = get_collection
    return db


def game_doc(**overrides):
    """A stored game document."""
    now = datetime(2024, 3, 1, 12, 0, 0)
    doc = {
        "_id": ObjectId(),
        "player_id": PLAYER_ID,
        "date": datetime(2024, 3, 1),
        "opponent": "Red Lions FC",
        "location": "Home",
        "result": "Win",
        "position": "Forward",
        "duration": 90,
        "goals": 1,
        "assists": 0,
        "passes": 20,
        "notes": "",
        "completed": True,
        "played_full_match": True,
        "created_at": now,
        "updated_at": now,
    }
    doc.update(overrides)
    return doc


def goal_doc(**overrides):
    """A stored objective document."""
    now = datetime(2024, 3, 1, 12, 0, 0)
    doc = {
        "_id": ObjectId(),
        "player_id": PLAYER_ID,
        "title": "Score 5 Goals",
        "skill_id": None,
        "target_value": 5,
        "current_value": 0,
        "deadline": datetime(2024, 6, 30),
        "completed": False,
        "created_at": now,
        "updated_at": now,
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def mock_db():
    """Database double with one collection double per name."""
    return make_db()


@pytest.fixture
def player_headers():
    """Authorization header selecting the test player."""
    return {"Authorization": f"Bearer {create_session_token(PLAYER_ID)}"}


@pytest_asyncio.fixture
async def app_client(mock_db):
    """
    Create a test client backed by the database double.

    The lifespan is not run, so no real MongoDB connection is made.
    """
    app.dependency_overrides[get_database] = lambda: mock_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
