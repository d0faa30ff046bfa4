from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from app.config import Settings
from app.database import Database
from app.main import create_app
from tests.fakes import FakeDatabase, FakeMongoClient

DB_NAME = "voiceowl_test"


@pytest.fixture
def settings():
    return Settings(MONGO_URI="mongodb://fake:27017", MONGODB_DB_NAME=DB_NAME, LOG_LEVEL="WARNING")


@pytest.fixture
def mongo_client():
    return FakeMongoClient()


@pytest.fixture
def fake_db(mongo_client) -> FakeDatabase:
    return mongo_client[DB_NAME]


@pytest.fixture
def database(settings, mongo_client):
    return Database(settings.MONGO_URI, settings.MONGODB_DB_NAME, client=mongo_client)


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def disconnected_client(app):
    # No context manager, so the lifespan never runs and nothing connects
    return TestClient(app)
