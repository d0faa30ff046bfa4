from __future__ import annotations

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError
from starlette.testclient import TestClient

from app.database import (
    COMPANY_LIST_COLLECTION,
    EMPLOYEES_COLLECTION,
    Database,
    init_db,
    insert_sample_data,
)
from app.exceptions import DatabaseConnectionError
from app.main import create_app
from tests.fakes import FakeMongoClient


async def test_connect_sets_database(database, mongo_client):
    assert not database.connected
    await database.connect()
    assert database.connected
    assert database.db is mongo_client["voiceowl_test"]


async def test_connect_fails_when_ping_fails():
    client = FakeMongoClient(ping_error=ServerSelectionTimeoutError("no servers"))
    database = Database("mongodb://nowhere:27017", "voiceowl", client=client)
    with pytest.raises(DatabaseConnectionError):
        await database.connect()
    assert not database.connected


async def test_close_clears_handle(database, mongo_client):
    await database.connect()
    await database.close()
    assert mongo_client.closed
    assert not database.connected


async def test_init_db_creates_collections(fake_db):
    assert await init_db(fake_db) is True
    names = await fake_db.list_collection_names()
    assert EMPLOYEES_COLLECTION in names
    assert COMPANY_LIST_COLLECTION in names


async def test_seed_on_empty_store(fake_db):
    assert await insert_sample_data(fake_db) is True

    employees = fake_db[EMPLOYEES_COLLECTION].documents
    entries = fake_db[COMPANY_LIST_COLLECTION].documents
    assert [e["name"] for e in employees] == ["Charlie Brown", "Diana Prince"]
    assert [e["name"] for e in entries] == ["Charlie Brown", "Diana Prince"]
    assert all("addedDate" in e for e in employees)
    assert all(set(e) == {"_id", "name", "addedAt"} for e in entries)


async def test_seed_skipped_when_employees_exist(fake_db):
    await fake_db[EMPLOYEES_COLLECTION].insert_one({"name": "Existing", "email": "e@x.com"})

    assert await insert_sample_data(fake_db) is True
    assert len(fake_db[EMPLOYEES_COLLECTION].documents) == 1
    assert fake_db[COMPANY_LIST_COLLECTION].documents == []


async def test_seed_mirror_failure_keeps_employees(fake_db):
    fake_db[COMPANY_LIST_COLLECTION].insert_error = OperationFailure("write failed")

    assert await insert_sample_data(fake_db) is False
    assert len(fake_db[EMPLOYEES_COLLECTION].documents) == 2
    assert fake_db[COMPANY_LIST_COLLECTION].documents == []


async def test_seed_runs_once_across_restarts(settings, mongo_client):
    for _ in range(2):
        database = Database(settings.MONGO_URI, settings.MONGODB_DB_NAME, client=mongo_client)
        await database.connect()
        await insert_sample_data(database.db)

    db = mongo_client[settings.MONGODB_DB_NAME]
    assert len(db[EMPLOYEES_COLLECTION].documents) == 2
    assert len(db[COMPANY_LIST_COLLECTION].documents) == 2


def test_startup_aborts_when_ping_fails(settings):
    client = FakeMongoClient(ping_error=ServerSelectionTimeoutError("no servers"))
    database = Database(settings.MONGO_URI, settings.MONGODB_DB_NAME, client=client)
    app = create_app(settings, database)
    with pytest.raises(DatabaseConnectionError):
        with TestClient(app):
            pass
    assert not database.connected
