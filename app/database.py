# app/database.py
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.exceptions import DatabaseConnectionError
from app.utils.responses import create_error_response

logger = logging.getLogger(__name__)

EMPLOYEES_COLLECTION = "employees"
COMPANY_LIST_COLLECTION = "company_list"

SAMPLE_EMPLOYEES = [
    {"name": "Charlie Brown", "email": "charlie.b@voiceowl.com", "department": "HR"},
    {"name": "Diana Prince", "email": "diana.p@voiceowl.com", "department": "Sales"},
]


class Database:
    """Holds the MongoDB client for one application instance.

    A client may be passed in (tests use an in-memory one); otherwise an
    ``AsyncIOMotorClient`` is built from the URI on ``connect()``.
    """

    def __init__(
        self,
        uri: str,
        name: str,
        timeout_ms: int = 5000,
        client: Optional[AsyncIOMotorClient] = None,
    ):
        self.uri = uri
        self.name = name
        self.timeout_ms = timeout_ms
        self.client = client
        self.db: Optional[AsyncIOMotorDatabase] = None

    @property
    def connected(self) -> bool:
        return self.db is not None

    async def connect(self):
        if self.client is None:
            self.client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            # Motor connects lazily, so force a round trip
            await self.client.admin.command("ping")
        except PyMongoError as e:
            raise DatabaseConnectionError(f"Failed to connect to MongoDB at {self.uri}: {e}") from e
        self.db = self.client[self.name]
        logger.info("Connected to MongoDB: %s/%s", self.uri, self.name)

    async def close(self):
        if self.client is not None:
            self.client.close()
            logger.info("Closed MongoDB connection")
        self.db = None


def get_database(request: Request) -> AsyncIOMotorDatabase:
    database: Database = request.app.state.database
    if not database.connected:
        raise HTTPException(
            status_code=503,
            detail=create_error_response(
                message="Database not connected",
                details="MongoDB connection is not available"
            ),
        )
    return database.db


async def init_db(db: AsyncIOMotorDatabase) -> bool:
    try:
        collections = await db.list_collection_names()
        for name in (EMPLOYEES_COLLECTION, COMPANY_LIST_COLLECTION):
            if name not in collections:
                await db.create_collection(name)
        logger.info("Database initialized successfully")
        return True
    except PyMongoError:
        logger.exception("Database initialization failed")
        return False


async def insert_sample_data(db: AsyncIOMotorDatabase) -> bool:
    """Seed the sample employees when the employees collection is empty.

    The company list mirror is written after the employees; a failure there
    leaves the seeded employees in place.
    """
    try:
        if await db[EMPLOYEES_COLLECTION].count_documents({}) > 0:
            logger.info("Sample data already exists. Skipping insertion.")
            return True

        now = datetime.now(timezone.utc)
        employees = [{**employee, "addedDate": now} for employee in SAMPLE_EMPLOYEES]
        await db[EMPLOYEES_COLLECTION].insert_many(employees)
        logger.info("Seeded %d sample employees", len(employees))

        entries = [{"name": employee["name"], "addedAt": now} for employee in employees]
        await db[COMPANY_LIST_COLLECTION].insert_many(entries)
        logger.info("Seeded %d company list entries", len(entries))
        return True
    except PyMongoError:
        logger.exception("Failed to insert sample data")
        return False
