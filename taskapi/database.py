"""
Task Manager API - Database Module

MongoDB connection management using Motor (async driver).
"""

import logging
from datetime import timezone

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from taskapi.config import settings

logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Connect to MongoDB and make sure required indexes exist."""
        # Read datetimes back as aware UTC, matching what the models write
        self.client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=True, tzinfo=timezone.utc)
        self.db = self.client[settings.MONGODB_DATABASE]
        logger.info(f"Connected to MongoDB database '{settings.MONGODB_DATABASE}'")
        await self.ensure_indexes()

    async def ensure_indexes(self) -> None:
        """Create the indexes the repositories rely on."""
        db = self.get_database()
        await db["users"].create_index("username", unique=True)
        await db["tasks"].create_index([("created_at", 1), ("_id", 1)])
        logger.info("MongoDB indexes ensured")

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get the database instance."""
        if self.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.db


# Singleton database instance
database = Database()


async def get_database() -> AsyncIOMotorDatabase:
    """Dependency to get the database instance."""
    return database.get_database()
