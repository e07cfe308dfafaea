"""
MongoDB client lifecycle.

Services take an AsyncIOMotorDatabase and open collections with db["name"];
this module only connects, hands out that database and disconnects.

Example:
    from common.database import MongoDB, set_main_database

    mongo = MongoDB()
    await mongo.connect("mongodb://localhost:27017", "founder_pulse")
    set_main_database(mongo)
    journal = mongo.database["journalEntries"]
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class MongoDB:
    """Owns one motor client and the name of the database it serves."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None

    async def connect(self, uri: str, database_name: str) -> None:
        """
        Open the client and ping the server.

        Raises:
            Whatever motor raises when the server is unreachable
        """
        host = uri.rsplit("@", 1)[-1]  # drop credentials
        logger.info(f"Connecting to MongoDB at {host}")

        client = AsyncIOMotorClient(uri)
        try:
            await client.admin.command("ping")
        except Exception as e:
            logger.error(f"MongoDB ping failed: {e}")
            client.close()
            raise

        self._client = client
        self._database_name = database_name
        logger.info(f"Connected to MongoDB database: {database_name}")

    async def disconnect(self) -> None:
        if self._client is None:
            return
        self._client.close()
        logger.info(f"Disconnected from MongoDB database: {self._database_name}")
        self._client = None
        self._database_name = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """
        Raises:
            RuntimeError: connect() has not completed
        """
        if self._client is None:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]


_main_database: Optional[MongoDB] = None


def set_main_database(db: MongoDB) -> None:
    global _main_database
    _main_database = db


def get_main_database() -> MongoDB:
    """
    Raises:
        RuntimeError: set_main_database() has not been called
    """
    if _main_database is None:
        raise RuntimeError("Main database not initialized. Call set_main_database() first.")
    return _main_database
