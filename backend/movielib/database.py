"""
Movies Library Backend — Database Connection Management
=========================================================

What:  One shared Motor client, the database handle, and a FastAPI dependency.
How:   connect_to_database() runs once from the application lifespan. It opens
       the client, pings the server and keeps the default database handle.
       Route handlers receive the handle through Depends(get_database).
When:  Connected at startup; closed at shutdown.

Startup contract:
    If the ping fails, the error is logged and re-raised. The lifespan does
    not catch it, so uvicorn aborts before it starts listening for requests.

Example usage in a route:
    @router.get("/movies")
    async def list_movies(db: AsyncIOMotorDatabase = Depends(get_database)):
        return await movie_service.list_movies(db)
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from movielib.config import settings
from movielib.exceptions import DatabaseError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "movies-lib"

# Process-wide connection state, set by connect_to_database()
_client: Optional[AsyncIOMotorClient] = None
_database: Optional[AsyncIOMotorDatabase] = None


async def connect_to_database() -> AsyncIOMotorDatabase:
    """
    Open the shared connection and verify the server answers.

    Returns the database handle. Calling it again while connected returns
    the existing handle; there is never more than one client.

    Raises:
        PyMongoError: the server could not be reached or the URL is invalid.
    """
    global _client, _database

    if _database is not None:
        return _database

    client = AsyncIOMotorClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
    )
    try:
        database = client.get_default_database(default=DEFAULT_DATABASE_NAME)
        await client.admin.command("ping")
    except PyMongoError:
        logger.error("Could not connect to MongoDB", exc_info=True)
        client.close()
        raise

    _client = client
    _database = database
    logger.info("Connected to database '%s'", database.name)
    return database


def get_database() -> AsyncIOMotorDatabase:
    """
    FastAPI dependency returning the shared database handle.

    Raises:
        DatabaseError: connect_to_database() has not succeeded yet (→ 500).
    """
    if _database is None:
        raise DatabaseError(context={"reason": "database connection not established"})
    return _database


async def close_database_connection() -> None:
    """Close the shared client. Safe to call when not connected."""
    global _client, _database

    if _client is not None:
        _client.close()
        logger.info("Database connection closed")
    _client = None
    _database = None
