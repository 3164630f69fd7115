"""
Movies Library Backend — Genre Service
========================================

What:  Store operations behind the /genres endpoints.
How:   Mirrors MovieService over the `genres` collection and its single
       `name` field.

Renaming:
    PUT /genres/{name} never reads the request body. The new name is the old
    one followed by a space and a random integer in [0, 999], drawn from the
    service's own random generator (injectable for tests).
"""

import logging
import random
from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from movielib.exceptions import DatabaseError, NotFoundError, ValidationError
from movielib.schemas.movie import Genre

logger = logging.getLogger(__name__)

COLLECTION = "genres"

MAX_RENAME_SUFFIX = 999


class GenreService:
    """Operations over the `genres` collection."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def renamed(self, name: str) -> str:
        """The name PUT /genres/{name} writes."""
        return f"{name} {self._rng.randint(0, MAX_RENAME_SUFFIX)}"

    async def _fetch_all(self, db: AsyncIOMotorDatabase) -> List[Genre]:
        documents = await db[COLLECTION].find().to_list(length=None)
        return [Genre.model_validate(doc) for doc in documents]

    async def list_genres(self, db: AsyncIOMotorDatabase) -> List[Genre]:
        try:
            return await self._fetch_all(db)
        except PyMongoError as e:
            logger.error("Database error listing genres: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "list_genres"}) from e

    async def create_genre(self, db: AsyncIOMotorDatabase, name: str) -> List[Genre]:
        """
        Insert `{name}` and return the full collection.

        Raises:
            ValidationError: name is empty; nothing is written.
        """
        if not name:
            raise ValidationError(message="Name is required.", field="name")

        try:
            result = await db[COLLECTION].insert_one({"name": name})
            logger.info("Genre created: %s (%r)", result.inserted_id, name)
            return await self._fetch_all(db)
        except PyMongoError as e:
            logger.error("Database error creating genre %r: %s", name, e, exc_info=True)
            raise DatabaseError(context={"operation": "create_genre", "name": name}) from e

    async def update_genre_by_name(self, db: AsyncIOMotorDatabase, name: str) -> List[Genre]:
        """
        Rename the first genre called `name`.

        Raises:
            NotFoundError: no genre has this name; nothing is written.
        """
        collection = db[COLLECTION]
        try:
            genre = await collection.find_one({"name": name})
            if genre is None:
                raise NotFoundError(resource="genre", resource_id=name)

            new_name = self.renamed(name)
            await collection.update_one({"name": name}, {"$set": {"name": new_name}})
            logger.info("Genre updated: %r -> %r", name, new_name)
            return await self._fetch_all(db)
        except PyMongoError as e:
            logger.error("Database error updating genre %r: %s", name, e, exc_info=True)
            raise DatabaseError(context={"operation": "update_genre", "name": name}) from e

    async def delete_genre(self, db: AsyncIOMotorDatabase, genre_id: str) -> List[Genre]:
        """
        Delete the genre whose `_id` is `genre_id`.

        Raises:
            NotFoundError: nothing was deleted.
            DatabaseError: store failure or malformed ObjectId.
        """
        try:
            result = await db[COLLECTION].delete_one({"_id": ObjectId(genre_id)})
            if result.deleted_count == 0:
                raise NotFoundError(resource="genre", resource_id=genre_id)
            logger.info("Genre deleted: %s", genre_id)
            return await self._fetch_all(db)
        except (PyMongoError, InvalidId) as e:
            logger.error("Database error deleting genre %s: %s", genre_id, e, exc_info=True)
            raise DatabaseError(context={"operation": "delete_genre", "genre_id": genre_id}) from e


# ── Singleton Instance ────────────────────────────────────────────────────
genre_service = GenreService()
