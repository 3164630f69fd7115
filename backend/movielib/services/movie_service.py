"""
Movies Library Backend — Movie Service
========================================

What:  Store operations behind the /movies endpoints.
How:   Each method receives the database handle (injected into the route by
       FastAPI), issues its Motor calls and returns Movie models.
       Mutations re-read the whole collection afterwards; the re-read is not
       isolated from concurrent writers.

Error Handling Strategy:
    Driver failures (PyMongoError) and malformed ObjectIds are logged with
    their stack and wrapped in DatabaseError (→ 500). Missing targets raise
    NotFoundError (→ 404); a missing title raises ValidationError (→ 400).

Fixed writes:
    Create and update never read the request body. Create stores the
    placeholder fields below; update appends "1" to the title.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from movielib.exceptions import DatabaseError, NotFoundError, ValidationError
from movielib.schemas.movie import Movie

logger = logging.getLogger(__name__)

COLLECTION = "movies"

PLACEHOLDER_GENRES = ["Action", "Adventure", "Science Fiction"]
PLACEHOLDER_RELEASE_DATE = "1999-03-31"
PLACEHOLDER_DESCRIPTION = "A classic sci-fi movie."

TITLE_EDIT_SUFFIX = "1"


def placeholder_movie(title: str) -> Dict[str, Any]:
    """The document POST /movies/{title} inserts."""
    return {
        "title": title,
        "genre": list(PLACEHOLDER_GENRES),
        "releaseDate": PLACEHOLDER_RELEASE_DATE,
        "description": PLACEHOLDER_DESCRIPTION,
    }


class MovieService:
    """
    Operations over the `movies` collection.

    Stateless: every method takes the database handle as its first argument.
    """

    async def _fetch_all(self, db: AsyncIOMotorDatabase) -> List[Movie]:
        documents = await db[COLLECTION].find().to_list(length=None)
        return [Movie.model_validate(doc) for doc in documents]

    async def list_movies(self, db: AsyncIOMotorDatabase) -> List[Movie]:
        """All movies in the store's natural order."""
        try:
            return await self._fetch_all(db)
        except PyMongoError as e:
            logger.error("Database error listing movies: %s", e, exc_info=True)
            raise DatabaseError(context={"operation": "list_movies"}) from e

    async def list_movies_by_genre(self, db: AsyncIOMotorDatabase, name: str) -> List[Movie]:
        """
        Movies whose `genre` array contains `name`.

        An empty result is reported as "Genre not found." (404); the API does
        not distinguish an unknown genre from a genre with no movies.
        """
        try:
            documents = await db[COLLECTION].find({"genre": name}).to_list(length=None)
        except PyMongoError as e:
            logger.error("Database error filtering movies by genre %r: %s", name, e, exc_info=True)
            raise DatabaseError(context={"operation": "list_movies_by_genre", "genre": name}) from e

        if not documents:
            raise NotFoundError(resource="genre", resource_id=name)
        return [Movie.model_validate(doc) for doc in documents]

    async def create_movie(self, db: AsyncIOMotorDatabase, title: str) -> List[Movie]:
        """
        Insert a placeholder movie with the given title.

        Returns:
            The full collection after the insert.

        Raises:
            ValidationError: title is empty; nothing is written.
        """
        if not title:
            raise ValidationError(message="Title is required.", field="title")

        try:
            result = await db[COLLECTION].insert_one(placeholder_movie(title))
            logger.info("Movie created: %s (%r)", result.inserted_id, title)
            return await self._fetch_all(db)
        except PyMongoError as e:
            logger.error("Database error creating movie %r: %s", title, e, exc_info=True)
            raise DatabaseError(context={"operation": "create_movie", "title": title}) from e

    async def update_movie_by_title(self, db: AsyncIOMotorDatabase, title: str) -> List[Movie]:
        """
        Rename the first movie titled `title` to `title + "1"`.

        The other fields are copied from the stored document unchanged.

        Raises:
            NotFoundError: no movie has this title; nothing is written.
        """
        collection = db[COLLECTION]
        try:
            movie = await collection.find_one({"title": title})
            if movie is None:
                raise NotFoundError(resource="movie", resource_id=title)

            edited = {
                "title": title + TITLE_EDIT_SUFFIX,
                "genre": movie.get("genre"),
                "releaseDate": movie.get("releaseDate"),
                "description": movie.get("description"),
            }
            await collection.update_one({"title": title}, {"$set": edited})
            logger.info("Movie updated: %r -> %r", title, edited["title"])
            return await self._fetch_all(db)
        except PyMongoError as e:
            logger.error("Database error updating movie %r: %s", title, e, exc_info=True)
            raise DatabaseError(context={"operation": "update_movie", "title": title}) from e

    async def delete_movie(self, db: AsyncIOMotorDatabase, movie_id: str) -> List[Movie]:
        """
        Delete the movie whose `_id` is `movie_id`.

        A string that is not a valid ObjectId is a store error (500), not a
        missing document.

        Raises:
            NotFoundError: nothing was deleted.
        """
        try:
            result = await db[COLLECTION].delete_one({"_id": ObjectId(movie_id)})
            if result.deleted_count == 0:
                raise NotFoundError(resource="movie", resource_id=movie_id)
            logger.info("Movie deleted: %s", movie_id)
            return await self._fetch_all(db)
        except (PyMongoError, InvalidId) as e:
            logger.error("Database error deleting movie %s: %s", movie_id, e, exc_info=True)
            raise DatabaseError(context={"operation": "delete_movie", "movie_id": movie_id}) from e


# ── Singleton Instance ────────────────────────────────────────────────────
movie_service = MovieService()
