"""
Movies Library Backend — Movie Route Handlers
===============================================

What:  Handles the /movies endpoints.
How:   Reads the path parameter, delegates to MovieService with the injected
       database handle, returns the resulting list.

Route order:
    /movies/genres/{name} is declared before the parameterised /movies/{...}
    routes. The trailing-slash routes serve /movies/ directly: a bare
    POST /movies/ reaches the service and is rejected with 400 (missing
    title) instead of being redirected.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from movielib.database import get_database
from movielib.schemas.movie import ErrorResponse, Movie, MovieBody, request_body_doc
from movielib.services.movie_service import movie_service

router = APIRouter(prefix="/movies", tags=["Movies"])

SERVER_ERROR = {500: {"description": "Internal server error.", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Movie],
    responses=SERVER_ERROR,
    summary="Get a list of all movies",
    description="Retrieve a list of all movies from the database.",
)
@router.get("/", response_model=List[Movie], include_in_schema=False)
async def list_movies(db: AsyncIOMotorDatabase = Depends(get_database)) -> List[Movie]:
    return await movie_service.list_movies(db)


@router.get(
    "/genres/{name}",
    response_model=List[Movie],
    responses={
        404: {"description": "Genre not found.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Get a list of movies by genre",
    description="Retrieve a list of movies by a specific genre from the database.",
)
async def list_movies_by_genre(
    name: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Movie]:
    return await movie_service.list_movies_by_genre(db, name)


@router.post(
    "/",
    response_model=List[Movie],
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_movie_without_title(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Movie]:
    return await movie_service.create_movie(db, "")


@router.post(
    "/{title}",
    response_model=List[Movie],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Bad request - Invalid data provided.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Add a new movie",
    description=(
        "Add a new movie to the database. Genre, release date and description "
        "are filled with placeholder values; the request body is not read."
    ),
    openapi_extra=request_body_doc(MovieBody, "Movie object to add."),
)
async def create_movie(
    title: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Movie]:
    """Returns the full collection after the insert."""
    return await movie_service.create_movie(db, title)


@router.put(
    "/{title}",
    response_model=List[Movie],
    responses={
        404: {"description": "Movie not found.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Update a movie by title",
    description=(
        "Update a movie in the database by its title. The stored title gets a "
        "trailing \"1\"; the request body is not read."
    ),
    openapi_extra=request_body_doc(MovieBody, "New movie data to update."),
)
async def update_movie_by_title(
    title: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Movie]:
    return await movie_service.update_movie_by_title(db, title)


@router.delete(
    "/{movie_id}",
    response_model=List[Movie],
    responses={
        404: {"description": "Movie not found.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Delete a movie by ID",
    description="Delete a movie from the database by its ID.",
)
async def delete_movie(
    movie_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Movie]:
    return await movie_service.delete_movie(db, movie_id)
