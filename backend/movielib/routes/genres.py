"""
Movies Library Backend — Genre Route Handlers
===============================================

What:  Handles the /genres endpoints (list, create, rename, delete).
How:   Same shape as the movie routes, delegating to GenreService.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from movielib.database import get_database
from movielib.schemas.movie import ErrorResponse, Genre, GenreBody, request_body_doc
from movielib.services.genre_service import genre_service

router = APIRouter(prefix="/genres", tags=["Genres"])

SERVER_ERROR = {500: {"description": "Internal server error.", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Genre],
    responses=SERVER_ERROR,
    summary="Get a list of all genres",
    description="Retrieve a list of all genres from the database.",
)
@router.get("/", response_model=List[Genre], include_in_schema=False)
async def list_genres(db: AsyncIOMotorDatabase = Depends(get_database)) -> List[Genre]:
    return await genre_service.list_genres(db)


@router.post(
    "/",
    response_model=List[Genre],
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_genre_without_name(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Genre]:
    return await genre_service.create_genre(db, "")


@router.post(
    "/{name}",
    response_model=List[Genre],
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Bad request - Invalid data provided.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Add a new genre",
    description="Add a new genre to the database.",
    openapi_extra=request_body_doc(GenreBody, "Genre object to add."),
)
async def create_genre(
    name: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Genre]:
    return await genre_service.create_genre(db, name)


@router.put(
    "/{name}",
    response_model=List[Genre],
    responses={
        404: {"description": "Genre not found.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Update a genre by name",
    description=(
        "Update a genre in the database by its name. A random number suffix "
        "is appended to the name; the request body is not read."
    ),
    openapi_extra=request_body_doc(GenreBody, "New genre data to update."),
)
async def update_genre_by_name(
    name: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Genre]:
    return await genre_service.update_genre_by_name(db, name)


@router.delete(
    "/{genre_id}",
    response_model=List[Genre],
    responses={
        404: {"description": "Genre not found.", "model": ErrorResponse},
        **SERVER_ERROR,
    },
    summary="Delete a genre by ID",
    description="Delete a genre from the database by its ID.",
)
async def delete_genre(
    genre_id: str,
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> List[Genre]:
    return await genre_service.delete_genre(db, genre_id)
