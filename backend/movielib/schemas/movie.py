"""
Movies Library Backend — Pydantic Response Schemas
====================================================

What:  Pydantic models describing what the API returns.
How:   FastAPI serializes handler results through these models and builds
       the OpenAPI component schemas (Movie, Genre, ErrorResponse) from them.

Store documents are untyped. Document fields accept any stored value,
fields outside the model are passed through unchanged, and a declared
field missing in the store comes back as null. BSON values with no JSON
form (ObjectId, Decimal128, ...) are rendered as strings.
"""

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

JSON_NATIVE = (str, int, float, bool, datetime, date, type(None))


def to_json_value(value: Any) -> Any:
    """Recursively turn a stored BSON value into something JSON can carry."""
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, JSON_NATIVE):
        return value
    return str(value)


class StoredDocument(BaseModel):
    """
    Base for documents read back from a collection.

    `_id` is usually the store-assigned ObjectId, exposed under the same key
    as its 24-character hex string; any other stored `_id` is returned as is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Any = Field(
        alias="_id",
        description="Store-assigned identifier (ObjectId hex string)",
        examples=["65f1c2a9e4b0a1b2c3d4e5f6"],
    )

    @model_validator(mode="before")
    @classmethod
    def convert_bson_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return to_json_value(data)
        return data


class Movie(StoredDocument):
    """A document of the `movies` collection."""

    title: Any = Field(default=None, examples=["The Matrix"])
    genre: Any = Field(
        default=None,
        examples=[["Action", "Adventure", "Science Fiction"]],
    )
    release_date: Any = Field(
        default=None,
        alias="releaseDate",
        examples=["1999-03-31"],
    )
    description: Any = Field(default=None, examples=["A classic sci-fi movie."])


class Genre(StoredDocument):
    """A document of the `genres` collection."""

    name: Any = Field(default=None, examples=["Action"])


# ══════════════════════════════════════════════════════════════════════════
# Documented request bodies
# ══════════════════════════════════════════════════════════════════════════
# Advertised in the OpenAPI document for POST/PUT. The handlers do not read
# the body; see the services for the values actually written.


class MovieBody(BaseModel):
    title: Optional[str] = Field(default=None, examples=["The Matrix"])
    genre: Optional[List[str]] = Field(
        default=None, examples=[["Action", "Adventure", "Science Fiction"]]
    )
    releaseDate: Optional[str] = Field(default=None, examples=["1999-03-31"])
    description: Optional[str] = Field(default=None, examples=["A classic sci-fi movie."])


class GenreBody(BaseModel):
    name: Optional[str] = Field(default=None, examples=["Action"])


def request_body_doc(model: type, description: str) -> dict:
    """Build an `openapi_extra` entry documenting an optional JSON body."""
    return {
        "requestBody": {
            "description": description,
            "required": False,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


# ══════════════════════════════════════════════════════════════════════════
# Plain responses
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    message: str = Field(description="Status message")


class ErrorResponse(BaseModel):
    """
    Error body returned by every failing endpoint.

    Example:
        {"error": "Movie not found."}
    """

    error: str = Field(description="Human-readable error description")
