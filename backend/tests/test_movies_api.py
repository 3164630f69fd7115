"""
Movies Library Backend — /movies Endpoint Tests
=================================================

What:  HTTP-level tests for the movie routes through the full app
       (middleware, exception handlers, response models).
"""

import pytest
from bson import ObjectId

from movielib.database import get_database
from movielib.services.movie_service import (
    PLACEHOLDER_DESCRIPTION,
    PLACEHOLDER_GENRES,
    PLACEHOLDER_RELEASE_DATE,
)


@pytest.mark.asyncio
async def test_list_movies_empty(test_client):
    response = await test_client.get("/movies")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_movies_with_trailing_slash(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one(dict(sample_movie))

    response = await test_client.get("/movies/")

    assert response.status_code == 200
    assert [m["title"] for m in response.json()] == ["Alien"]


@pytest.mark.asyncio
async def test_movie_documents_are_serialized_with_store_keys(test_client, fake_db, sample_movie):
    result = await fake_db["movies"].insert_one(dict(sample_movie))

    response = await test_client.get("/movies")

    assert response.json() == [
        {
            "_id": str(result.inserted_id),
            "title": "Alien",
            "genre": ["Horror", "Science Fiction"],
            "releaseDate": "1979-05-25",
            "description": "In space no one can hear you scream.",
        }
    ]


@pytest.mark.asyncio
async def test_fields_outside_the_model_are_returned(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one({**sample_movie, "rating": 5, "cast": ["Weaver"]})

    response = await test_client.get("/movies")

    assert response.status_code == 200
    movie = response.json()[0]
    assert movie["rating"] == 5
    assert movie["cast"] == ["Weaver"]
    assert movie["title"] == "Alien"


@pytest.mark.asyncio
async def test_scalar_genre_is_returned_as_stored(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one({**sample_movie, "genre": "Horror"})

    listed = await test_client.get("/movies")
    assert listed.status_code == 200
    assert listed.json()[0]["genre"] == "Horror"

    filtered = await test_client.get("/movies/genres/Horror")
    assert filtered.status_code == 200
    assert filtered.json()[0]["genre"] == "Horror"


@pytest.mark.asyncio
async def test_odd_field_types_do_not_break_listing(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one({**sample_movie, "title": 1979, "releaseDate": None})
    await fake_db["movies"].insert_one({"_id": "custom-id", "title": "Heat"})
    await fake_db["movies"].insert_one({"_id": 42, "title": "Ronin", "genre": {"main": "Action"}})

    response = await test_client.get("/movies")

    assert response.status_code == 200
    movies = response.json()
    assert movies[0]["title"] == 1979
    assert movies[0]["releaseDate"] is None
    assert movies[1] == {
        "_id": "custom-id",
        "title": "Heat",
        "genre": None,
        "releaseDate": None,
        "description": None,
    }
    assert movies[2]["_id"] == 42
    assert movies[2]["genre"] == {"main": "Action"}


@pytest.mark.asyncio
async def test_nested_object_ids_are_rendered_as_strings(test_client, fake_db, sample_movie):
    director = ObjectId()
    await fake_db["movies"].insert_one({**sample_movie, "director": {"ref": director}})

    response = await test_client.get("/movies")

    assert response.status_code == 200
    assert response.json()[0]["director"] == {"ref": str(director)}


@pytest.mark.asyncio
async def test_post_succeeds_next_to_irregular_documents(test_client, fake_db):
    await fake_db["movies"].insert_one({"_id": "custom-id", "title": "Heat", "genre": "Crime"})

    response = await test_client.post("/movies/Blade Runner")

    assert response.status_code == 201
    assert [m["title"] for m in response.json()] == ["Heat", "Blade Runner"]


@pytest.mark.asyncio
async def test_post_then_get_contains_exactly_one_new_movie(test_client):
    response = await test_client.post("/movies/Blade Runner")

    assert response.status_code == 201
    listed = (await test_client.get("/movies")).json()
    matching = [m for m in listed if m["title"] == "Blade Runner"]
    assert len(matching) == 1
    assert matching[0]["genre"] == PLACEHOLDER_GENRES
    assert matching[0]["releaseDate"] == PLACEHOLDER_RELEASE_DATE
    assert matching[0]["description"] == PLACEHOLDER_DESCRIPTION


@pytest.mark.asyncio
async def test_post_ignores_request_body(test_client):
    response = await test_client.post(
        "/movies/Heat",
        json={"title": "Other", "genre": ["Crime"], "releaseDate": "1995-12-15"},
    )

    assert response.status_code == 201
    movie = response.json()[0]
    assert movie["title"] == "Heat"
    assert movie["genre"] == PLACEHOLDER_GENRES


@pytest.mark.asyncio
async def test_post_without_title_is_rejected(test_client, fake_db):
    response = await test_client.post("/movies/")

    assert response.status_code == 400
    assert response.json() == {"error": "Title is required."}
    assert fake_db["movies"].documents == []


@pytest.mark.asyncio
async def test_put_existing_title_appends_marker(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one(dict(sample_movie))

    response = await test_client.put("/movies/Alien")

    assert response.status_code == 200
    movie = response.json()[0]
    assert movie["title"] == "Alien1"
    assert movie["genre"] == sample_movie["genre"]
    assert movie["releaseDate"] == sample_movie["releaseDate"]
    assert movie["description"] == sample_movie["description"]


@pytest.mark.asyncio
async def test_put_unknown_title_returns_404(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one(dict(sample_movie))

    response = await test_client.put("/movies/Predator")

    assert response.status_code == 404
    assert response.json() == {"error": "Movie not found."}
    assert fake_db["movies"].documents[0]["title"] == "Alien"


@pytest.mark.asyncio
async def test_delete_unknown_then_existing_id(test_client, fake_db, sample_movie):
    result = await fake_db["movies"].insert_one(dict(sample_movie))

    missing = await test_client.delete(f"/movies/{ObjectId()}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Movie not found."}

    deleted = await test_client.delete(f"/movies/{result.inserted_id}")
    assert deleted.status_code == 200
    assert deleted.json() == []
    assert (await test_client.get("/movies")).json() == []


@pytest.mark.asyncio
async def test_delete_malformed_id_returns_500(test_client):
    response = await test_client.delete("/movies/not-an-id")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}


@pytest.mark.asyncio
async def test_filter_by_genre(test_client, fake_db, sample_movie):
    await fake_db["movies"].insert_one(dict(sample_movie))
    await fake_db["movies"].insert_one({**sample_movie, "title": "Heat", "genre": ["Crime"]})

    found = await test_client.get("/movies/genres/Horror")
    assert found.status_code == 200
    assert [m["title"] for m in found.json()] == ["Alien"]

    missing = await test_client.get("/movies/genres/Western")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Genre not found."}


@pytest.mark.asyncio
async def test_store_failure_returns_generic_500(app, test_client, failing_db):
    app.dependency_overrides[get_database] = lambda: failing_db

    for method, path in [
        ("GET", "/movies"),
        ("GET", "/movies/genres/Horror"),
        ("POST", "/movies/Alien"),
        ("PUT", "/movies/Alien"),
        ("DELETE", f"/movies/{ObjectId()}"),
    ]:
        response = await test_client.request(method, path)
        assert response.status_code == 500, path
        assert response.json() == {"error": "Internal server error."}
