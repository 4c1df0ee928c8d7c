"""
Tests for the movies API.

Run with: pytest src/moviedb/api/movies_test.py -v
"""
from unittest.mock import patch

from moviedb.errors import StoreError


class TestListMovies:
    """Tests for GET /api/v1/movies"""

    def test_list_movies(self, client):
        response = client.get("/api/v1/movies")

        assert response.status_code == 200
        assert response.get_json() == {
            "movies": [{"id": 3, "title": "Short Term 12", "year": 2013, "genre_id": 1}]
        }

    def test_list_movies_store_failure(self, app, client):
        with patch.object(app.store, "list_all", side_effect=StoreError("boom")):
            response = client.get("/api/v1/movies")

        assert response.status_code == 500
        assert response.get_json() == {"errors": "boom"}


class TestGetMovie:
    """Tests for GET /api/v1/movies/<id>"""

    def test_get_movie_nests_genre(self, client):
        response = client.get("/api/v1/movies/3")

        assert response.status_code == 200
        assert response.get_json()["movie"]["genre"] == {"id": 1, "name": "drama"}

    def test_get_movie_not_found(self, client):
        response = client.get("/api/v1/movies/99")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Movie not found"}


class TestCreateMovie:
    """Tests for POST /api/v1/movies"""

    def test_create_movie(self, client):
        response = client.post(
            "/api/v1/movies", json={"title": "Superbad", "year": 2007, "genre_id": 2}
        )

        assert response.status_code == 201
        assert response.get_json()["movie"] == {
            "id": 4,
            "title": "Superbad",
            "year": 2007,
            "genre_id": 2,
        }

    def test_created_movie_appears_under_genre(self, client):
        client.post("/api/v1/movies", json={"title": "Superbad", "genre_id": 2})

        response = client.get("/api/v1/genres/2")

        assert [m["title"] for m in response.get_json()["genre"]["movies"]] == ["Superbad"]

    def test_create_movie_unknown_genre(self, client):
        response = client.post("/api/v1/movies", json={"title": "Heat", "genre_id": 99})

        assert response.status_code == 422
        assert response.get_json() == {
            "errors": {"genre_id": "does not reference an existing genre"}
        }


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}
