from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_rating_store, get_tmdb_client
from main import app
from services.ratings import RatingStore
from services.tmdb import TMDBClient, TMDBError


def _entry(movie_id, poster="/p.jpg"):
    return {
        "id": movie_id,
        "title": f"Movie {movie_id}",
        "release_date": "2019-05-30",
        "vote_average": 8.549,
        "overview": "Synopsis",
        "poster_path": poster,
        "backdrop_path": "/b.jpg",
        "popularity": 12.5,
        "genre_ids": [18, 404],
    }


@pytest.fixture
def tmdb():
    mock = AsyncMock(spec=TMDBClient)
    mock.genres.return_value = {18: "Drama"}
    mock.popular.return_value = [_entry(1), _entry(2)]
    mock.trending.return_value = [_entry(3)]
    mock.top_rated.return_value = [_entry(i) for i in range(15)]
    mock.search.return_value = [_entry(4), _entry(5, poster=None)]
    return mock


@pytest.fixture
def store():
    return RatingStore()


@pytest.fixture
def client(tmdb, store):
    app.dependency_overrides[get_tmdb_client] = lambda: tmdb
    app.dependency_overrides[get_rating_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides = {}


def test_popular(client):
    resp = client.get("/api/popular")
    assert resp.status_code == 200
    movies = resp.json()
    assert [m["id"] for m in movies] == [1, 2]
    assert movies[0] == {
        "id": 1,
        "title": "Movie 1",
        "year": 2019,
        "rating": 8.5,
        "description": "Synopsis",
        "thumbnail": "https://img.test/w500/p.jpg",
        "backdrop": "https://img.test/w1280/b.jpg",
        "popularity": 12.5,
        "duration": "N/A",
        "genres": ["Drama", "Unknown"],
    }


def test_trending(client):
    resp = client.get("/api/trending")
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == [3]


@pytest.mark.parametrize("url", ["/api/search", "/api/search?q=", "/api/search?q=%20%20"])
def test_blank_search_matches_popular(client, url):
    popular = client.get("/api/popular").json()
    resp = client.get(url)
    assert resp.status_code == 200
    assert resp.json() == popular


def test_search_filters_posterless(client, tmdb):
    resp = client.get("/api/search", params={"q": "parasite"})
    assert resp.status_code == 200
    assert [m["id"] for m in resp.json()] == [4]
    tmdb.search.assert_awaited_once_with("parasite")


def test_movie_detail(client, tmdb):
    tmdb.movie.return_value = {
        **_entry(496243),
        "runtime": 133,
        "genres": [{"id": 35, "name": "Comedy"}, {"id": 53, "name": "Thriller"}],
        "budget": 11400000,
        "revenue": 257591776,
    }
    tmdb.credits.return_value = {"cast": [{"name": "Song Kang-ho"}], "crew": []}

    resp = client.get("/api/movie/496243")

    assert resp.status_code == 200
    body = resp.json()
    assert body["director"] == "Unknown"
    assert body["actors"] == ["Song Kang-ho"]
    assert body["genres"] == ["Comedy", "Thriller"]
    assert body["duration"] == "133 min"
    assert body["budget"] == 11400000
    assert body["revenue"] == 257591776


def test_movie_detail_upstream_failure(client, tmdb):
    tmdb.movie.side_effect = TMDBError("TMDb returned 404 for /movie/0")
    tmdb.credits.return_value = {}

    resp = client.get("/api/movie/0")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch movie details"}


def test_recommendations_ignore_type(client):
    content = client.get("/api/recommendations", params={"userId": 1, "type": "content"})
    other = client.get("/api/recommendations", params={"userId": 7, "type": "anything"})
    assert content.status_code == 200
    assert len(content.json()) == 12
    assert content.json() == other.json()


@pytest.mark.parametrize(
    "url,message",
    [
        ("/api/popular", "Failed to fetch popular movies"),
        ("/api/trending", "Failed to fetch trending movies"),
        ("/api/search?q=alien", "Search failed"),
        ("/api/recommendations", "Failed to generate recommendations"),
    ],
)
def test_upstream_failure_is_generic_500(client, tmdb, url, message):
    tmdb.genres.side_effect = TMDBError("TMDb returned 401 for /genre/movie/list")

    resp = client.get(url)

    assert resp.status_code == 500
    assert resp.json() == {"error": message}


def test_rate_new_user(client, store):
    resp = client.post("/api/rate", json={"userId": 5, "movieId": 550, "rating": 4})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Rating saved successfully"}
    assert store.get_user(5).name == "User 5"
    assert store.get_rating(5, 550) == 4


def test_rate_overwrites(client, store):
    for rating in (1, 5, 2):
        client.post("/api/rate", json={"userId": 1, "movieId": 550, "rating": rating})
    assert store.get_rating(1, 550) == 2


def test_rate_numeric_and_string_movie_id_overwrite(client, store):
    client.post("/api/rate", json={"userId": 1, "movieId": 550, "rating": 5})
    resp = client.post("/api/rate", json={"userId": 1, "movieId": "550", "rating": 2})
    assert resp.status_code == 200
    assert store.get_user(1).ratings == {"550": 2}


@pytest.mark.parametrize("rating", [None, "great", 11])
def test_rate_accepts_any_rating_value(client, store, rating):
    resp = client.post("/api/rate", json={"userId": 3, "movieId": 10, "rating": rating})
    assert resp.status_code == 200
    assert store.get_rating(3, 10) == rating


def test_movie_detail_id_is_passed_through(client, tmdb):
    tmdb.movie.return_value = _entry(1)
    tmdb.credits.return_value = {}

    resp = client.get("/api/movie/abc%3Fpage%3D2")

    assert resp.status_code == 200
    tmdb.movie.assert_awaited_once_with("abc?page=2")


def test_security_headers(client):
    resp = client.get("/api/popular")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_index_served(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Movie Catalog" in resp.text
