import json

import pytest
from fastapi.testclient import TestClient

from conftest import EchoGenerator, FakeCatalog, FakeGenerator, make_settings, movie_details
from moodpick.core.config import get_settings
from moodpick.main import (
    app,
    get_book_recommender,
    get_books_client,
    get_movie_recommender,
    get_summary_generator,
)
from moodpick.services.book_recommender import BookRecommender
from moodpick.services.errors import UpstreamCallError
from moodpick.services.llm import LLMError
from moodpick.services.models import BookData
from moodpick.services.recommender import MovieRecommender
from moodpick.services.summary import SUMMARY_PLACEHOLDER, SummaryGenerator


SUGGESTIONS = json.dumps(
    [
        {"title": "The Shining", "year": 1980, "director": "Stanley Kubrick", "reasons": ["Isolation"]},
        {"title": "Get Out", "year": 2017, "reasons": ["Social dread"]},
    ]
)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _override_recommender(settings, generator, catalog):
    recommender = MovieRecommender(generator=generator, catalog=catalog, settings=settings)
    app.dependency_overrides[get_movie_recommender] = lambda: recommender
    return recommender


def _override_summarizer(settings, generator):
    summarizer = SummaryGenerator(generator=generator, settings=settings)
    app.dependency_overrides[get_summary_generator] = lambda: summarizer
    return summarizer


def test_health_and_moods(client):
    assert client.get("/health").json() == {"status": "ok"}
    moods = client.get("/moods").json()["moods"]
    assert "horror" in moods and "happy" in moods


def test_recommend_returns_movie(client, settings):
    catalog = FakeCatalog(
        settings,
        search={"Get Out 2017": [{"id": 2}]},
        details={2: movie_details(2, "Get Out", director="Jordan Peele")},
    )
    _override_recommender(settings, FakeGenerator([SUGGESTIONS]), catalog)

    # seed 2 shuffles two candidates into [Get Out, The Shining]
    response = client.get("/movies/recommend", params={"mood": "HORROR", "seed": 2})

    assert response.status_code == 200
    movie = response.json()["movie"]
    assert movie["title"] == "Get Out"
    assert movie["director"] == "Jordan Peele"
    assert movie["ai_reasons"] == ["Social dread"]
    assert movie["mood_keywords"][0] == "frightening"
    assert movie["trailer_key"] == "trailer-2"
    assert "summary" not in response.json()


def test_recommend_requires_mood(client):
    response = client.get("/movies/recommend")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing mood parameter"}


def test_recommend_rejects_non_integer_seed(client):
    response = client.get("/movies/recommend", params={"mood": "happy", "seed": "abc"})
    assert response.status_code == 400
    assert "seed" in response.json()["error"]


def test_recommend_not_found(client, settings):
    _override_recommender(settings, FakeGenerator([LLMError("down")]), FakeCatalog(settings, discover_results=[]))

    response = client.get("/movies/recommend", params={"mood": "zzzNotAMood", "seed": 1})

    assert response.status_code == 404
    assert response.json() == {"error": "No movies found for this mood"}


def test_recommend_with_malformed_ai_fields_falls_back(client, settings):
    generator = FakeGenerator(['[{"title": "Alien", "reasons": 5}]'])
    _override_recommender(settings, generator, FakeCatalog(settings, discover_results=[{"id": 4, "title": "Popular"}]))

    response = client.get("/movies/recommend", params={"mood": "horror", "seed": 3})

    assert response.status_code == 200
    assert response.json()["movie"]["source"] == "fallback"
    assert response.json()["movie"]["id"] == 4


def test_recommend_fallback_failure_is_500(client, settings):
    class BrokenCatalog(FakeCatalog):
        def discover(self, *args, **kwargs):
            raise UpstreamCallError("tmdb down")

    _override_recommender(settings, FakeGenerator([LLMError("down")]), BrokenCatalog(settings))

    response = client.get("/movies/recommend", params={"mood": "horror", "seed": 1})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch movie recommendation"}


def test_recommend_missing_configuration_is_500(client):
    settings = make_settings(OPENROUTER_API_KEY=None)
    app.dependency_overrides[get_settings] = lambda: settings

    response = client.get("/movies/recommend", params={"mood": "horror", "seed": 1})

    assert response.status_code == 500
    assert "OPENROUTER_API_KEY" in response.json()["error"]


def test_recommend_passes_exclusions_and_selection(client, settings):
    generator = FakeGenerator([SUGGESTIONS])
    catalog = FakeCatalog(settings, search={"Get Out 2017": [{"id": 2}], "The Shining 1980": [{"id": 1}]})
    _override_recommender(settings, generator, catalog)

    response = client.get(
        "/movies/recommend",
        params=[("mood", "horror"), ("seed", "0"), ("exclude", "Get Out"), ("selection", "single")],
    )

    # single mode with seed 0 picks the first suggestion
    assert response.status_code == 200
    assert response.json()["movie"]["id"] == 1
    assert "Get Out" in generator.calls[0][0]


def test_recommend_with_summary_placeholder(client, settings):
    catalog = FakeCatalog(settings, search={"The Shining 1980": [{"id": 1}]})
    _override_recommender(settings, FakeGenerator([SUGGESTIONS]), catalog)
    _override_summarizer(settings, FakeGenerator([LLMError("summary backend down")]))

    response = client.get(
        "/movies/recommend", params={"mood": "horror", "seed": 0, "selection": "single", "include_summary": "true"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["movie"]["id"] == 1
    assert body["summary"] == SUMMARY_PLACEHOLDER


def test_summarize_movie(client, settings):
    _override_summarizer(settings, EchoGenerator())
    payload = {
        "title": "Get Out",
        "overview": "A visit goes wrong.",
        "mood": "horror",
        "genres": [{"id": 27, "name": "Horror"}],
        "mood_keywords": ["chilling"],
        "ai_reasons": ["Dread"],
    }

    first = client.post("/movies/summarize", json=payload)
    second = client.post("/movies/summarize", json=payload)

    assert first.status_code == 200
    assert first.json()["summary"] == second.json()["summary"]


def test_summarize_movie_missing_fields(client, settings):
    _override_summarizer(settings, EchoGenerator())

    response = client.post("/movies/summarize", json={"title": "Get Out", "mood": "horror"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required parameters (overview, mood, title)"}


def test_summarize_movie_backend_failure(client, settings):
    _override_summarizer(settings, FakeGenerator([LLMError("down")]))

    response = client.post(
        "/movies/summarize", json={"title": "Get Out", "overview": "x", "mood": "horror"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to summarize movie"}


def test_summarize_description(client, settings):
    _override_summarizer(settings, FakeGenerator(["Concise."]))

    assert client.post("/summarize", json={"description": "Long text"}).json() == {"summary": "Concise."}
    assert client.post("/summarize", json={}).status_code == 400


class _StubBooks:
    def __init__(self, books):
        self.books = books

    def search(self, query):
        return list(self.books)


def test_book_search_persists_results(client):
    books = [BookData(title="Persisted Book", authors=["A. Writer"], categories=["Fiction"])]
    app.dependency_overrides[get_books_client] = lambda: _StubBooks(books)

    response = client.get("/books", params={"query": "persisted"})

    assert response.status_code == 200
    assert response.json()["items"][0]["title"] == "Persisted Book"
    recent = client.get("/books/recent", params={"limit": 50}).json()["items"]
    assert any(item["title"] == "Persisted Book" and item["query"] == "persisted" for item in recent)
    assert any(item["authors"] == "A. Writer" for item in recent)


def test_book_search_requires_query(client):
    response = client.get("/books")
    assert response.status_code == 400
    assert response.json() == {"error": "Missing query parameter"}


def test_book_recommendation_endpoint(client, settings):
    generator = FakeGenerator(["Recommended Novel", "Lovely summary."])
    recommender = BookRecommender(
        generator=generator,
        books=_StubBooks([BookData(title="Recommended Novel", description="About things.")]),
        settings=settings,
    )
    app.dependency_overrides[get_book_recommender] = lambda: recommender

    response = client.get("/books/recommend", params={"mood": "REFLECTIVE", "seed": 3})

    assert response.status_code == 200
    body = response.json()
    assert body["book"]["title"] == "Recommended Novel"
    assert body["summary"] == "Lovely summary."
    assert body["source"] == "ai"


def test_book_recommendation_not_found(client, settings):
    recommender = BookRecommender(
        generator=FakeGenerator([LLMError("down")]), books=_StubBooks([]), settings=settings
    )
    app.dependency_overrides[get_book_recommender] = lambda: recommender

    response = client.get("/books/recommend", params={"mood": "sad"})

    assert response.status_code == 404
    assert response.json() == {"error": "No books found for this mood"}
