"""Pytest configuration and shared fakes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

import pytest

# Point the ORM at a throwaway SQLite file before ``moodpick.db`` builds its engine.
_DB_DIR = Path(tempfile.mkdtemp(prefix="moodpick-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'test.db'}"

from moodpick.core.config import Settings  # noqa: E402
from moodpick.services.llm import LLMError  # noqa: E402
from moodpick.services.tmdb import TMDbClient  # noqa: E402


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "OPENROUTER_API_KEY": "test-openrouter-key",
        "TMDB_API_KEY": "test-tmdb-key",
        "TMDB_ACCESS_TOKEN": None,
        "GOOGLE_BOOKS_API_KEY": "test-books-key",
        "MOOD_MODELS": {},
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeGenerator:
    """Stands in for ``TextGenerator``; replays canned text or raises."""

    def __init__(self, responses: list[str | Exception] | None = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[tuple[str, str]] = []

    def complete(self, prompt: str, *, model: str) -> str:
        self.calls.append((prompt, model))
        if not self.responses:
            raise LLMError("no canned response left")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class EchoGenerator:
    """Deterministic backend: the output depends only on the prompt."""

    def __init__(self) -> None:
        self.calls = 0

    def complete(self, prompt: str, *, model: str) -> str:
        self.calls += 1
        return f"[{model}] {len(prompt)} chars, {prompt.count('-')} bullets"


class FakeCatalog(TMDbClient):
    """TMDb client with canned search/details/discover responses."""

    def __init__(
        self,
        settings: Settings,
        *,
        search: dict[str, list[dict[str, Any]]] | None = None,
        details: dict[int, dict[str, Any]] | None = None,
        discover_results: list[dict[str, Any]] | None = None,
        failing_queries: set[str] | None = None,
    ) -> None:
        super().__init__(settings)
        self.search_results = search or {}
        self.details = details or {}
        self.discover_results = discover_results or []
        self.failing_queries = failing_queries or set()
        self.search_calls: list[str] = []
        self.details_calls: list[int] = []
        self.discover_calls: list[dict[str, Any]] = []

    def search_movie(self, query: str) -> list[dict[str, Any]]:
        self.search_calls.append(query)
        if query in self.failing_queries:
            from moodpick.services.tmdb import TMDbError

            raise TMDbError(f"boom for {query}")
        return self.search_results.get(query, [])

    def get_details(self, movie_id: int) -> dict[str, Any]:
        self.details_calls.append(movie_id)
        return self.details.get(movie_id, {"id": movie_id, "title": f"Movie {movie_id}"})

    def discover(self, genre_ids, *, page=1, sort_by="popularity.desc", min_vote_count=None):
        self.discover_calls.append(
            {
                "genre_ids": tuple(genre_ids),
                "page": page,
                "sort_by": sort_by,
                "min_vote_count": min_vote_count,
            }
        )
        return self.discover_results


def movie_details(movie_id: int, title: str, *, director: str | None = "Crew Director") -> dict[str, Any]:
    crew = [{"job": "Writer", "name": "Some Writer"}]
    if director:
        crew.append({"job": "Director", "name": director})
    return {
        "id": movie_id,
        "title": title,
        "overview": f"Overview of {title}",
        "release_date": "2017-02-24",
        "vote_average": 7.5,
        "poster_path": f"/poster-{movie_id}.jpg",
        "backdrop_path": f"/backdrop-{movie_id}.jpg",
        "genres": [{"id": 27, "name": "Horror"}, {"id": 53, "name": "Thriller"}],
        "videos": {
            "results": [
                {"type": "Teaser", "site": "YouTube", "key": "teaser-key"},
                {"type": "Trailer", "site": "Vimeo", "key": "vimeo-key"},
                {"type": "Trailer", "site": "YouTube", "key": f"trailer-{movie_id}"},
            ]
        },
        "credits": {
            "crew": crew,
            "cast": [{"name": f"Actor {index}"} for index in range(1, 8)],
        },
    }


@pytest.fixture
def settings() -> Settings:
    return make_settings()
