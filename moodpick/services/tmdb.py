"""Thin wrapper around the TMDb API for search, details and discover."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from moodpick.core.config import Settings, get_settings
from moodpick.services.errors import UpstreamCallError
from moodpick.services.models import CatalogItem


logger = logging.getLogger(__name__)


class TMDbError(UpstreamCallError):
    """Base exception for TMDb-related failures."""


class TMDbClient:
    """Simple TMDb HTTP client using API key or bearer token auth."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.tmdb_base_url.rstrip("/")
        self.language = self.settings.tmdb_language
        self.timeout = self.settings.request_timeout
        self._transport = transport

    def _request(self, method: str, path: str, *, params: dict[str, Any] | None = None) -> Any:
        self.settings.require_tmdb()
        url = f"{self.base_url}{path}"
        query: dict[str, Any] = {}
        headers = {"Accept": "application/json"}
        if self.settings.tmdb_api_key:
            query["api_key"] = self.settings.tmdb_api_key
        if self.settings.tmdb_access_token:
            headers["Authorization"] = f"Bearer {self.settings.tmdb_access_token}"
        if params:
            query.update({k: v for k, v in params.items() if v is not None})
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, params=query, headers=headers)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise TMDbError(f"TMDb request to {path} failed: {exc}") from exc
        except ValueError as exc:
            raise TMDbError(f"TMDb returned invalid JSON for {path}") from exc
        if isinstance(payload, dict) and payload.get("success") is False:
            raise TMDbError(payload.get("status_message") or f"TMDb error for {path}")
        return payload

    def search_movie(self, query: str) -> list[dict[str, Any]]:
        """Return raw search hits for ``query`` in TMDb relevance order."""

        payload = self._request(
            "GET",
            "/search/movie",
            params={"query": query, "include_adult": "false", "language": self.language},
        )
        results = payload.get("results") or []
        logger.debug("TMDb search '%s' returned %d results", query, len(results))
        return results

    def get_details(self, movie_id: int) -> dict[str, Any]:
        """Fetch a movie with its credits and videos appended."""

        details = self._request(
            "GET",
            f"/movie/{movie_id}",
            params={"append_to_response": "videos,credits", "language": self.language},
        )
        logger.debug("TMDb details payload: %s", details)
        return details

    def discover(
        self,
        genre_ids: Iterable[int],
        *,
        page: int = 1,
        sort_by: str = "popularity.desc",
        min_vote_count: int | None = None,
    ) -> list[dict[str, Any]]:
        """Browse movies matching any of ``genre_ids``."""

        vote_floor = self.settings.tmdb_min_vote_count if min_vote_count is None else min_vote_count
        payload = self._request(
            "GET",
            "/discover/movie",
            params={
                "with_genres": "|".join(str(genre_id) for genre_id in genre_ids),
                "page": page,
                "sort_by": sort_by,
                "vote_count.gte": vote_floor,
                "include_adult": "false",
                "language": self.language,
            },
        )
        return payload.get("results") or []

    def build_item(self, details: dict[str, Any], *, director: str | None = None) -> CatalogItem:
        """Turn a details payload into a catalog item. ``director`` overrides the crew lookup."""

        credits = details.get("credits") or {}
        return CatalogItem(
            id=details["id"],
            title=details.get("title") or "",
            overview=details.get("overview"),
            release_date=details.get("release_date"),
            vote_average=details.get("vote_average"),
            poster_path=details.get("poster_path"),
            backdrop_path=details.get("backdrop_path"),
            genres=tuple(
                {"id": genre.get("id"), "name": genre.get("name")}
                for genre in details.get("genres") or []
            ),
            trailer_key=self._extract_trailer_key(details.get("videos") or {}),
            director=director or self._extract_director(credits) or "Unknown",
            cast=tuple(self._extract_cast(credits)),
        )

    @staticmethod
    def _extract_trailer_key(videos: dict[str, Any]) -> str | None:
        for video in videos.get("results") or []:
            if video.get("type") == "Trailer" and video.get("site") == "YouTube" and video.get("key"):
                return video["key"]
        return None

    @staticmethod
    def _extract_director(credits: dict[str, Any]) -> str | None:
        crew = credits.get("crew") or []
        for member in crew:
            if member.get("job") == "Director" and member.get("name"):
                return member["name"]
        return None

    @staticmethod
    def _extract_cast(credits: dict[str, Any], *, limit: int = 5) -> list[str]:
        cast = credits.get("cast") or []
        names = [person.get("name") for person in cast if person.get("name")]
        return names[:limit]
