"""Google Books volume search."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from moodpick.core.config import Settings, get_settings
from moodpick.services.errors import UpstreamCallError
from moodpick.services.models import BookData

logger = logging.getLogger(__name__)


class GoogleBooksError(UpstreamCallError):
    """Raised when the Google Books API call fails."""


class GoogleBooksClient:
    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.google_books_base_url.rstrip("/")
        self.timeout = self.settings.request_timeout
        self._transport = transport

    def search(self, query: str, *, max_results: int = 10) -> list[BookData]:
        api_key = self.settings.require_google_books()
        params = {"q": query, "key": api_key, "maxResults": max_results}
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(f"{self.base_url}/volumes", params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise GoogleBooksError(f"Google Books search failed: {exc}") from exc
        except ValueError as exc:
            raise GoogleBooksError("Google Books returned invalid JSON") from exc
        error = payload.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else error
            raise GoogleBooksError(str(message))

        books = [self._volume_to_book(item) for item in payload.get("items") or []]
        books = [book for book in books if book is not None]
        logger.debug("Google Books '%s' returned %d volumes", query, len(books))
        return books

    @staticmethod
    def _volume_to_book(item: dict[str, Any]) -> BookData | None:
        info = item.get("volumeInfo") or {}
        title = info.get("title")
        if not title:
            return None
        image_links = info.get("imageLinks") or {}
        image = image_links.get("thumbnail") or image_links.get("smallThumbnail")
        if image:
            image = image.replace("http://", "https://")
        return BookData(
            title=title,
            authors=list(info.get("authors") or []),
            description=info.get("description"),
            image=image,
            categories=list(info.get("categories") or []),
            rating=info.get("averageRating"),
        )
