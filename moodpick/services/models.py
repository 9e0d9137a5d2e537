"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Union


@dataclass(slots=True)
class Candidate:
    """An AI-suggested title that still has to be confirmed against the catalog."""

    title: str
    year: str | None = None
    director: str | None = None
    reasons: list[str] = field(default_factory=list)

    def search_queries(self) -> list[str]:
        """Queries to try in order: title plus year first, then the bare title."""

        if self.year:
            return [f"{self.title} {self.year}", self.title]
        return [self.title]


@dataclass(frozen=True, slots=True)
class CatalogItem:
    """Movie metadata assembled from a TMDb details payload."""

    id: int
    title: str
    overview: str | None = None
    release_date: str | None = None
    vote_average: float | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genres: tuple[dict[str, Any], ...] = ()
    trailer_key: str | None = None
    director: str | None = None
    cast: tuple[str, ...] = ()


@dataclass(slots=True)
class RecommendationResult:
    """The single movie returned to the client, enriched with mood data."""

    item: CatalogItem
    mood_keywords: list[str] = field(default_factory=list)
    ai_reasons: list[str] = field(default_factory=list)
    source: str = "ai"

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self.item)
        payload["genres"] = [dict(genre) for genre in self.item.genres]
        payload["cast"] = list(self.item.cast)
        payload["director"] = self.item.director or "Unknown"
        payload["mood_keywords"] = list(self.mood_keywords)
        payload["ai_reasons"] = list(self.ai_reasons)
        payload["source"] = self.source
        return payload


@dataclass(slots=True)
class BookData:
    """Normalised Google Books volume."""

    title: str
    authors: list[str] = field(default_factory=list)
    description: str | None = None
    image: str | None = None
    categories: list[str] = field(default_factory=list)
    rating: float | None = None

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Found:
    item: CatalogItem
    candidate: Candidate


@dataclass(frozen=True, slots=True)
class NotFound:
    reason: str = ""


CandidateOutcome = Union[Found, NotFound]
