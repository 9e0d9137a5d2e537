"""FastAPI entrypoint exposing movie/book recommendations and summaries."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Literal

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from moodpick.core.config import Settings, get_settings
from moodpick.core.langchain_config import configure_langchain_env
from moodpick.db import BookRepository, get_session, init_models
from moodpick.services.book_recommender import BookRecommender
from moodpick.services.books import GoogleBooksClient
from moodpick.services.errors import (
    ConfigurationError,
    NoRecommendationFound,
    SummaryError,
    UpstreamCallError,
)
from moodpick.services.moods import available_moods
from moodpick.services.recommender import MovieRecommender
from moodpick.services.summary import SummaryGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Configure LangChain + ensure database tables before serving."""

    configure_langchain_env()
    init_models()
    yield


app = FastAPI(title="MoodPick", lifespan=lifespan)
repo = BookRepository()


class MovieSummaryRequest(BaseModel):
    title: str | None = None
    overview: str | None = None
    mood: str | None = None
    genres: list[dict[str, Any] | str] = Field(default_factory=list)
    mood_keywords: list[str] = Field(default_factory=list)
    ai_reasons: list[str] = Field(default_factory=list)


class DescriptionSummaryRequest(BaseModel):
    description: str | None = None


def get_movie_recommender(settings: Settings = Depends(get_settings)) -> MovieRecommender:
    return MovieRecommender(settings=settings)


def get_summary_generator(settings: Settings = Depends(get_settings)) -> SummaryGenerator:
    return SummaryGenerator(settings=settings)


def get_book_recommender(settings: Settings = Depends(get_settings)) -> BookRecommender:
    return BookRecommender(settings=settings)


def get_books_client(settings: Settings = Depends(get_settings)) -> GoogleBooksClient:
    return GoogleBooksClient(settings)


def _default_seed() -> int:
    return int(time.time() * 1000)


def _require(value: str | None, message: str) -> str:
    normalized = (value or "").strip()
    if not normalized:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return normalized


@app.exception_handler(StarletteHTTPException)
async def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("query", "body"))
    message = f"Invalid parameter {location}: {first.get('msg', 'invalid value')}".strip()
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(ConfigurationError)
async def _configuration_error(_: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error: %s", exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


@app.exception_handler(NoRecommendationFound)
async def _not_found(_: Request, exc: NoRecommendationFound) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/moods")
def list_moods() -> dict[str, list[str]]:
    return {"moods": available_moods()}


@app.get("/movies/recommend")
def recommend_movie(
    mood: str | None = None,
    seed: int | None = None,
    exclude: list[str] | None = Query(default=None),
    selection: Literal["shuffle", "single"] = "shuffle",
    include_summary: bool = False,
    recommender: MovieRecommender = Depends(get_movie_recommender),
    summarizer: SummaryGenerator = Depends(get_summary_generator),
) -> dict[str, Any]:
    """Recommend one movie for ``mood``. Without a seed each call varies."""

    normalized_mood = _require(mood, "Missing mood parameter")
    seed = _default_seed() if seed is None else seed
    try:
        result = recommender.recommend(
            normalized_mood, seed, exclude=exclude or (), selection=selection
        )
    except UpstreamCallError as exc:
        logger.error("Fallback movie recommendation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch movie recommendation",
        ) from exc

    payload: dict[str, Any] = {"movie": result.to_payload()}
    if include_summary:
        payload["summary"] = summarizer.summarize_or_placeholder(
            title=result.item.title,
            overview=result.item.overview or "",
            mood=normalized_mood,
            genres=result.item.genres,
            mood_keywords=result.mood_keywords,
            ai_reasons=result.ai_reasons,
        )
    return payload


@app.post("/movies/summarize")
def summarize_movie(
    payload: MovieSummaryRequest,
    summarizer: SummaryGenerator = Depends(get_summary_generator),
) -> dict[str, str]:
    if not (payload.title and payload.overview and payload.mood):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required parameters (overview, mood, title)",
        )
    try:
        summary = summarizer.summarize(
            title=payload.title,
            overview=payload.overview,
            mood=payload.mood,
            genres=payload.genres,
            mood_keywords=payload.mood_keywords,
            ai_reasons=payload.ai_reasons,
        )
    except SummaryError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to summarize movie",
        ) from exc
    return {"summary": summary}


@app.get("/books")
def search_books(
    query: str | None = None,
    books: GoogleBooksClient = Depends(get_books_client),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    normalized = _require(query, "Missing query parameter")
    try:
        results = books.search(normalized)
    except UpstreamCallError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch books",
        ) from exc
    repo.save_many(session, results, query=normalized)
    return {"items": [book.to_payload() for book in results]}


@app.get("/books/recent")
def recent_books(
    limit: int = Query(default=20, ge=1, le=100),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    records = repo.list_recent(session, limit=limit)
    return {
        "items": [
            {
                "title": record.title,
                "authors": record.authors,
                "image": record.image,
                "rating": record.rating,
                "query": record.query,
            }
            for record in records
        ]
    }


@app.get("/books/recommend")
def recommend_book(
    mood: str | None = None,
    seed: int | None = None,
    recommender: BookRecommender = Depends(get_book_recommender),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    normalized_mood = _require(mood, "Missing mood parameter")
    seed = _default_seed() if seed is None else seed
    try:
        recommendation = recommender.recommend(normalized_mood, seed)
    except UpstreamCallError as exc:
        logger.error("Book recommendation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch book recommendation",
        ) from exc
    repo.save_many(session, [recommendation.book], query=normalized_mood)
    return {
        "book": recommendation.book.to_payload(),
        "summary": recommendation.summary,
        "source": recommendation.source,
    }


@app.post("/summarize")
def summarize_description(
    payload: DescriptionSummaryRequest,
    summarizer: SummaryGenerator = Depends(get_summary_generator),
) -> dict[str, str]:
    description = _require(payload.description, "Missing description parameter")
    try:
        summary = summarizer.summarize_book(description)
    except SummaryError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to summarize description",
        ) from exc
    return {"summary": summary}
