"""Mood-based book pick: ask the model for a title, confirm it with Google Books."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from moodpick.core.config import Settings, get_settings
from moodpick.services.books import GoogleBooksClient
from moodpick.services.errors import NoRecommendationFound, SummaryError, UpstreamCallError
from moodpick.services.llm import TextGenerator
from moodpick.services.models import BookData
from moodpick.services.moods import lookup
from moodpick.services.prompts import build_book_suggestion_prompt, clean_book_title
from moodpick.services.shuffle import select_index
from moodpick.services.summary import SUMMARY_PLACEHOLDER, SummaryGenerator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BookRecommendation:
    book: BookData
    summary: str
    source: str = "ai"


class BookRecommender:
    def __init__(
        self,
        *,
        generator: TextGenerator | None = None,
        books: GoogleBooksClient | None = None,
        summarizer: SummaryGenerator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.generator = generator or TextGenerator(self.settings)
        self.books = books or GoogleBooksClient(self.settings)
        self.summarizer = summarizer or SummaryGenerator(generator=self.generator, settings=self.settings)

    def recommend(self, mood: str, seed: int) -> BookRecommendation:
        self.settings.require_google_books()
        self.settings.require_openrouter()

        title = self._suggest_title(mood)
        if title:
            try:
                results = self.books.search(title)
            except UpstreamCallError as exc:
                logger.warning("Google Books lookup for '%s' failed: %s", title, exc)
                results = []
            if results:
                return self._with_summary(results[0], source="ai")
            logger.info("No Google Books match for suggested title '%s'", title)

        logger.warning("Falling back to keyword search for book mood '%s'", mood)
        profile = lookup(mood)
        query = " ".join(profile.keywords[:2]) or profile.key
        results = self.books.search(query)
        if not results:
            raise NoRecommendationFound("No books found for this mood")
        return self._with_summary(results[select_index(len(results), seed)], source="fallback")

    def _suggest_title(self, mood: str) -> str:
        try:
            raw = self.generator.complete(build_book_suggestion_prompt(mood), model=self.settings.book_model)
        except UpstreamCallError as exc:
            logger.warning("AI book suggestion failed for mood '%s': %s", mood, exc)
            return ""
        return clean_book_title(raw)

    def _with_summary(self, book: BookData, *, source: str) -> BookRecommendation:
        description = book.description or "No description available."
        try:
            summary = self.summarizer.summarize_book(description)
        except SummaryError as exc:
            logger.warning("Book summary failed for '%s': %s", book.title, exc)
            summary = SUMMARY_PLACEHOLDER
        return BookRecommendation(book=book, summary=summary, source=source)
