"""Short mood-aware summaries for a recommended movie or book."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from moodpick.core.config import Settings, get_settings
from moodpick.services.errors import SummaryError, UpstreamCallError
from moodpick.services.llm import TextGenerator
from moodpick.services.moods import lookup
from moodpick.services.prompts import build_book_summary_prompt, build_summary_prompt

logger = logging.getLogger(__name__)

SUMMARY_PLACEHOLDER = "Summary unavailable right now. The recommendation still stands."


def genre_names(genres: Iterable[Any]) -> list[str]:
    """Accept TMDb genre objects or plain names."""

    names = []
    for genre in genres or []:
        name = genre.get("name") if isinstance(genre, dict) else genre
        if name:
            names.append(str(name))
    return names


class SummaryGenerator:
    def __init__(
        self,
        *,
        generator: TextGenerator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.generator = generator or TextGenerator(self.settings, temperature=0.7)

    def summarize(
        self,
        *,
        title: str,
        overview: str,
        mood: str,
        genres: Iterable[Any] = (),
        mood_keywords: Iterable[str] = (),
        ai_reasons: Iterable[str] = (),
    ) -> str:
        self.settings.require_openrouter()
        prompt = build_summary_prompt(
            title=title,
            overview=overview,
            mood=mood.strip().lower(),
            profile=lookup(mood),
            genres=genre_names(genres),
            mood_keywords=mood_keywords,
            ai_reasons=ai_reasons,
        )
        try:
            return self.generator.complete(prompt, model=self.settings.summary_model)
        except UpstreamCallError as exc:
            raise SummaryError("Failed to summarize movie") from exc

    def summarize_or_placeholder(self, **kwargs: Any) -> str:
        try:
            return self.summarize(**kwargs)
        except SummaryError as exc:
            logger.warning("Summary generation failed, using placeholder: %s", exc)
            return SUMMARY_PLACEHOLDER

    def summarize_book(self, description: str) -> str:
        self.settings.require_openrouter()
        try:
            return self.generator.complete(
                build_book_summary_prompt(description), model=self.settings.book_model
            )
        except UpstreamCallError as exc:
            raise SummaryError("Failed to summarize description") from exc
