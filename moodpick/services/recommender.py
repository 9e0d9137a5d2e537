"""Resolve a mood and seed to exactly one movie.

The AI path asks the text backend for a handful of candidates and confirms
them one at a time against TMDb; the first candidate with a catalog hit wins.
If the AI path produces nothing usable, TMDb discover is browsed by the
mood's genres instead.
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal

from moodpick.core.config import Settings, get_settings
from moodpick.services.errors import NoRecommendationFound, ParseError, UpstreamCallError
from moodpick.services.llm import TextGenerator
from moodpick.services.models import (
    Candidate,
    CandidateOutcome,
    Found,
    NotFound,
    RecommendationResult,
)
from moodpick.services.moods import MoodProfile, lookup
from moodpick.services.prompts import build_recommendation_prompt, parse_candidates
from moodpick.services.shuffle import seeded_shuffle, select_index
from moodpick.services.tmdb import TMDbClient

logger = logging.getLogger(__name__)

SelectionMode = Literal["shuffle", "single"]

FALLBACK_PAGE_COUNT = 5


def _normalize_titles(titles: Iterable[str]) -> set[str]:
    return {title.strip().casefold() for title in titles if title and title.strip()}


class MovieRecommender:
    def __init__(
        self,
        *,
        generator: TextGenerator | None = None,
        catalog: TMDbClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.generator = generator or TextGenerator(self.settings)
        self.catalog = catalog or TMDbClient(self.settings)

    def recommend(
        self,
        mood: str,
        seed: int,
        *,
        exclude: Iterable[str] = (),
        selection: SelectionMode = "shuffle",
    ) -> RecommendationResult:
        """Return one recommendation or raise ``NoRecommendationFound``."""

        profile = lookup(mood)
        if profile.is_default:
            logger.info("Unknown mood '%s', using the generic profile", profile.key)
        excluded = _normalize_titles(exclude)

        candidates = self._suggest(mood, profile, seed, exclude)
        if candidates:
            for candidate in self._order(candidates, seed, selection):
                if candidate.title.casefold() in excluded:
                    logger.info("Skipping previously seen candidate '%s'", candidate.title)
                    continue
                outcome = self._resolve_candidate(candidate)
                if isinstance(outcome, Found):
                    return RecommendationResult(
                        item=outcome.item,
                        mood_keywords=list(profile.keywords),
                        ai_reasons=list(candidate.reasons),
                        source="ai",
                    )
                logger.info("Candidate '%s' not in catalog: %s", candidate.title, outcome.reason)

        logger.warning("Falling back to genre mapping for mood '%s'", mood)
        return self._fallback(profile, seed, excluded)

    def _suggest(
        self,
        mood: str,
        profile: MoodProfile,
        seed: int,
        exclude: Iterable[str],
    ) -> list[Candidate]:
        # A missing key is a configuration error and must surface.
        self.settings.require_openrouter()
        prompt = build_recommendation_prompt(mood, profile, seed, exclude=exclude)
        try:
            content = self.generator.complete(prompt, model=self.settings.model_for_mood(mood))
            candidates = parse_candidates(content)
        except (UpstreamCallError, ParseError) as exc:
            logger.warning("AI recommendation step failed for mood '%s': %s", mood, exc)
            return []
        if not candidates:
            logger.warning("AI returned no usable movie suggestions for mood '%s'", mood)
        return candidates

    @staticmethod
    def _order(candidates: list[Candidate], seed: int, selection: SelectionMode) -> list[Candidate]:
        if selection == "single":
            return [candidates[select_index(len(candidates), seed)]]
        return seeded_shuffle(candidates, seed)

    def _resolve_candidate(self, candidate: Candidate) -> CandidateOutcome:
        try:
            for query in candidate.search_queries():
                results = self.catalog.search_movie(query)
                if results:
                    details = self.catalog.get_details(results[0]["id"])
                    item = self.catalog.build_item(details, director=candidate.director)
                    return Found(item=item, candidate=candidate)
        except UpstreamCallError as exc:
            return NotFound(reason=str(exc))
        return NotFound(reason="no search results")

    def _fallback(self, profile: MoodProfile, seed: int, excluded: set[str]) -> RecommendationResult:
        genre_ids = profile.fallback_genre_ids()
        page = select_index(FALLBACK_PAGE_COUNT, seed) + 1
        results = self.catalog.discover(
            genre_ids,
            page=page,
            sort_by="popularity.desc",
            min_vote_count=self.settings.tmdb_min_vote_count,
        )
        if not results:
            raise NoRecommendationFound("No movies found for this mood")

        unseen = [movie for movie in results if (movie.get("title") or "").casefold() not in excluded]
        pool = unseen or results
        selected = pool[select_index(len(pool), seed)]
        details = self.catalog.get_details(selected["id"])
        return RecommendationResult(
            item=self.catalog.build_item(details),
            mood_keywords=list(profile.keywords),
            ai_reasons=[],
            source="fallback",
        )
