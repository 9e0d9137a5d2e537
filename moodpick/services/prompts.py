"""Prompt templates for the text-generation backend and response parsing."""

from __future__ import annotations

import json
import re
from typing import Any, Iterable

from moodpick.services.errors import ParseError
from moodpick.services.models import Candidate
from moodpick.services.moods import MoodProfile

SUGGESTION_COUNT = 5

PROMPT_VARIATIONS = (
    "Include some well-known classics as well as a few less obvious choices.",
    "Include a mix of recent releases and timeless favorites.",
    "Include both mainstream and some critically-acclaimed but less known films.",
)

RECOMMENDATION_TEMPLATE = """
As a film expert, suggest {count} specific movies that would be perfect for someone in a "{mood}" mood.

A "{mood}" mood typically calls for {description}.
Genres that often work well for this mood include: {genre_examples}.
Examples of films that fit this mood well: {example_titles}.

{variation}
{avoid}
For each movie, provide:
1. Full title (exactly as it would appear in a database)
2. Year of release
3. Director (if notable)
4. 1-2 sentences on why it's perfect for a "{mood}" mood

Format your response as a JSON array with properties: title, year, director, reasons (array of strings).
Don't include any other text in your response except the valid JSON.
"""

SUMMARY_TEMPLATE = """
You are tasked with creating a brief, engaging summary for the film "{title}" that highlights its connection to a {mood_upper} mood/genre.

Film details:
- Title: {title}
- Overview: {overview}
- Genres: {genres}
- Mood/Genre: {mood_upper}
- Mood description: {description}
{reasons}{keywords}
Write a CONCISE summary (maximum 80-100 words) that:
1. Briefly highlights how the film creates a {mood_upper} experience
2. Mentions 1-2 specific elements that contribute to this mood/genre
3. Explains why someone looking for this mood would enjoy it

Your summary should be engaging but avoid revealing major plot twists or spoilers. Focus on mood and atmosphere rather than detailed plot points.

Keep your response short, direct, and conversational in tone.
"""

BOOK_SUGGESTION_TEMPLATE = (
    "Suggest one book title that reflects the mood: {mood}. "
    "Respond with the title only, without quotes or commentary."
)

BOOK_SUMMARY_TEMPLATE = "Summarize the following book description in a concise way:\n{description}"

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)
_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)


def prompt_variation(seed: int) -> str:
    return PROMPT_VARIATIONS[seed % len(PROMPT_VARIATIONS)]


def build_recommendation_prompt(
    mood: str,
    profile: MoodProfile,
    seed: int,
    *,
    exclude: Iterable[str] = (),
    count: int = SUGGESTION_COUNT,
) -> str:
    """Ask for ``count`` movies as a JSON array, phrased by the seed's variant."""

    avoided = sorted({title for title in exclude if title})
    avoid = f"Do not suggest any of these titles: {', '.join(avoided)}.\n" if avoided else ""
    return RECOMMENDATION_TEMPLATE.format(
        count=count,
        mood=mood,
        description=profile.description,
        genre_examples=profile.genre_examples,
        example_titles=profile.example_titles,
        variation=prompt_variation(seed),
        avoid=avoid,
    )


def build_summary_prompt(
    *,
    title: str,
    overview: str,
    mood: str,
    profile: MoodProfile,
    genres: Iterable[str] = (),
    mood_keywords: Iterable[str] = (),
    ai_reasons: Iterable[str] = (),
) -> str:
    reasons = [reason for reason in ai_reasons if reason]
    keywords = [keyword for keyword in mood_keywords if keyword]
    reasons_text = ""
    if reasons:
        reasons_text = "\nThe film has been selected for the following reasons:\n" + "\n".join(
            f"- {reason}" for reason in reasons
        ) + "\n"
    keywords_text = f"- Mood keywords: {', '.join(keywords)}\n" if keywords else ""
    return SUMMARY_TEMPLATE.format(
        title=title,
        overview=overview,
        genres=", ".join(genres),
        mood_upper=mood.upper(),
        description=profile.description,
        reasons=reasons_text,
        keywords=keywords_text,
    )


def build_book_suggestion_prompt(mood: str) -> str:
    return BOOK_SUGGESTION_TEMPLATE.format(mood=mood)


def build_book_summary_prompt(description: str) -> str:
    return BOOK_SUMMARY_TEMPLATE.format(description=description)


def clean_book_title(raw: str) -> str:
    """Take the first non-empty line of a title answer and strip decoration."""

    for line in raw.splitlines():
        line = line.strip().strip("*\"'“”").strip()
        if line:
            return line
    return ""


def parse_candidates(content: str) -> list[Candidate]:
    """Decode the model's JSON array into candidates.

    Code fences are stripped and the outermost bracketed list is located before
    decoding. Records without a title are dropped.
    """

    text = content.strip()
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1).strip()
    match = _ARRAY_RE.search(text)
    if match:
        text = match.group(0)
    elif text.startswith("{"):
        text = f"[{text}]"
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError("AI response is not valid JSON") from exc
    if not isinstance(payload, list):
        raise ParseError("AI response is not a JSON array")

    candidates = []
    for record in payload:
        candidate = _record_to_candidate(record)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def _record_to_candidate(record: Any) -> Candidate | None:
    if not isinstance(record, dict):
        return None
    title = _text(record.get("title"))
    if not title:
        return None
    reasons = record.get("reasons")
    if isinstance(reasons, str):
        reasons = [reasons]
    elif not isinstance(reasons, list):
        reasons = []
    return Candidate(
        title=title,
        year=_text(record.get("year")),
        director=_text(record.get("director")),
        reasons=[text for text in (_text(reason) for reason in reasons) if text],
    )


def _text(value: Any) -> str | None:
    """Stripped text for strings and integers (years, titles like 1917); None otherwise."""

    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None
