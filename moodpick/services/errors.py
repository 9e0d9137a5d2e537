"""Exception hierarchy shared by the recommendation services."""

from __future__ import annotations


class MoodPickError(Exception):
    """Base exception for the service layer."""


class ConfigurationError(MoodPickError):
    """Raised when a required credential or model name is missing."""


class UpstreamCallError(MoodPickError):
    """Raised when an AI or catalog backend fails, times out or returns an error payload."""


class ParseError(MoodPickError):
    """Raised when the AI response cannot be decoded into candidates."""


class NoRecommendationFound(MoodPickError):
    """Raised when even the genre fallback yields no catalog items."""


class SummaryError(MoodPickError):
    """Raised when the summary backend fails. Callers substitute a placeholder."""
