"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from moodpick.services.errors import ConfigurationError


class Settings(BaseSettings):
    openrouter_api_key: str | None = Field(default=None, alias="OPENROUTER_API_KEY")
    openrouter_base_url: str = Field(
        default="https://openrouter.ai/api/v1", alias="OPENROUTER_BASE_URL"
    )
    recommendation_model: str = Field(
        default="deepseek/deepseek-chat:free", alias="RECOMMENDATION_MODEL"
    )
    summary_model: str = Field(default="mistralai/mistral-nemo", alias="MOVIE_SUMMARY_MODEL")
    book_model: str = Field(default="deepseek/deepseek-chat:free", alias="BOOK_MODEL")
    mood_models: dict[str, str] = Field(default_factory=dict, alias="MOOD_MODELS")
    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_access_token: str | None = Field(default=None, alias="TMDB_ACCESS_TOKEN")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", alias="TMDB_BASE_URL")
    tmdb_language: str | None = Field(default=None, alias="TMDB_LANGUAGE")
    tmdb_min_vote_count: int = Field(default=100, alias="TMDB_MIN_VOTE_COUNT", ge=0)
    google_books_api_key: str | None = Field(default=None, alias="GOOGLE_BOOKS_API_KEY")
    google_books_base_url: str = Field(
        default="https://www.googleapis.com/books/v1", alias="GOOGLE_BOOKS_BASE_URL"
    )
    request_timeout: float = Field(default=10.0, alias="REQUEST_TIMEOUT", gt=0)
    database_url: str = Field(default="sqlite:///./moodpick.db", alias="DATABASE_URL")
    langchain_tracing_v2: bool = Field(default=False, alias="LANGCHAIN_TRACING_V2")
    langchain_api_key: str | None = Field(default=None, alias="LANGCHAIN_API_KEY")
    langchain_project: str | None = Field(default=None, alias="LANGCHAIN_PROJECT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    def model_for_mood(self, mood: str) -> str:
        """Return the recommendation model, honouring per-mood overrides."""

        overrides = {key.lower(): value for key, value in self.mood_models.items()}
        return overrides.get(mood.strip().lower(), self.recommendation_model)

    def require_openrouter(self) -> str:
        if not self.openrouter_api_key:
            raise ConfigurationError("Missing OPENROUTER_API_KEY environment variable")
        return self.openrouter_api_key

    def require_tmdb(self) -> None:
        if not (self.tmdb_api_key or self.tmdb_access_token):
            raise ConfigurationError("Missing TMDB API credentials in environment variables")

    def require_google_books(self) -> str:
        if not self.google_books_api_key:
            raise ConfigurationError("Missing GOOGLE_BOOKS_API_KEY environment variable")
        return self.google_books_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
