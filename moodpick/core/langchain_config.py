"""Export optional LangSmith tracing settings so LangChain picks them up."""

from __future__ import annotations

import os

from moodpick.core.config import Settings, get_settings


def configure_langchain_env(settings: Settings | None = None) -> None:
    """Set LangSmith env vars if provided in settings. Existing values win."""

    settings = settings or get_settings()
    if settings.langchain_tracing_v2:
        os.environ.setdefault("LANGCHAIN_TRACING_V2", "true")
    if settings.langchain_api_key:
        os.environ.setdefault("LANGCHAIN_API_KEY", settings.langchain_api_key)
    if settings.langchain_project:
        os.environ.setdefault("LANGCHAIN_PROJECT", settings.langchain_project)
