"""Text generation through OpenRouter's OpenAI-compatible endpoint via LangChain."""

from __future__ import annotations

import logging

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from moodpick.core.config import Settings, get_settings
from moodpick.services.errors import UpstreamCallError

logger = logging.getLogger(__name__)


class LLMError(UpstreamCallError):
    """Raised when the completion call fails or comes back empty."""


class TextGenerator:
    """Send a single user prompt and return the completion text."""

    def __init__(self, settings: Settings | None = None, *, temperature: float = 0.9) -> None:
        self.settings = settings or get_settings()
        self.temperature = temperature

    def _build_llm(self, model: str) -> ChatOpenAI:
        return ChatOpenAI(
            model=model,
            api_key=self.settings.require_openrouter(),
            base_url=self.settings.openrouter_base_url,
            temperature=self.temperature,
            timeout=self.settings.request_timeout,
            max_retries=1,
        )

    def complete(self, prompt: str, *, model: str) -> str:
        llm = self._build_llm(model)
        try:
            message = llm.invoke([HumanMessage(content=prompt)])
        except Exception as exc:
            logger.warning("OpenRouter completion failed (model=%s): %s", model, exc)
            raise LLMError(f"Completion failed for model {model}") from exc

        content = message.content
        if isinstance(content, list):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part) for part in content
            )
        text = (content or "").strip()
        logger.debug("OpenRouter completion (model=%s): %s", model, text)
        if not text:
            raise LLMError(f"Empty completion from model {model}")
        return text
