"""
Gemini Generation Client.

Wraps the Google Generative AI SDK for flashcard, quiz and free-text
generation. Every call returns a GenerationResult; failures (missing key,
network/API errors, timeouts, non-JSON or wrongly shaped output) are reported
in the result and never raised. Deciding what to do about a failure is the
caller's job.

No retries: one call, one result.
"""

from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from loguru import logger

from config import get_settings

from ..learning.models import Flashcard, QuizQuestion


class ContentShape(str, Enum):
    """Expected shape of a structured generation."""

    FLASHCARDS = "flashcards"
    QUIZ = "quiz"


@dataclass
class GenerationResult:
    """Outcome of one model call."""

    success: bool
    items: list[Any] = field(default_factory=list)
    text: str | None = None
    error: str | None = None


_CODE_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CODE_FENCE_END = re.compile(r"\s*```$")


def parse_items(
    raw: str,
    shape: ContentShape | str,
    count: int | None = None,
    source_default: str = "",
    category_default: str = "General",
) -> GenerationResult:
    """
    Parse model output into flashcards or quiz questions.

    The response must be a JSON array (optionally wrapped in a Markdown code
    fence). Items that do not fit the schema are dropped; if none survive the
    whole response counts as a failure.
    """
    shape = ContentShape(shape)
    text = (raw or "").strip()
    if text.startswith("```"):
        text = _CODE_FENCE_START.sub("", text)
        text = _CODE_FENCE_END.sub("", text)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return GenerationResult(success=False, error=f"Response is not valid JSON: {e}")

    if not isinstance(data, list):
        return GenerationResult(
            success=False,
            error=f"Expected a JSON array, got {type(data).__name__}",
        )

    item_cls = Flashcard if shape is ContentShape.FLASHCARDS else QuizQuestion
    items = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping non-object {shape.value} item at index {index}")
            continue
        try:
            items.append(
                item_cls.from_dict(
                    entry,
                    index=index,
                    source_default=source_default,
                    category_default=category_default,
                )
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping invalid {shape.value} item at index {index}: {e}")

    if not items:
        return GenerationResult(success=False, error=f"No valid {shape.value} items in response")

    if count is not None:
        items = items[:count]
    return GenerationResult(success=True, items=items)


class GeminiClient:
    """
    Async facade over a Gemini GenerativeModel.

    The SDK call is blocking, so it runs in a worker thread; flashcard and
    quiz generations can then overlap on one event loop.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        generation_config: dict[str, Any] | None = None,
        timeout_seconds: float | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Gemini API key (uses settings if not provided)
            model_name: Model to use (uses settings if not provided)
            generation_config: Sampling parameters (uses settings if not provided)
            timeout_seconds: Per-call timeout; None leaves timing to the SDK
        """
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model_name = model_name or settings.ai_model
        self.generation_config = generation_config or settings.get_generation_config()
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.generation_timeout_seconds
        )
        self._model = None

    @property
    def is_configured(self) -> bool:
        """True when an API key is present. Correctness of the key is not checked."""
        return bool(self.api_key)

    @property
    def model(self):
        """Lazy-load the Gemini model."""
        if self._model is None:
            import google.generativeai as genai

            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(
                model_name=self.model_name,
                generation_config=self.generation_config,
            )
            logger.debug(f"Gemini model initialized: {self.model_name}")
        return self._model

    async def _call_model(self, prompt: str) -> str:
        call = asyncio.to_thread(self.model.generate_content, prompt)
        if self.timeout_seconds:
            response = await asyncio.wait_for(call, timeout=self.timeout_seconds)
        else:
            response = await call
        return response.text

    async def generate(
        self,
        prompt: str,
        shape: ContentShape | str,
        *,
        count: int | None = None,
        source_default: str = "",
        category_default: str = "General",
    ) -> GenerationResult:
        """
        Generate flashcards or quiz questions.

        Returns:
            GenerationResult with parsed items on success, or an error message
        """
        if not self.is_configured:
            return GenerationResult(success=False, error="Gemini API key not configured")

        try:
            raw = await self._call_model(prompt)
        except Exception as e:
            return GenerationResult(success=False, error=f"Gemini API error: {e}")

        return parse_items(
            raw,
            shape,
            count=count,
            source_default=source_default,
            category_default=category_default,
        )

    async def generate_text(self, prompt: str) -> GenerationResult:
        """Generate free text (summaries, single-label answers)."""
        if not self.is_configured:
            return GenerationResult(success=False, error="Gemini API key not configured")

        try:
            text = await self._call_model(prompt)
        except Exception as e:
            return GenerationResult(success=False, error=f"Gemini API error: {e}")

        if not text or not text.strip():
            return GenerationResult(success=False, error="Empty response from Gemini")
        return GenerationResult(success=True, text=text.strip())

    async def generate_json(self, prompt: str) -> GenerationResult:
        """Generate and decode an arbitrary JSON array (resource lists)."""
        result = await self.generate_text(prompt)
        if not result.success:
            return result

        text = result.text or ""
        if text.startswith("```"):
            text = _CODE_FENCE_END.sub("", _CODE_FENCE_START.sub("", text))
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            return GenerationResult(success=False, error=f"Response is not valid JSON: {e}")
        if not isinstance(data, list):
            return GenerationResult(success=False, error="Expected a JSON array")
        return GenerationResult(success=True, items=data, text=result.text)
