"""
Unit tests for the Gemini generation client.

The SDK model is replaced with a Mock; no network calls are made. Every
failure mode must come back as GenerationResult(success=False), never as an
exception.
"""

import time

import pytest
from unittest.mock import Mock, patch

from studyhub.generation.gemini_client import (
    ContentShape,
    GeminiClient,
    GenerationResult,
    parse_items,
)
from studyhub.learning.models import Flashcard, QuizQuestion


# ============================================================================
# Fixtures
# ============================================================================


def _client_returning(text=None, side_effect=None, **kwargs):
    """GeminiClient with a stubbed model."""
    client = GeminiClient(api_key="test-key", **kwargs)
    client._model = Mock()
    client._model.generate_content = Mock(return_value=Mock(text=text), side_effect=side_effect)
    return client


# ============================================================================
# parse_items
# ============================================================================


class TestParseItems:
    """Tests for turning model text into typed items."""

    def test_fenced_quiz_array(self, valid_quiz_json):
        result = parse_items(valid_quiz_json, ContentShape.QUIZ)

        assert result.success
        assert len(result.items) == 2
        assert all(isinstance(q, QuizQuestion) for q in result.items)
        assert result.items[1].correct_answer == 1

    def test_bare_flashcard_array(self, valid_flashcard_json):
        result = parse_items(valid_flashcard_json, "flashcards")

        assert result.success
        assert all(isinstance(c, Flashcard) for c in result.items)

    def test_non_json(self):
        result = parse_items("Sure! Here are some flashcards about Docker.", ContentShape.FLASHCARDS)

        assert not result.success
        assert "not valid JSON" in result.error
        assert result.items == []

    def test_object_instead_of_array(self):
        result = parse_items('{"flashcards": []}', ContentShape.FLASHCARDS)

        assert not result.success
        assert "JSON array" in result.error

    def test_invalid_items_dropped(self):
        raw = (
            '[{"question": "Q1", "options": ["A", "B", "C"], "correctAnswer": 0},'
            ' {"question": "Q2", "options": ["A", "B", "C", "D"], "correctAnswer": 2},'
            ' "not an object"]'
        )

        result = parse_items(raw, ContentShape.QUIZ)

        assert result.success
        assert [q.question for q in result.items] == ["Q2"]

    def test_no_valid_items_is_failure(self):
        result = parse_items('[{"question": "Q1", "options": ["A"], "correctAnswer": 0}]', ContentShape.QUIZ)

        assert not result.success
        assert "No valid quiz items" in result.error

    def test_empty_array_is_failure(self):
        assert not parse_items("[]", ContentShape.FLASHCARDS).success

    def test_truncated_to_count(self, valid_quiz_json):
        result = parse_items(valid_quiz_json, ContentShape.QUIZ, count=1)
        assert len(result.items) == 1

    def test_defaults_fill_missing_fields(self):
        result = parse_items(
            '[{"question": "Q", "answer": "A"}]',
            ContentShape.FLASHCARDS,
            source_default="Generative AI (genAI)",
            category_default="AI/ML",
        )

        card = result.items[0]
        assert card.source == "Generative AI (genAI)"
        assert card.category == "AI/ML"


# ============================================================================
# GeminiClient
# ============================================================================


class TestConfiguration:
    def test_unconfigured_without_key(self):
        assert not GeminiClient(api_key="").is_configured

    def test_configured_with_key(self):
        assert GeminiClient(api_key="test-key").is_configured

    def test_settings_defaults(self):
        client = GeminiClient(api_key="test-key")

        assert client.model_name == "gemini-1.5-flash"
        assert client.generation_config == {
            "max_output_tokens": 2048,
            "temperature": 0.7,
            "top_p": 0.8,
            "top_k": 40,
        }
        assert client.timeout_seconds is None

    def test_settings_report_missing_key(self):
        from config import get_settings

        assert not get_settings().has_ai_configured()

    def test_settings_report_key(self, monkeypatch):
        from config import get_settings

        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        get_settings.cache_clear()

        assert get_settings().has_ai_configured()

    def test_key_from_environment(self, monkeypatch):
        from config import get_settings

        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        get_settings.cache_clear()

        assert GeminiClient().is_configured

    def test_model_is_lazy(self):
        with patch("google.generativeai.configure") as configure, patch(
            "google.generativeai.GenerativeModel"
        ) as model_cls:
            client = GeminiClient(api_key="test-key")
            configure.assert_not_called()

            first = client.model
            second = client.model

        assert first is second
        configure.assert_called_once_with(api_key="test-key")
        model_cls.assert_called_once_with(
            model_name="gemini-1.5-flash",
            generation_config=client.generation_config,
        )


class TestGenerate:
    @pytest.mark.asyncio
    async def test_missing_key_is_failure_without_call(self):
        client = GeminiClient(api_key="")
        client._model = Mock()

        result = await client.generate("prompt", ContentShape.QUIZ)

        assert isinstance(result, GenerationResult)
        assert not result.success
        assert "not configured" in result.error
        client._model.generate_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self, valid_quiz_json):
        client = _client_returning(valid_quiz_json)

        result = await client.generate("the prompt", ContentShape.QUIZ, count=5)

        assert result.success
        assert len(result.items) == 2
        client._model.generate_content.assert_called_once_with("the prompt")

    @pytest.mark.asyncio
    async def test_api_error_is_failure(self):
        client = _client_returning(side_effect=RuntimeError("quota exceeded"))

        result = await client.generate("prompt", ContentShape.FLASHCARDS)

        assert not result.success
        assert "quota exceeded" in result.error

    @pytest.mark.asyncio
    async def test_non_json_response_is_failure(self):
        client = _client_returning("I cannot help with that.")

        result = await client.generate("prompt", ContentShape.FLASHCARDS)

        assert not result.success

    @pytest.mark.asyncio
    async def test_timeout_is_failure(self):
        def slow(prompt):
            time.sleep(0.5)
            return Mock(text="[]")

        client = _client_returning(side_effect=slow, timeout_seconds=0.05)

        result = await client.generate("prompt", ContentShape.QUIZ)

        assert not result.success


class TestGenerateText:
    @pytest.mark.asyncio
    async def test_text_is_stripped(self):
        client = _client_returning("  **Community Activity Overview**\n")

        result = await client.generate_text("prompt")

        assert result.success
        assert result.text == "**Community Activity Overview**"

    @pytest.mark.asyncio
    async def test_empty_text_is_failure(self):
        client = _client_returning("   ")
        assert not (await client.generate_text("prompt")).success

    @pytest.mark.asyncio
    async def test_generate_json(self):
        client = _client_returning('```json\n[{"title": "Attention Is All You Need"}]\n```')

        result = await client.generate_json("prompt")

        assert result.success
        assert result.items == [{"title": "Attention Is All You Need"}]

    @pytest.mark.asyncio
    async def test_generate_json_rejects_object(self):
        client = _client_returning('{"title": "x"}')
        assert not (await client.generate_json("prompt")).success
