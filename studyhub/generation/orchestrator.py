"""
Learning Content Orchestrator.

Runs one generation request end to end:
1. Resolve the strategy and render its prompt context
2. Generate flashcards and quiz concurrently
3. For each half: serve from cache, call the model, or fall back to mock content
4. Join both halves into a LearningContent

The model client never raises; this module reads its GenerationResult and
decides on fallback. Callers get content in every case except a genuinely
unexpected error, which surfaces as a single ContentGenerationError.
"""

from __future__ import annotations

import asyncio
import copy
from typing import Any

from loguru import logger

from ..errors import ContentGenerationError, TopicNotFoundError
from ..learning.analyzer import TopicAnalyzer
from ..learning.models import Flashcard, LearningContent, QuizQuestion
from .cache import ResultCache, get_default_cache
from .gemini_client import ContentShape, GeminiClient
from .mock_generator import MockSource
from .prompts import build_prompt, difficulty_instruction
from .strategies import PromptContext, Strategy, StrategyConfig, get_strategy


class LearningContentOrchestrator:
    """
    Generates flashcards and quiz questions from posts or a catalog topic.

    Counts are passed through unchecked; callers clamp them to the
    platform's limits (1-20 quiz questions, 1-30 flashcards).
    """

    def __init__(
        self,
        client: GeminiClient | None = None,
        cache: ResultCache | None = None,
        analyzer: TopicAnalyzer | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            client: Model client (a settings-backed GeminiClient if not provided)
            cache: Result cache; None disables caching
            analyzer: Topic analyzer used by the enhanced/simplified strategies
        """
        self.client = client or GeminiClient()
        self.cache = cache
        self.analyzer = analyzer or TopicAnalyzer()

    async def generate_learning_content(
        self,
        source: MockSource,
        quiz_count: int,
        flashcard_count: int,
        quiz_difficulty: str | None = None,
        strategy: Strategy | str = Strategy.BASIC,
    ) -> LearningContent:
        """
        Generate flashcards and quiz questions.

        Args:
            source: Posts, or a topic name for the predefined strategy
            quiz_count: Number of quiz questions requested
            flashcard_count: Number of flashcards requested
            quiz_difficulty: easy, medium, hard or mixed (strategy default if None)
            strategy: basic, enhanced, simplified or predefined

        Returns:
            LearningContent with at most the requested number of each item

        Raises:
            ContentGenerationError: an unexpected error escaped generation
        """
        config = get_strategy(strategy)
        difficulty = quiz_difficulty or config.default_difficulty

        logger.info(
            f"Generating learning content: strategy={config.strategy.value}, "
            f"flashcards={flashcard_count}, quiz={quiz_count} ({difficulty})"
        )

        try:
            context = self._render_context(config, source)
            flashcards, quiz = await asyncio.gather(
                self._generate_flashcards(config, source, context, flashcard_count),
                self._generate_quiz(config, source, context, quiz_count, difficulty),
            )
        except Exception as e:
            raise ContentGenerationError(f"Learning content generation failed: {e}") from e

        return LearningContent(flashcards=flashcards, quiz=quiz)

    def _render_context(self, config: StrategyConfig, source: MockSource) -> PromptContext | None:
        """Prompt context, or None when only mock content is possible."""
        try:
            return config.render_context(source, self.analyzer)
        except TopicNotFoundError as e:
            logger.warning(f"{e}; generating generic content for it")
            return None

    async def _generate_flashcards(
        self,
        config: StrategyConfig,
        source: MockSource,
        context: PromptContext | None,
        count: int,
    ) -> list[Flashcard]:
        return await self._generate(
            ContentShape.FLASHCARDS,
            config,
            context,
            count,
            difficulty=None,
            template=config.flashcard_template,
            fallback=lambda: config.mock_flashcards(source, count),
        )

    async def _generate_quiz(
        self,
        config: StrategyConfig,
        source: MockSource,
        context: PromptContext | None,
        count: int,
        difficulty: str,
    ) -> list[QuizQuestion]:
        return await self._generate(
            ContentShape.QUIZ,
            config,
            context,
            count,
            difficulty=difficulty,
            template=config.quiz_template,
            fallback=lambda: config.mock_quiz(source, count, difficulty),
        )

    async def _generate(
        self,
        shape: ContentShape,
        config: StrategyConfig,
        context: PromptContext | None,
        count: int,
        difficulty: str | None,
        template: str,
        fallback,
    ) -> list[Any]:
        if context is None:
            return fallback()

        if not self.client.is_configured:
            logger.debug(f"No Gemini API key configured, using mock {shape.value}")
            return fallback()

        cache_key = None
        if self.cache is not None:
            cache_key = self.cache.make_key(
                shape.value, config.strategy.value, context.cache_scope, count, difficulty
            )
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Using cached {shape.value}: {cache_key}")
                return copy.deepcopy(cached)

        substitutions: dict[str, Any] = {"count": count}
        if difficulty is not None:
            substitutions["difficulty"] = difficulty
            substitutions["difficulty_instruction"] = difficulty_instruction(difficulty)
        substitutions.update(context.substitutions)
        prompt = build_prompt(template, substitutions)

        result = await self.client.generate(
            prompt,
            shape,
            count=count,
            source_default=context.source_default,
            category_default=context.category_default,
        )
        if not result.success:
            logger.warning(f"{shape.value.capitalize()} generation failed, using mock content: {result.error}")
            return fallback()

        if cache_key is not None:
            self.cache.set(cache_key, copy.deepcopy(result.items))
        logger.info(f"Generated {len(result.items)} {shape.value} with {config.strategy.value} strategy")
        return result.items


# =============================================================================
# Convenience Functions
# =============================================================================


async def generate_learning_content(
    source: MockSource,
    quiz_count: int = 3,
    flashcard_count: int = 3,
    quiz_difficulty: str | None = None,
    strategy: Strategy | str = Strategy.BASIC,
    *,
    client: GeminiClient | None = None,
    cache: ResultCache | None = None,
) -> LearningContent:
    """One-shot generation with any strategy."""
    orchestrator = LearningContentOrchestrator(client=client, cache=cache)
    return await orchestrator.generate_learning_content(
        source,
        quiz_count=quiz_count,
        flashcard_count=flashcard_count,
        quiz_difficulty=quiz_difficulty,
        strategy=strategy,
    )


async def generate_learning_content_fast(
    posts,
    quiz_count: int = 3,
    flashcard_count: int = 3,
    quiz_difficulty: str = "mixed",
    *,
    client: GeminiClient | None = None,
) -> LearningContent:
    """Basic strategy backed by the process-wide result cache."""
    return await generate_learning_content(
        posts,
        quiz_count=quiz_count,
        flashcard_count=flashcard_count,
        quiz_difficulty=quiz_difficulty,
        strategy=Strategy.BASIC,
        client=client,
        cache=get_default_cache(),
    )


async def generate_predefined_topic_content(
    topic_name: str,
    quiz_count: int = 3,
    flashcard_count: int = 3,
    quiz_difficulty: str = "hard",
    *,
    client: GeminiClient | None = None,
) -> LearningContent:
    """Study content for a catalog topic; unknown names get generic content."""
    return await generate_learning_content(
        topic_name,
        quiz_count=quiz_count,
        flashcard_count=flashcard_count,
        quiz_difficulty=quiz_difficulty,
        strategy=Strategy.PREDEFINED,
        client=client,
    )
