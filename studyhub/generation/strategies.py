"""
Generation Strategies.

The four ways of turning input into a prompt differ only in:
- how the source (posts or a topic name) is rendered into prompt context
- which flashcard/quiz template pair is used
- which mock pool backs them up
- the quiz difficulty used when the caller does not ask for one

Each strategy is a StrategyConfig record in STRATEGIES; the orchestrator
runs them all through the same pipeline.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from config import get_settings

from ..learning.analyzer import TopicAnalyzer
from ..learning.models import Flashcard, Post, QuizQuestion
from ..learning.topics import find_topic
from . import mock_generator
from .mock_generator import FlashcardBuilder, MockSource, QuizBuilder
from .prompts import (
    BASIC_FLASHCARD_PROMPT,
    BASIC_QUIZ_PROMPT,
    ENHANCED_FLASHCARD_PROMPT,
    ENHANCED_QUIZ_PROMPT,
    PREDEFINED_FLASHCARD_PROMPT,
    PREDEFINED_QUIZ_PROMPT,
    SIMPLIFIED_FLASHCARD_PROMPT,
    SIMPLIFIED_QUIZ_PROMPT,
)

ENHANCED_CONTENT_CHARS = 500


class Strategy(str, Enum):
    """Available generation strategies."""

    BASIC = "basic"
    ENHANCED = "enhanced"
    SIMPLIFIED = "simplified"
    PREDEFINED = "predefined"


@dataclass
class PromptContext:
    """Everything a strategy contributes to one generation request."""

    substitutions: dict[str, Any] = field(default_factory=dict)
    cache_scope: str = ""
    source_default: str = ""
    category_default: str = "General"


ContextRenderer = Callable[[MockSource, TopicAnalyzer], PromptContext]


@dataclass(frozen=True)
class StrategyConfig:
    strategy: Strategy
    flashcard_template: str
    quiz_template: str
    render_context: ContextRenderer
    mock_flashcards: FlashcardBuilder
    mock_quiz: QuizBuilder
    default_difficulty: str = "mixed"


# =============================================================================
# Context Renderers
# =============================================================================


def _prompt_posts(source: MockSource) -> Sequence[Post]:
    if isinstance(source, str):
        raise TypeError("this strategy needs a list of posts, not a topic name")
    return source[: get_settings().max_prompt_posts]


def render_basic_context(source: MockSource, analyzer: TopicAnalyzer) -> PromptContext:
    """Bullet list of post excerpts."""
    excerpt_chars = get_settings().post_excerpt_chars
    lines = [
        f"• {post.title} ({post.type.value}): {post.text[:excerpt_chars]}..."
        for post in _prompt_posts(source)
    ]
    return PromptContext(
        substitutions={"posts": "\n".join(lines)},
        cache_scope=str(len(source)),
    )


def render_enhanced_context(source: MockSource, analyzer: TopicAnalyzer) -> PromptContext:
    """Per-post analysis blocks: author, kind, difficulty, topics, summary, engagement."""
    blocks = []
    for processed in analyzer.process_posts(_prompt_posts(source)):
        analysis = processed.analysis
        blocks.append(
            f"\nPOST: {processed.post.title}\n"
            f"Author: {processed.author}\n"
            f"Category: {processed.kind}\n"
            f"Difficulty: {analysis.difficulty.value}\n"
            f"Key Topics: {', '.join(analysis.main_topics)}\n"
            f"Main Concepts: {', '.join(analysis.knowledge_points)}\n"
            f"Summary: {processed.summary}\n"
            f"Content: {processed.post.text[:ENHANCED_CONTENT_CHARS]}...\n"
            f"Engagement: {processed.engagement} interactions\n"
            "---"
        )
    return PromptContext(
        substitutions={"posts": "\n".join(blocks)},
        cache_scope=str(len(source)),
    )


def render_simplified_context(source: MockSource, analyzer: TopicAnalyzer) -> PromptContext:
    """Numbered topic blocks with no raw post content."""
    posts = _prompt_posts(source)
    blocks = []
    for index, (post, analysis) in enumerate(zip(posts, analyzer.analyze_posts(posts)), start=1):
        blocks.append(
            f"\nTopic {index}: {post.title}\n"
            f"Main Topics: {', '.join(analysis.main_topics)}\n"
            f"Knowledge Points: {', '.join(analysis.knowledge_points)}\n"
            f"Difficulty: {analysis.difficulty.value}\n"
            f"Category: {analysis.category}\n"
            "---"
        )
    return PromptContext(
        substitutions={"topics": "\n".join(blocks)},
        cache_scope=str(len(source)),
    )


def render_predefined_context(source: MockSource, analyzer: TopicAnalyzer) -> PromptContext:
    """
    Catalog topic description, keywords and knowledge points.

    Raises:
        TopicNotFoundError: the name matches no catalog topic
    """
    if not isinstance(source, str):
        raise TypeError("the predefined strategy needs a topic name")
    topic = find_topic(source)
    analysis = analyzer.analyze_definition(topic)
    # Full curated lists go into the prompt; the analysis supplies the labels.
    return PromptContext(
        substitutions={
            "topic_name": topic.name,
            "description": topic.description,
            "keywords": ", ".join(topic.keywords),
            "knowledge_points": ", ".join(topic.knowledge_points),
            "topic_difficulty": analysis.difficulty.value,
            "category": analysis.category,
            "generation_id": int(time.time() * 1000),
        },
        cache_scope=topic.name,
        source_default=topic.name,
        category_default=analysis.category,
    )


# =============================================================================
# Registry
# =============================================================================

STRATEGIES: dict[Strategy, StrategyConfig] = {
    Strategy.BASIC: StrategyConfig(
        strategy=Strategy.BASIC,
        flashcard_template=BASIC_FLASHCARD_PROMPT,
        quiz_template=BASIC_QUIZ_PROMPT,
        render_context=render_basic_context,
        mock_flashcards=mock_generator.baseline_flashcards,
        mock_quiz=mock_generator.baseline_quiz,
    ),
    Strategy.ENHANCED: StrategyConfig(
        strategy=Strategy.ENHANCED,
        flashcard_template=ENHANCED_FLASHCARD_PROMPT,
        quiz_template=ENHANCED_QUIZ_PROMPT,
        render_context=render_enhanced_context,
        mock_flashcards=mock_generator.post_flashcards,
        mock_quiz=mock_generator.post_quiz,
    ),
    Strategy.SIMPLIFIED: StrategyConfig(
        strategy=Strategy.SIMPLIFIED,
        flashcard_template=SIMPLIFIED_FLASHCARD_PROMPT,
        quiz_template=SIMPLIFIED_QUIZ_PROMPT,
        render_context=render_simplified_context,
        mock_flashcards=mock_generator.discussion_flashcards,
        mock_quiz=mock_generator.discussion_quiz,
        default_difficulty="hard",
    ),
    Strategy.PREDEFINED: StrategyConfig(
        strategy=Strategy.PREDEFINED,
        flashcard_template=PREDEFINED_FLASHCARD_PROMPT,
        quiz_template=PREDEFINED_QUIZ_PROMPT,
        render_context=render_predefined_context,
        mock_flashcards=mock_generator.topic_flashcards,
        mock_quiz=mock_generator.topic_quiz,
        default_difficulty="hard",
    ),
}


def get_strategy(strategy: Strategy | str) -> StrategyConfig:
    """
    Look up a strategy config by enum member or name.

    Raises:
        ValueError: unknown strategy name
    """
    return STRATEGIES[Strategy(strategy)]


def mock_flashcards(source: MockSource, count: int, strategy: Strategy | str = Strategy.BASIC) -> list[Flashcard]:
    """Mock flashcards from the pool the strategy falls back to."""
    return get_strategy(strategy).mock_flashcards(source, count)


def mock_quiz(
    source: MockSource,
    count: int,
    difficulty: str = "mixed",
    strategy: Strategy | str = Strategy.BASIC,
) -> list[QuizQuestion]:
    """Mock quiz questions from the pool the strategy falls back to."""
    return get_strategy(strategy).mock_quiz(source, count, difficulty)
