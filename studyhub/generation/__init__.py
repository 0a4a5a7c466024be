"""Flashcard and quiz generation: prompts, Gemini client, mock fallback, cache.

Usage:
    from studyhub.generation import generate_learning_content_fast

    content = await generate_learning_content_fast(posts, quiz_count=3, flashcard_count=3)
    print(content.to_dict())
"""

from .cache import ResultCache, get_default_cache
from .gemini_client import ContentShape, GeminiClient, GenerationResult, parse_items
from .orchestrator import (
    LearningContentOrchestrator,
    generate_learning_content,
    generate_learning_content_fast,
    generate_predefined_topic_content,
)
from .prompts import build_prompt
from .strategies import STRATEGIES, Strategy, StrategyConfig, get_strategy, mock_flashcards, mock_quiz

__all__ = [
    "ResultCache",
    "get_default_cache",
    "ContentShape",
    "GeminiClient",
    "GenerationResult",
    "parse_items",
    "mock_flashcards",
    "mock_quiz",
    "LearningContentOrchestrator",
    "generate_learning_content",
    "generate_learning_content_fast",
    "generate_predefined_topic_content",
    "build_prompt",
    "STRATEGIES",
    "Strategy",
    "StrategyConfig",
    "get_strategy",
]
