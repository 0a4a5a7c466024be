"""Post and topic analysis for learning-content generation.

Usage:
    from studyhub.learning import TopicAnalyzer, Post

    analysis = TopicAnalyzer().analyze("Intro to Transformers", "Self-attention ...")
    print(analysis.main_topics, analysis.difficulty)
"""

from .analyzer import (
    TopicAnalyzer,
    categorize,
    extract_knowledge_points,
    extract_topics,
    infer_difficulty,
)
from .models import (
    AnalysisDifficulty,
    Flashcard,
    LearningContent,
    Post,
    PostType,
    ProcessedPost,
    QuizQuestion,
    TopicAnalysis,
    TopicDefinition,
)
from .topics import PREDEFINED_TOPICS, find_topic, get_available_topics

__all__ = [
    "TopicAnalyzer",
    "categorize",
    "extract_knowledge_points",
    "extract_topics",
    "infer_difficulty",
    "AnalysisDifficulty",
    "Flashcard",
    "LearningContent",
    "Post",
    "PostType",
    "ProcessedPost",
    "QuizQuestion",
    "TopicAnalysis",
    "TopicDefinition",
    "PREDEFINED_TOPICS",
    "find_topic",
    "get_available_topics",
]
