"""
Data model for the learning-content pipeline.

Posts arrive from the community platform and are read-only here. Topic
analyses are derived per request. Flashcards and quiz questions are the
pipeline's output; they serialize to the camelCase shape the web layer
already speaks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

QUIZ_OPTION_COUNT = 4

CARD_DIFFICULTIES = ("Easy", "Medium", "Hard")
QUIZ_DIFFICULTIES = ("easy", "medium", "hard", "mixed")


class PostType(str, Enum):
    """Kinds of content a community member can post."""

    TEXT = "TEXT"
    VIDEO = "VIDEO"
    PDF = "PDF"
    SLIDES = "SLIDES"
    VOICE_NOTE = "VOICE_NOTE"


class AnalysisDifficulty(str, Enum):
    """Difficulty inferred for a post or catalog topic."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def card_difficulty(value: str | None, default: str = "Medium") -> str:
    """
    Normalize a difficulty label to the Easy/Medium/Hard vocabulary.

    "mixed" has no single card label and maps to Easy, which is what the
    platform has always shown for mixed mock content.
    """
    if not value:
        return default
    lowered = value.strip().lower()
    if lowered == "mixed":
        return "Easy"
    for label in CARD_DIFFICULTIES:
        if label.lower() == lowered:
            return label
    return default


@dataclass(frozen=True)
class Post:
    """A community post as supplied by the post-storage subsystem."""

    id: str
    title: str
    content: str | None = None
    type: PostType = PostType.TEXT
    created_at: datetime | None = None
    author_name: str | None = None
    categories: tuple[str, ...] = ()
    like_count: int = 0
    comment_count: int = 0

    @property
    def engagement(self) -> int:
        return self.like_count + self.comment_count

    @property
    def text(self) -> str:
        """Content with None collapsed to an empty string."""
        return self.content or ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Post:
        """
        Build a Post from a platform record.

        Accepts the nested platform shape (``author: {name}``,
        ``_count: {likes, comments}``) as well as flat keys.
        """
        author = data.get("author") or {}
        counts = data.get("_count") or {}

        raw_type = data.get("type") or PostType.TEXT.value
        try:
            post_type = PostType(str(raw_type).upper())
        except ValueError:
            post_type = PostType.TEXT

        created = data.get("createdAt", data.get("created_at"))
        if isinstance(created, str):
            try:
                created = datetime.fromisoformat(created.replace("Z", "+00:00"))
            except ValueError:
                created = None

        categories = []
        for category in data.get("categories") or []:
            if isinstance(category, dict):
                name = category.get("name") or (category.get("category") or {}).get("name")
                if name:
                    categories.append(name)
            else:
                categories.append(str(category))

        return cls(
            id=str(data.get("id", "")),
            title=data.get("title", ""),
            content=data.get("content"),
            type=post_type,
            created_at=created,
            author_name=author.get("name") if isinstance(author, dict) else data.get("author_name"),
            categories=tuple(categories),
            like_count=int(counts.get("likes", data.get("like_count", 0)) or 0),
            comment_count=int(counts.get("comments", data.get("comment_count", 0)) or 0),
        )


@dataclass(frozen=True)
class TopicDefinition:
    """A curated catalog topic used in place of live post content."""

    name: str
    description: str
    keywords: tuple[str, ...]
    knowledge_points: tuple[str, ...]
    difficulty: AnalysisDifficulty
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "keywords": list(self.keywords),
            "knowledgePoints": list(self.knowledge_points),
            "difficulty": self.difficulty.value,
            "category": self.category,
        }


@dataclass
class TopicAnalysis:
    """Topics, knowledge points, difficulty and category derived from text."""

    main_topics: list[str] = field(default_factory=list)
    knowledge_points: list[str] = field(default_factory=list)
    difficulty: AnalysisDifficulty = AnalysisDifficulty.INTERMEDIATE
    category: str = "General Programming"

    def to_dict(self) -> dict[str, Any]:
        return {
            "mainTopics": list(self.main_topics),
            "knowledgePoints": list(self.knowledge_points),
            "difficulty": self.difficulty.value,
            "category": self.category,
        }


@dataclass
class ProcessedPost:
    """A post enriched with analysis, summary and engagement for the enhanced prompt."""

    post: Post
    analysis: TopicAnalysis
    summary: str
    kind: str
    author: str
    engagement: int


@dataclass
class Flashcard:
    """A question/answer pair with category, difficulty and source attribution."""

    id: str
    question: str
    answer: str
    category: str
    difficulty: str
    source: str
    post_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "category": self.category,
            "difficulty": self.difficulty,
            "source": self.source,
        }
        if self.post_id is not None:
            data["postId"] = self.post_id
        return data

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        index: int = 0,
        source_default: str = "",
        category_default: str = "General",
    ) -> Flashcard:
        """
        Build a Flashcard from model output.

        Raises:
            ValueError: question or answer is missing
        """
        question = str(data.get("question") or "").strip()
        answer = str(data.get("answer") or "").strip()
        if not question or not answer:
            raise ValueError("flashcard requires both question and answer")

        post_id = data.get("postId", data.get("post_id"))
        return cls(
            id=str(data.get("id") or index + 1),
            question=question,
            answer=answer,
            category=str(data.get("category") or category_default),
            difficulty=card_difficulty(data.get("difficulty")),
            source=str(data.get("source") or source_default),
            post_id=str(post_id) if post_id is not None else None,
        )


@dataclass
class QuizQuestion:
    """A four-option multiple-choice item with explanation and source attribution."""

    id: str
    question: str
    options: list[str]
    correct_answer: int
    explanation: str
    category: str
    difficulty: str
    source: str
    post_id: str | None = None

    def __post_init__(self):
        if len(self.options) != QUIZ_OPTION_COUNT:
            raise ValueError(
                f"quiz question needs exactly {QUIZ_OPTION_COUNT} options, got {len(self.options)}"
            )
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(f"correct answer index {self.correct_answer} out of range")

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "category": self.category,
            "difficulty": self.difficulty,
            "source": self.source,
        }
        if self.post_id is not None:
            data["postId"] = self.post_id
        return data

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        index: int = 0,
        source_default: str = "",
        category_default: str = "General",
    ) -> QuizQuestion:
        """
        Build a QuizQuestion from model output.

        Raises:
            ValueError: missing question, wrong option count, or bad answer index
        """
        question = str(data.get("question") or "").strip()
        if not question:
            raise ValueError("quiz question text is missing")

        options = data.get("options")
        if not isinstance(options, list):
            raise ValueError("quiz options must be a list")

        correct = data.get("correctAnswer", data.get("correct_answer"))
        if isinstance(correct, bool) or not isinstance(correct, int):
            raise ValueError("correctAnswer must be an integer index")

        post_id = data.get("postId", data.get("post_id"))
        return cls(
            id=str(data.get("id") or index + 1),
            question=question,
            options=[str(option) for option in options],
            correct_answer=correct,
            explanation=str(data.get("explanation") or ""),
            category=str(data.get("category") or category_default),
            difficulty=card_difficulty(data.get("difficulty")),
            source=str(data.get("source") or source_default),
            post_id=str(post_id) if post_id is not None else None,
        )


@dataclass
class LearningContent:
    """Combined output of one generation request."""

    flashcards: list[Flashcard] = field(default_factory=list)
    quiz: list[QuizQuestion] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "flashcards": [card.to_dict() for card in self.flashcards],
            "quiz": [question.to_dict() for question in self.quiz],
        }
