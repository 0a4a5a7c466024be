"""
Mock Learning Content.

Deterministic, offline stand-ins for model output. Used directly when no API
key is configured and as the fallback whenever a model call fails.

Three pools:
- baseline: a fixed set of five flashcards and five quiz items (basic strategy)
- per-post: one item per post, built from its title (enhanced, simplified)
- topic: five templated items around a topic name (predefined)

Every builder returns min(count, available) items. Nothing is padded or
repeated to reach the requested count.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Union

from ..errors import TopicNotFoundError
from ..learning.models import Flashcard, Post, QuizQuestion, card_difficulty
from ..learning.topics import find_topic

MockSource = Union[Sequence[Post], str]

BASELINE_SOURCE = "AI Learning Community"
PER_POST_CATEGORY = "General"
TOPIC_FALLBACK_CATEGORY = "AI/ML"

PER_POST_QUIZ_OPTIONS = (
    "Technical implementation",
    "Theoretical concepts",
    "Practical applications",
    "All of the above",
)


# =============================================================================
# Baseline Pool
# =============================================================================

BASELINE_FLASHCARDS = (
    Flashcard(
        id="1",
        question="What is machine learning?",
        answer="Machine learning is a subset of AI that enables computers to learn from data without explicit programming.",
        category="AI",
        difficulty="Easy",
        source=BASELINE_SOURCE,
    ),
    Flashcard(
        id="2",
        question="What is the difference between supervised and unsupervised learning?",
        answer="Supervised learning uses labeled data, while unsupervised learning finds patterns without labels.",
        category="Machine Learning",
        difficulty="Medium",
        source=BASELINE_SOURCE,
    ),
    Flashcard(
        id="3",
        question="What is overfitting in machine learning?",
        answer="Overfitting occurs when a model learns training data too well and performs poorly on new data.",
        category="Machine Learning",
        difficulty="Hard",
        source=BASELINE_SOURCE,
    ),
    Flashcard(
        id="4",
        question="What is a neural network?",
        answer="A neural network is a computing system inspired by biological neural networks, consisting of interconnected nodes.",
        category="Deep Learning",
        difficulty="Medium",
        source=BASELINE_SOURCE,
    ),
    Flashcard(
        id="5",
        question="What is the purpose of activation functions?",
        answer="Activation functions introduce non-linearity to neural networks, enabling them to learn complex patterns.",
        category="Deep Learning",
        difficulty="Hard",
        source=BASELINE_SOURCE,
    ),
)

BASELINE_QUIZ = (
    QuizQuestion(
        id="1",
        question="What is the primary goal of machine learning?",
        options=[
            "To replace human intelligence completely",
            "To enable computers to learn from data",
            "To make computers faster",
            "To reduce data storage needs",
        ],
        correct_answer=1,
        explanation="Machine learning aims to enable computers to learn patterns from data and make predictions.",
        category="AI",
        difficulty="Easy",
        source=BASELINE_SOURCE,
    ),
    QuizQuestion(
        id="2",
        question="Which type of learning uses labeled training data?",
        options=[
            "Unsupervised learning",
            "Reinforcement learning",
            "Supervised learning",
            "Deep learning",
        ],
        correct_answer=2,
        explanation="Supervised learning uses labeled training data where correct answers are provided.",
        category="Machine Learning",
        difficulty="Medium",
        source=BASELINE_SOURCE,
    ),
    QuizQuestion(
        id="3",
        question="What technique helps prevent overfitting in neural networks?",
        options=[
            "Increasing the learning rate",
            "Adding more layers",
            "Using dropout regularization",
            "Training for more epochs",
        ],
        correct_answer=2,
        explanation="Dropout regularization randomly sets neurons to zero, preventing overfitting.",
        category="Deep Learning",
        difficulty="Hard",
        source=BASELINE_SOURCE,
    ),
    QuizQuestion(
        id="4",
        question="What is the purpose of backpropagation?",
        options=[
            "To initialize neural network weights",
            "To update weights based on prediction errors",
            "To select the best features",
            "To normalize input data",
        ],
        correct_answer=1,
        explanation="Backpropagation updates network weights by propagating errors backward through the network.",
        category="Deep Learning",
        difficulty="Medium",
        source=BASELINE_SOURCE,
    ),
    QuizQuestion(
        id="5",
        question="What is the vanishing gradient problem?",
        options=[
            "Gradients become too large during training",
            "Gradients become too small in deep networks",
            "Gradients change direction frequently",
            "Gradients are not calculated correctly",
        ],
        correct_answer=1,
        explanation="The vanishing gradient problem occurs when gradients become too small in deep networks, slowing learning.",
        category="Deep Learning",
        difficulty="Hard",
        source=BASELINE_SOURCE,
    ),
)


def baseline_flashcards(source: MockSource, count: int) -> list[Flashcard]:
    """First `count` cards of the fixed pool. The source is not consulted."""
    return [replace(card) for card in BASELINE_FLASHCARDS[: max(count, 0)]]


def baseline_quiz(source: MockSource, count: int, difficulty: str = "mixed") -> list[QuizQuestion]:
    """Fixed quiz pool, filtered to one difficulty unless "mixed"."""
    pool = list(BASELINE_QUIZ)
    if difficulty != "mixed":
        pool = [q for q in pool if q.difficulty.lower() == difficulty.lower()]
    return [replace(q, options=list(q.options)) for q in pool[: max(count, 0)]]


# =============================================================================
# Per-Post Pool
# =============================================================================


def _posts(source: MockSource) -> Sequence[Post]:
    return source if not isinstance(source, str) else ()


def post_flashcards(source: MockSource, count: int) -> list[Flashcard]:
    """One card per post, attributed to the post (enhanced strategy)."""
    posts = _posts(source)
    return [
        Flashcard(
            id=f"mock_flashcard_{i + 1}",
            question=f'What is the main topic discussed in "{post.title}"?',
            answer=f"This post discusses {post.title} and covers various aspects of the topic.",
            category=PER_POST_CATEGORY,
            difficulty="Easy",
            source=post.title,
            post_id=post.id,
        )
        for i, post in enumerate(posts[: max(count, 0)])
    ]


def post_quiz(source: MockSource, count: int, difficulty: str = "mixed") -> list[QuizQuestion]:
    """One question per post, attributed to the post (enhanced strategy)."""
    posts = _posts(source)
    return [
        QuizQuestion(
            id=f"mock_quiz_{i + 1}",
            question=f'What is the primary focus of "{post.title}"?',
            options=list(PER_POST_QUIZ_OPTIONS),
            correct_answer=3,
            explanation=(
                f'The post "{post.title}" covers multiple aspects including technical '
                "implementation, theoretical concepts, and practical applications."
            ),
            category=PER_POST_CATEGORY,
            difficulty=card_difficulty(difficulty),
            source=post.title,
            post_id=post.id,
        )
        for i, post in enumerate(posts[: max(count, 0)])
    ]


def discussion_flashcards(source: MockSource, count: int) -> list[Flashcard]:
    """One card per post, framed as a discussion topic (simplified strategy)."""
    posts = _posts(source)
    return [
        Flashcard(
            id=f"mock_flashcard_{i + 1}",
            question=f'What is the main topic discussed in "{post.title}"?',
            answer=f"This discussion covers the topic of {post.title} and related concepts.",
            category=PER_POST_CATEGORY,
            difficulty="Easy",
            source=post.title,
        )
        for i, post in enumerate(posts[: max(count, 0)])
    ]


def discussion_quiz(source: MockSource, count: int, difficulty: str = "mixed") -> list[QuizQuestion]:
    """One question per post, framed as a discussion topic (simplified strategy)."""
    posts = _posts(source)
    return [
        QuizQuestion(
            id=f"mock_quiz_{i + 1}",
            question=f'What is the primary focus of "{post.title}"?',
            options=list(PER_POST_QUIZ_OPTIONS),
            correct_answer=3,
            explanation=(
                f'The discussion "{post.title}" covers multiple aspects including technical '
                "implementation, theoretical concepts, and practical applications."
            ),
            category=PER_POST_CATEGORY,
            difficulty=card_difficulty(difficulty),
            source=post.title,
        )
        for i, post in enumerate(posts[: max(count, 0)])
    ]


# =============================================================================
# Topic Pool
# =============================================================================

TOPIC_FLASHCARD_TEMPLATES = (
    (
        "What is the core architecture of {topic}?",
        "The core architecture involves transformer-based models with attention mechanisms for processing sequential data.",
    ),
    (
        "How does fine-tuning work in {topic}?",
        "Fine-tuning adapts pre-trained models to specific tasks by updating model parameters on task-specific data.",
    ),
    (
        "What are the main challenges in {topic} deployment?",
        "Key challenges include computational requirements, memory usage, latency optimization, and maintaining model quality.",
    ),
    (
        "How should results be evaluated in {topic}?",
        "Combine automated metrics with human review, and test against held-out and adversarial cases before release.",
    ),
    (
        "What are common pitfalls when applying {topic} in production?",
        "Typical pitfalls are data drift, unmonitored quality regressions, and underestimating serving cost at scale.",
    ),
)

TOPIC_QUIZ_TEMPLATES = (
    (
        "What is the primary architecture used in {topic}?",
        ("Transformer", "CNN", "RNN", "LSTM"),
        0,
        "The transformer architecture is fundamental to {topic}.",
    ),
    (
        "Which technique is most effective for improving {topic} performance?",
        ("Data augmentation", "Model pruning", "Fine-tuning", "Feature selection"),
        2,
        "Fine-tuning allows models to adapt to specific tasks in {topic}.",
    ),
    (
        "What is a common challenge in {topic} deployment?",
        ("Memory usage", "Training time", "Model size", "All of these"),
        3,
        "All these factors are important considerations for {topic} deployment.",
    ),
    (
        "Which practice best catches quality regressions in {topic} systems?",
        ("Manual spot checks", "Continuous evaluation", "Larger batch sizes", "More training epochs"),
        1,
        "Continuous evaluation against fixed benchmarks surfaces regressions in {topic} early.",
    ),
    (
        "What usually limits {topic} workloads at inference time?",
        ("Disk space", "Keyboard latency", "Compute and memory bandwidth", "Source code size"),
        2,
        "Inference for {topic} workloads is typically bound by compute and memory bandwidth.",
    ),
)


def _resolve_topic(topic_name: str) -> tuple[str, str]:
    """Source and category for a topic name, falling back to the raw name."""
    try:
        topic = find_topic(topic_name)
    except TopicNotFoundError:
        return topic_name, TOPIC_FALLBACK_CATEGORY
    return topic.name, topic.category


def topic_flashcards(source: MockSource, count: int) -> list[Flashcard]:
    """Templated cards about a predefined topic."""
    topic_name = source if isinstance(source, str) else ""
    name, category = _resolve_topic(topic_name)
    return [
        Flashcard(
            id=f"mock_flashcard_{i + 1}",
            question=question.format(topic=name),
            answer=answer,
            category=category,
            difficulty="Hard",
            source=name,
        )
        for i, (question, answer) in enumerate(TOPIC_FLASHCARD_TEMPLATES[: max(count, 0)])
    ]


def topic_quiz(source: MockSource, count: int, difficulty: str = "hard") -> list[QuizQuestion]:
    """Templated questions about a predefined topic."""
    topic_name = source if isinstance(source, str) else ""
    name, category = _resolve_topic(topic_name)
    return [
        QuizQuestion(
            id=f"mock_quiz_{i + 1}",
            question=question.format(topic=name),
            options=list(options),
            correct_answer=correct,
            explanation=explanation.format(topic=name),
            category=category,
            difficulty=card_difficulty(difficulty, default="Hard"),
            source=name,
        )
        for i, (question, options, correct, explanation) in enumerate(
            TOPIC_QUIZ_TEMPLATES[: max(count, 0)]
        )
    ]


# =============================================================================
# Builder Signatures
# =============================================================================

FlashcardBuilder = Callable[[MockSource, int], list[Flashcard]]
QuizBuilder = Callable[[MockSource, int, str], list[QuizQuestion]]

