"""
Topic Analyzer.

Extracts the structure the prompt templates need from free text:
- main topics: taxonomy keywords found in the text (max 5)
- knowledge points: technical nouns picked out by concept patterns (max 8)
- difficulty: weighted keyword counting, leaning toward harder content
- category: first matching domain bucket

Topic order follows the taxonomy, not relevance. A post that mentions ten
keywords keeps whichever five the taxonomy lists first.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .models import (
    AnalysisDifficulty,
    Post,
    ProcessedPost,
    TopicAnalysis,
    TopicDefinition,
)
from .taxonomy import (
    ADVANCED_CONCEPTS,
    ADVANCED_TOPICS,
    BEGINNER_TOPICS,
    CATEGORY_BUCKETS,
    CONCEPT_PATTERNS,
    DEFAULT_CATEGORY,
    DEFAULT_POST_KIND,
    POST_KIND_RULES,
    all_topic_keywords,
)

MAX_TOPICS = 5
MAX_KNOWLEDGE_POINTS = 8
SUMMARY_SENTENCES = 2
MIN_SUMMARY_SENTENCE_CHARS = 20

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_TOPIC_KEYWORDS = all_topic_keywords()


def _dedupe(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))


def extract_topics(title: str, content: str) -> list[str]:
    """Return up to five taxonomy keywords found in the title and content."""
    text = f"{title} {content}".lower()
    found = [keyword for keyword in _TOPIC_KEYWORDS if keyword in text]
    return _dedupe(found)[:MAX_TOPICS]


def extract_knowledge_points(title: str, content: str) -> list[str]:
    """Return up to eight lower-cased concept nouns matched in the raw text."""
    text = f"{title} {content}"
    points: list[str] = []
    for pattern in CONCEPT_PATTERNS:
        for match in pattern.finditer(text):
            tokens = match.group(0).split()
            if tokens:
                points.append(tokens[-1].lower())
    return _dedupe(points)[:MAX_KNOWLEDGE_POINTS]


def infer_difficulty(
    topics: Sequence[str],
    knowledge_points: Sequence[str] = (),
) -> AnalysisDifficulty:
    """
    Classify difficulty from topics and knowledge points.

    Beginner needs more than three beginner terms and a majority over
    advanced terms. Advanced needs only two advanced hits.
    """
    merged = " ".join([*topics, *knowledge_points]).lower()

    advanced_count = sum(1 for term in ADVANCED_TOPICS if term in merged) + sum(
        1 for term in ADVANCED_CONCEPTS if term in merged
    )
    beginner_count = sum(1 for term in BEGINNER_TOPICS if term in merged)

    if beginner_count > advanced_count and beginner_count > 3:
        return AnalysisDifficulty.BEGINNER
    if advanced_count > 1:
        return AnalysisDifficulty.ADVANCED
    return AnalysisDifficulty.INTERMEDIATE


def categorize(topics: Sequence[str]) -> str:
    """Return the first domain bucket that contains any of the topics."""
    for category, bucket in CATEGORY_BUCKETS:
        if any(topic in bucket for topic in topics):
            return category
    return DEFAULT_CATEGORY


def summarize(content: str) -> str:
    """Extractive summary: the first two sentences with some substance."""
    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(content)]
    sentences = [s for s in sentences if len(s) > MIN_SUMMARY_SENTENCE_CHARS]
    if not sentences:
        return ""
    return ". ".join(sentences[:SUMMARY_SENTENCES]) + "."


def classify_post_kind(post: Post) -> str:
    """Label a post as Documentation, Tutorial, Q&A, Project, News, etc."""
    content = post.text.lower()
    for kind, post_types, words in POST_KIND_RULES:
        if post.type.value in post_types or any(word in content for word in words):
            return kind
    return DEFAULT_POST_KIND


class TopicAnalyzer:
    """Builds TopicAnalysis records from posts, free text, or catalog topics."""

    def analyze(self, title: str, content: str | None) -> TopicAnalysis:
        """Analyze a title and (possibly empty) body."""
        body = content or ""
        topics = extract_topics(title, body)
        knowledge_points = extract_knowledge_points(title, body)
        return TopicAnalysis(
            main_topics=topics,
            knowledge_points=knowledge_points,
            difficulty=infer_difficulty(topics, knowledge_points),
            category=categorize(topics),
        )

    def analyze_post(self, post: Post) -> TopicAnalysis:
        return self.analyze(post.title, post.content)

    def analyze_posts(self, posts: Sequence[Post]) -> list[TopicAnalysis]:
        return [self.analyze_post(post) for post in posts]

    def analyze_definition(self, topic: TopicDefinition) -> TopicAnalysis:
        """Catalog topics already carry curated structure; trim it to the usual caps."""
        return TopicAnalysis(
            main_topics=list(topic.keywords[:MAX_TOPICS]),
            knowledge_points=list(topic.knowledge_points[:MAX_KNOWLEDGE_POINTS]),
            difficulty=topic.difficulty,
            category=topic.category,
        )

    def process_post(self, post: Post) -> ProcessedPost:
        """Full per-post analysis used by the enhanced strategy."""
        return ProcessedPost(
            post=post,
            analysis=self.analyze_post(post),
            summary=summarize(post.text),
            kind=classify_post_kind(post),
            author=post.author_name or "Unknown",
            engagement=post.engagement,
        )

    def process_posts(self, posts: Sequence[Post]) -> list[ProcessedPost]:
        return [self.process_post(post) for post in posts]
