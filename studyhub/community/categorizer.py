"""Post categorization into the platform's six content categories."""

from __future__ import annotations

from loguru import logger

from ..generation.gemini_client import GeminiClient
from ..generation.prompts import CATEGORIZE_PROMPT, build_prompt

POST_CATEGORIES = (
    "AI Course",
    "Essay",
    "Technical Document",
    "Discussion",
    "Resource",
    "News",
)

DEFAULT_POST_CATEGORY = "Discussion"

# First rule with a matching word wins.
CATEGORY_KEYWORD_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("AI Course", ("course", "tutorial", "learn", "ai")),
    ("Essay", ("essay", "opinion", "analysis")),
    ("Technical Document", ("code", "technical", "documentation", "programming")),
    ("Resource", ("resource", "tool", "link", "useful")),
    ("News", ("news", "update", "announcement")),
)


def categorize_by_keywords(title: str, content: str | None) -> list[str]:
    """Keyword-rule category for a post. Matching is plain substring, so "ai" hits "explain"."""
    text = f"{title} {content or ''}".lower()
    for category, words in CATEGORY_KEYWORD_RULES:
        if any(word in text for word in words):
            return [category]
    return [DEFAULT_POST_CATEGORY]


def parse_categories(answer: str) -> list[str]:
    """Known categories in a comma-separated model answer, deduplicated in order."""
    categories: list[str] = []
    for entry in answer.split(","):
        name = entry.strip()
        if name in POST_CATEGORIES and name not in categories:
            categories.append(name)
    return categories


async def categorize_post(
    title: str,
    content: str | None,
    client: GeminiClient | None = None,
) -> list[str]:
    """
    Assign a post its content categories.

    The model may answer with a comma-separated list. Entries that are
    exactly one of POST_CATEGORIES are kept; if none are, keyword rules
    decide.
    """
    client = client or GeminiClient()
    if not client.is_configured:
        logger.debug("No Gemini API key configured, categorizing by keywords")
        return categorize_by_keywords(title, content)

    prompt = build_prompt(
        CATEGORIZE_PROMPT,
        {"categories": ", ".join(POST_CATEGORIES), "title": title, "content": content or ""},
    )
    result = await client.generate_text(prompt)
    if not result.success:
        logger.warning(f"Post categorization failed, using keyword rules: {result.error}")
        return categorize_by_keywords(title, content)

    categories = parse_categories(result.text or "")
    if categories:
        return categories

    logger.debug(f"Model returned no known category in {result.text!r}, using keyword rules")
    return categorize_by_keywords(title, content)
