"""
Daily Community Summary.

Builds a text digest of a community's posts for the day. The model writes a
structured summary from post excerpts plus engagement statistics. Without an
API key, or if the call fails, a one-paragraph template summary is returned
instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from ..generation.gemini_client import GeminiClient
from ..generation.prompts import DAILY_SUMMARY_PROMPT, build_prompt
from ..learning.models import Post

SUMMARY_EXCERPT_CHARS = 200
TOP_POST_COUNT = 3

SUMMARY_KEYWORDS = (
    "AI",
    "machine learning",
    "deep learning",
    "neural networks",
    "data science",
    "programming",
)


@dataclass
class CommunityStats:
    """Engagement figures for a set of posts."""

    post_count: int = 0
    author_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    top_posts: list[Post] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "postCount": self.post_count,
            "authorCount": self.author_count,
            "likeCount": self.like_count,
            "commentCount": self.comment_count,
            "topPosts": [post.title for post in self.top_posts],
        }


def compute_stats(posts: Sequence[Post]) -> CommunityStats:
    """Count posts, distinct authors, likes and comments; rank the top posts by engagement."""
    authors = {post.author_name for post in posts if post.author_name}
    ranked = sorted(posts, key=lambda post: post.engagement, reverse=True)
    return CommunityStats(
        post_count=len(posts),
        author_count=len(authors),
        like_count=sum(post.like_count for post in posts),
        comment_count=sum(post.comment_count for post in posts),
        top_posts=ranked[:TOP_POST_COUNT],
    )


def extract_summary_keywords(text: str) -> list[str]:
    """Theme keywords present in the text, in fixed order."""
    lowered = text.lower()
    return [keyword for keyword in SUMMARY_KEYWORDS if keyword.lower() in lowered]


def simple_summary(posts: Sequence[Post]) -> str:
    """Template summary used when the model is unavailable."""
    if not posts:
        return "No posts were shared in the community today."

    titles = ", ".join(post.title for post in posts)
    themes = extract_summary_keywords(" ".join(f"{post.title} {post.text}" for post in posts))
    return (
        f"Today in the AI learning community, we discussed: {titles}. "
        f"{len(posts)} posts were shared covering various AI topics. "
        f"Key themes included: {', '.join(themes)}."
    )


def _render_posts(posts: Sequence[Post]) -> str:
    return "\n\n".join(
        f"• {post.title} ({post.type.value}): {post.text[:SUMMARY_EXCERPT_CHARS]}... "
        f"[{post.like_count} likes, {post.comment_count} comments]"
        for post in posts
    )


async def generate_daily_summary(
    posts: Sequence[Post],
    client: GeminiClient | None = None,
) -> str:
    """
    Summarize a day's posts.

    Args:
        posts: The community's posts for the day
        client: Model client (settings-backed if not provided)

    Returns:
        Model-written summary, or the template summary as a fallback
    """
    client = client or GeminiClient()
    if not posts:
        return simple_summary(posts)

    if not client.is_configured:
        logger.debug("No Gemini API key configured, using simple summary")
        return simple_summary(posts)

    stats = compute_stats(posts)
    prompt = build_prompt(
        DAILY_SUMMARY_PROMPT,
        {
            "post_count": stats.post_count,
            "author_count": stats.author_count,
            "like_count": stats.like_count,
            "comment_count": stats.comment_count,
            "top_posts": ", ".join(post.title for post in stats.top_posts),
            "posts": _render_posts(posts),
        },
    )

    result = await client.generate_text(prompt)
    if not result.success:
        logger.warning(f"Daily summary generation failed, using simple summary: {result.error}")
        return simple_summary(posts)
    return result.text or simple_summary(posts)
