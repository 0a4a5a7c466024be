"""Community-level features: daily summaries, post categories, related resources."""

from .categorizer import POST_CATEGORIES, categorize_by_keywords, categorize_post, parse_categories
from .resources import Resource, find_relevant_resources
from .summary import CommunityStats, compute_stats, generate_daily_summary, simple_summary

__all__ = [
    "POST_CATEGORIES",
    "categorize_by_keywords",
    "categorize_post",
    "parse_categories",
    "Resource",
    "find_relevant_resources",
    "CommunityStats",
    "compute_stats",
    "generate_daily_summary",
    "simple_summary",
]
