"""Related learning resources suggested by the model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from ..generation.gemini_client import GeminiClient
from ..generation.prompts import RESOURCES_PROMPT, build_prompt


@dataclass
class Resource:
    title: str
    description: str = ""
    url: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Resource:
        title = str(data.get("title") or "").strip()
        if not title:
            raise ValueError("resource requires a title")
        return cls(
            title=title,
            description=str(data.get("description") or ""),
            url=str(data.get("url") or ""),
            type=str(data.get("type") or ""),
        )


async def find_relevant_resources(
    topic: str,
    client: GeminiClient | None = None,
) -> list[Resource]:
    """Ask the model for 3-5 resources on a topic. Any failure yields an empty list."""
    client = client or GeminiClient()
    if not client.is_configured:
        logger.debug("No Gemini API key configured, no resources suggested")
        return []

    result = await client.generate_json(build_prompt(RESOURCES_PROMPT, {"topic": topic}))
    if not result.success:
        logger.warning(f"Resource lookup failed for {topic!r}: {result.error}")
        return []

    resources = []
    for entry in result.items:
        if not isinstance(entry, dict):
            continue
        try:
            resources.append(Resource.from_dict(entry))
        except ValueError as e:
            logger.debug(f"Skipping resource: {e}")
    return resources
