"""Exceptions raised by the learning-content pipeline."""

from __future__ import annotations


class StudyhubError(Exception):
    """Base class for studyhub errors."""


class TopicNotFoundError(StudyhubError, LookupError):
    """A predefined topic name did not match any catalog entry."""

    def __init__(self, topic_name: str):
        self.topic_name = topic_name
        super().__init__(f'Topic "{topic_name}" not found')


class ContentGenerationError(StudyhubError):
    """Flashcard/quiz generation aborted by an unexpected error."""
