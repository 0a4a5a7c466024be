"""
Configuration settings for the studyhub learning-content pipeline.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # AI Integration (Gemini)
    # ========================================
    gemini_api_key: str | None = Field(
        default=None,
        description="Google Generative AI (Gemini) API key",
    )
    ai_model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model used for flashcard, quiz and summary generation",
    )
    ai_max_output_tokens: int = Field(
        default=2048,
        description="Upper bound on generated tokens per call",
    )
    ai_temperature: float = Field(
        default=0.7,
        description="Sampling temperature (held constant across calls)",
    )
    ai_top_p: float = Field(
        default=0.8,
        description="Nucleus sampling threshold",
    )
    ai_top_k: int = Field(
        default=40,
        description="Top-k sampling cutoff",
    )
    generation_timeout_seconds: float | None = Field(
        default=None,
        description="Optional timeout for a single model call (None = rely on the SDK)",
    )

    # ========================================
    # Result Cache
    # ========================================
    cache_ttl_seconds: float = Field(
        default=300.0,
        description="How long a cached generation stays valid (5 minutes)",
    )
    cache_max_entries: int = Field(
        default=50,
        description="Entry count above which expired entries are swept",
    )
    cache_bucket_seconds: int = Field(
        default=60,
        description="Width of the time bucket folded into cache keys",
    )

    # ========================================
    # Generation Defaults
    # ========================================
    default_quiz_count: int = Field(
        default=3,
        description="Quiz questions generated when the caller does not specify",
    )
    default_flashcard_count: int = Field(
        default=3,
        description="Flashcards generated when the caller does not specify",
    )
    max_quiz_count: int = Field(
        default=20,
        description="Upper clamp for quiz questions (enforced by callers)",
    )
    max_flashcard_count: int = Field(
        default=30,
        description="Upper clamp for flashcards (enforced by callers)",
    )
    post_excerpt_chars: int = Field(
        default=200,
        description="Characters of post content included in basic prompts",
    )
    max_prompt_posts: int = Field(
        default=10,
        description="Maximum number of posts rendered into a single prompt",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    def has_ai_configured(self) -> bool:
        """Check if a Gemini API key is set."""
        return bool(self.gemini_api_key)

    def get_generation_config(self) -> dict[str, Any]:
        """Get the fixed sampling configuration passed to every model call."""
        return {
            "max_output_tokens": self.ai_max_output_tokens,
            "temperature": self.ai_temperature,
            "top_p": self.ai_top_p,
            "top_k": self.ai_top_k,
        }

    def get_cache_config(self) -> dict[str, Any]:
        """Get result cache configuration as a dictionary."""
        return {
            "ttl_seconds": self.cache_ttl_seconds,
            "max_entries": self.cache_max_entries,
            "bucket_seconds": self.cache_bucket_seconds,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
