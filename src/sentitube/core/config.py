"""Configuration management for SentiTube."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # YouTube Data API
    youtube_api_key: str = Field("", description="YouTube Data API v3 key")

    # Text-generation providers
    gemini_api_key: str = Field("", description="Gemini API key")
    openai_api_key: str = Field("", description="OpenAI API key")
    OPENAI_API_KEY: str = Field("", description="OpenAI API key (alternative naming)")
    llm_provider: str = Field("auto", description="auto, gemini, openai or fallback")
    gemini_model: str = Field("gemini-2.0-flash", description="Gemini model for classification")
    openai_model: str = Field("gpt-4o-mini", description="OpenAI model for classification")

    @property
    def effective_openai_key(self) -> str:
        """Get the effective OpenAI API key from either field."""
        return self.openai_api_key or self.OPENAI_API_KEY

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Fetch settings
    max_comments: int = Field(15, description="Top-level comments fetched per video")
    dislike_ratio: float = Field(0.05, description="Estimated dislikes as a share of likes")
    show_estimated_dislikes: bool = Field(True, description="Show the estimated dislike count")

    # Analysis settings
    analysis_workers: int = Field(1, description="Concurrent classification calls (1 = sequential)")
    llm_timeout: float = Field(30.0, description="Per-call timeout in seconds")
    llm_max_retries: int = Field(1, description="Attempts per classification call")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    # Reply cache
    llm_cache_enabled: bool = Field(False, description="Cache raw LLM replies on disk")
    cache_dir: str = Field(".cache/llm_cache", description="Reply cache directory")
    cache_ttl_hours: int = Field(24, description="Reply cache time-to-live in hours")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
