"""Constants and configuration values for SentiTube."""

from textwrap import dedent


# Fetch Constants
class FetchConstants:
    """Constants related to YouTube Data API requests."""

    STATS_PARTS = "statistics,snippet"  # videos().list parts
    COMMENT_PARTS = "snippet"  # commentThreads().list parts
    COMMENT_ORDER = "relevance"  # top comments first
    COMMENT_TEXT_FORMAT = "plainText"  # textDisplay without HTML markup
    MAX_COMMENTS = 15  # comment page size, no pagination
    DISLIKE_RATIO = 0.05  # estimated dislikes as a share of likes


# Prompt Constants
class PromptConstants:
    """Constants for LLM prompts and templates."""

    SENTIMENT_PROMPT = dedent("""
    Analyze this YouTube comment and determine if the commenter agrees, disagrees, or is neutral about the video content. Return ONLY a JSON object in this exact format: {{"sentiment": "agree"|"disagree"|"neutral", "analysis": "brief explanation"}}. Comment: "{comment}"
    """).strip()

    MAX_TOKENS = 150  # replies are one short JSON object
    TEMPERATURE = 0.2  # low temperature for consistent labels


# Fallback analysis messages
class AnalysisMessages:
    """Rationale strings attached to neutral fallbacks."""

    INVALID_FORMAT = "Invalid response format"
    PARSE_ERROR = "Error parsing response"
    CALL_ERROR = "Error in analysis"


# User-facing error messages
class ErrorMessages:
    """Banner text shown by the dashboard and CLI."""

    INVALID_URL = "Invalid YouTube URL. Please enter a valid YouTube video URL."
    NOT_FOUND = "Video not found. Please check the URL."
    API_KEY = "API Key error. Please check your YouTube API key."
    NETWORK = "Error fetching video data: {message}"
    COMMENTS = "Error fetching comments. {message}"
    ANALYSIS = "Error analyzing comments: {message}"


# UI Constants
class UIConstants:
    """Constants for the dashboard."""

    PAGE_TITLE = "SentiTube"
    URL_PLACEHOLDER = "https://youtube.com/watch?v=..."
    MONTH_FORMAT = "%b %Y"  # e.g. "Jan 2024"

    SENTIMENT_COLORS = {
        "agree": "#4CAF50",
        "disagree": "#F44336",
        "neutral": "#9E9E9E",
    }
    LIKE_COLOR = "#22c55e"
    DISLIKE_COLOR = "#ef4444"


# Cache Constants
class CacheConstants:
    """Constants for caching behavior."""

    CACHE_KEY_LENGTH = 8  # length of cache key for logging


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
