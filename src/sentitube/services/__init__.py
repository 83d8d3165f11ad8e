"""Services for SentiTube."""

from .llm import LLMServiceFactory
from .youtube_client import YouTubeService
from .analyzer import SentimentAnalyzer
from .dashboard import DashboardController

__all__ = [
    "LLMServiceFactory",
    "YouTubeService",
    "SentimentAnalyzer",
    "DashboardController",
]
