"""SentiTube - YouTube comment sentiment dashboard."""

__version__ = "1.0.0"
__author__ = "SentiTube Team"

from .core.models import *
from .core.config import settings
from .services.llm import LLMServiceFactory
from .services.youtube_client import YouTubeService
from .services.analyzer import SentimentAnalyzer
from .services.dashboard import DashboardController

__all__ = [
    "settings",
    "LLMServiceFactory",
    "YouTubeService",
    "SentimentAnalyzer",
    "DashboardController",
]
