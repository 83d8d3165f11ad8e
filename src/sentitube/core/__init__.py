"""Core modules for SentiTube."""

from .models import (
    AnalyzedComment,
    Comment,
    MonthlyStats,
    Sentiment,
    SentimentReport,
    SentimentStats,
    VideoReport,
    VideoStats,
)
from .config import settings
from .errors import (
    ApiKeyError,
    ErrorCategory,
    FetchNetworkError,
    InvalidVideoUrlError,
    SentiTubeError,
    VideoNotFoundError,
)
from .urls import extract_video_id, require_video_id
from .aggregation import (
    compute_monthly_stats,
    compute_sentiment_stats,
    engagement_rate,
    estimate_dislikes,
    likes_vs_dislikes,
)

__all__ = [
    "settings",
    "Sentiment",
    "VideoStats",
    "Comment",
    "AnalyzedComment",
    "SentimentStats",
    "MonthlyStats",
    "VideoReport",
    "SentimentReport",
    "ErrorCategory",
    "SentiTubeError",
    "InvalidVideoUrlError",
    "VideoNotFoundError",
    "ApiKeyError",
    "FetchNetworkError",
    "extract_video_id",
    "require_video_id",
    "estimate_dislikes",
    "compute_sentiment_stats",
    "compute_monthly_stats",
    "engagement_rate",
    "likes_vs_dislikes",
]
