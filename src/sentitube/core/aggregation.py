"""Aggregation of video statistics and comment sentiment."""

import logging
import math
from collections import Counter
from typing import Dict, List

from .constants import FetchConstants, UIConstants
from .models import AnalyzedComment, MonthlyStats, Sentiment, SentimentStats, VideoStats

logger = logging.getLogger(__name__)


def estimate_dislikes(like_count: int, ratio: float = FetchConstants.DISLIKE_RATIO) -> int:
    """Estimate a dislike count from likes (the API no longer reports dislikes)."""
    return int(math.floor(max(0, like_count) * ratio))


def _percent(count: int, total: int) -> int:
    # halves round up, unlike round()
    return int(math.floor(count / total * 100 + 0.5))


def compute_sentiment_stats(analyzed: List[AnalyzedComment]) -> SentimentStats:
    """Percentage of each sentiment in the analyzed set.

    Each share is rounded independently, so the three values sum to roughly
    100. An empty set yields all zeros.
    """
    total = len(analyzed)
    if total == 0:
        return SentimentStats()

    counts = Counter(item.sentiment for item in analyzed)
    stats = SentimentStats(
        agree=_percent(counts[Sentiment.AGREE], total),
        disagree=_percent(counts[Sentiment.DISAGREE], total),
        neutral=_percent(counts[Sentiment.NEUTRAL], total),
    )
    logger.debug(f"Sentiment stats over {total} comments: {stats.as_dict()}")
    return stats


def month_label(item: AnalyzedComment) -> str:
    return item.published_at.strftime(UIConstants.MONTH_FORMAT)


def compute_monthly_stats(analyzed: List[AnalyzedComment]) -> List[MonthlyStats]:
    """Count sentiments per calendar month of publication.

    Months appear in the order they are first seen in ``analyzed``.
    """
    buckets: Dict[str, MonthlyStats] = {}
    for item in analyzed:
        label = month_label(item)
        bucket = buckets.get(label)
        if bucket is None:
            bucket = buckets[label] = MonthlyStats(month=label)
        field_name = item.sentiment.value
        setattr(bucket, field_name, getattr(bucket, field_name) + 1)
    return list(buckets.values())


def engagement_rate(stats: VideoStats) -> float:
    """Likes plus dislikes as a percentage of views."""
    views = stats.view_count or 1
    return (stats.like_count + stats.dislike_count) / views * 100


def likes_vs_dislikes(stats: VideoStats, include_dislikes: bool = True) -> List[dict]:
    """Chart rows for the likes vs dislikes bar chart."""
    rows = [{"name": "Likes", "value": stats.like_count, "color": UIConstants.LIKE_COLOR}]
    if include_dislikes:
        name = "Dislikes (est.)" if stats.dislikes_estimated else "Dislikes"
        rows.append({"name": name, "value": stats.dislike_count, "color": UIConstants.DISLIKE_COLOR})
    return rows
