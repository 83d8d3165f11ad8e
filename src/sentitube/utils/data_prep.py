"""Data preparation for export."""

import datetime
import json
from dataclasses import asdict
from typing import Any, Dict, Optional, Tuple

import pandas as pd

from ..core.aggregation import engagement_rate
from ..core.constants import FileConstants
from ..core.models import Sentiment, SentimentReport, VideoReport

COMMENT_COLUMNS = ["id", "author", "text", "like_count", "published_at"]
ANALYZED_COLUMNS = ["id", "author", "published_at", "like_count", "sentiment", "analysis", "text"]


def prepare_export(
    video_report: VideoReport,
    sentiment_report: Optional[SentimentReport] = None,
) -> Dict[str, Any]:
    """Prepare data for JSON export."""
    stats = video_report.stats

    comments_data = [
        {
            "id": comment.id,
            "author": comment.author,
            "text": comment.text,
            "like_count": comment.like_count,
            "published_at": comment.published_at.isoformat(),
            "author_profile_image_url": comment.author_profile_image_url,
        }
        for comment in video_report.comments
    ]

    export_data = {
        "video": {
            **asdict(stats),
            "engagement_rate": round(engagement_rate(stats), 2),
        },
        "comments": comments_data,
        "sentiment": None,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": FileConstants.EXPORT_VERSION,
        },
    }

    if sentiment_report is not None:
        export_data["sentiment"] = {
            "stats": sentiment_report.sentiment_stats.as_dict(),
            "monthly": [asdict(month) for month in sentiment_report.monthly_stats],
            "skipped": sentiment_report.skipped,
            "analyzed": [
                {"id": item.id, "sentiment": item.sentiment.value, "analysis": item.analysis}
                for item in sentiment_report.analyzed
            ],
        }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def sentiment_tables(data: Dict[str, Any]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Overall percentages and monthly counts from an exported report."""
    sentiment = data.get("sentiment") or {}
    stats = sentiment.get("stats", {})
    overall = pd.DataFrame(
        [{"sentiment": label.value, "percent": stats.get(label.value, 0)} for label in Sentiment]
    )
    monthly = pd.DataFrame(sentiment.get("monthly", []),
                           columns=["month"] + [label.value for label in Sentiment])
    return overall, monthly


def analyzed_comments_frame(data: Dict[str, Any]) -> pd.DataFrame:
    """One row per analyzed comment, joined with the fetched comment fields."""
    sentiment = data.get("sentiment") or {}
    comments = pd.DataFrame(data.get("comments", []), columns=COMMENT_COLUMNS)
    analyzed = pd.DataFrame(sentiment.get("analyzed", []), columns=["id", "sentiment", "analysis"])
    return analyzed.merge(comments, on="id", how="left")[ANALYZED_COLUMNS]


def export_to_csv(data: Dict[str, Any], filename: str) -> int:
    """Write the analyzed comments of an exported report as CSV. Returns the row count."""
    df = analyzed_comments_frame(data)
    df.to_csv(filename, index=False, encoding="utf-8")
    return len(df)
