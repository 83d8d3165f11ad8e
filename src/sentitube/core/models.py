"""Data models for SentiTube."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class Sentiment(Enum):
    """Stance of a comment toward the video content."""
    AGREE = "agree"
    DISAGREE = "disagree"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class VideoStats:
    """Engagement snapshot for one video.

    ``dislike_count`` is not reported by the API any more; it is an estimate
    derived from the like count and flagged by ``dislikes_estimated``.
    """
    video_id: str
    view_count: int
    like_count: int
    dislike_count: int
    comment_count: int
    title: str = ""
    channel_title: str = ""
    dislikes_estimated: bool = True


@dataclass(frozen=True)
class Comment:
    """A top-level comment."""
    id: str
    author: str
    text: str
    like_count: int
    published_at: datetime
    author_profile_image_url: Optional[str] = None


@dataclass(frozen=True)
class AnalyzedComment:
    """A comment with its sentiment label and rationale."""
    comment: Comment
    sentiment: Sentiment
    analysis: str

    @property
    def id(self) -> str:
        return self.comment.id

    @property
    def author(self) -> str:
        return self.comment.author

    @property
    def text(self) -> str:
        return self.comment.text

    @property
    def published_at(self) -> datetime:
        return self.comment.published_at


@dataclass
class SentimentStats:
    """Integer percentages of each sentiment in an analyzed set."""
    agree: int = 0
    disagree: int = 0
    neutral: int = 0

    def as_dict(self) -> dict:
        return {"agree": self.agree, "disagree": self.disagree, "neutral": self.neutral}


@dataclass
class MonthlyStats:
    """Sentiment counts for one calendar month."""
    month: str
    agree: int = 0
    disagree: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.agree + self.disagree + self.neutral


@dataclass(frozen=True)
class VideoReport:
    """Result of one stats + comments fetch."""
    stats: VideoStats
    comments: List[Comment] = field(default_factory=list)
    comments_error: Optional[str] = None


@dataclass
class SentimentReport:
    """Result of one sentiment analysis run."""
    analyzed: List[AnalyzedComment] = field(default_factory=list)
    sentiment_stats: SentimentStats = field(default_factory=SentimentStats)
    monthly_stats: List[MonthlyStats] = field(default_factory=list)
    skipped: int = 0
