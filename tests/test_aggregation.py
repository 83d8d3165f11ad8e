"""Tests for sentiment and engagement aggregation."""

from datetime import datetime, timezone

import pytest
from sentitube.core.aggregation import (
    compute_monthly_stats,
    compute_sentiment_stats,
    engagement_rate,
    estimate_dislikes,
    likes_vs_dislikes,
)
from sentitube.core.models import AnalyzedComment, Comment, Sentiment, VideoStats


def _analyzed(sentiment, published_at, comment_id="c"):
    comment = Comment(id=comment_id, author="User", text="text", like_count=0, published_at=published_at)
    return AnalyzedComment(comment=comment, sentiment=sentiment, analysis="because")


JAN = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
MAR = datetime(2024, 3, 2, 8, 30, tzinfo=timezone.utc)


class TestSentimentStats:
    """Test percentage aggregation."""

    def test_empty_set_is_all_zero(self):
        """Test that an empty set does not divide by zero."""
        stats = compute_sentiment_stats([])
        assert stats.as_dict() == {"agree": 0, "disagree": 0, "neutral": 0}

    def test_percentages(self):
        """Test basic percentages."""
        analyzed = [
            _analyzed(Sentiment.AGREE, JAN),
            _analyzed(Sentiment.AGREE, JAN),
            _analyzed(Sentiment.DISAGREE, JAN),
            _analyzed(Sentiment.NEUTRAL, JAN),
        ]
        stats = compute_sentiment_stats(analyzed)
        assert (stats.agree, stats.disagree, stats.neutral) == (50, 25, 25)

    def test_thirds_round_independently(self):
        """Test that shares are rounded one by one and sum to about 100."""
        analyzed = [_analyzed(s, JAN) for s in (Sentiment.AGREE, Sentiment.DISAGREE, Sentiment.NEUTRAL)]
        stats = compute_sentiment_stats(analyzed)
        assert (stats.agree, stats.disagree, stats.neutral) == (33, 33, 33)

    def test_halves_round_up(self):
        """Test that a share of exactly .5 rounds up."""
        analyzed = [_analyzed(Sentiment.AGREE, JAN)] + [_analyzed(Sentiment.NEUTRAL, JAN)] * 7
        stats = compute_sentiment_stats(analyzed)
        assert stats.agree == 13  # 12.5%
        assert stats.neutral == 88  # 87.5%


class TestMonthlyStats:
    """Test month bucketing."""

    def test_two_months(self):
        """Test the Jan/Mar example."""
        analyzed = [
            _analyzed(Sentiment.AGREE, JAN),
            _analyzed(Sentiment.DISAGREE, JAN),
            _analyzed(Sentiment.NEUTRAL, MAR),
        ]
        monthly = compute_monthly_stats(analyzed)

        assert len(monthly) == 2
        assert (monthly[0].month, monthly[0].agree, monthly[0].disagree, monthly[0].neutral) == ("Jan 2024", 1, 1, 0)
        assert (monthly[1].month, monthly[1].agree, monthly[1].disagree, monthly[1].neutral) == ("Mar 2024", 0, 0, 1)
        assert [m.total for m in monthly] == [2, 1]

    def test_first_seen_ordering(self):
        """Test that months keep discovery order, not calendar order."""
        analyzed = [
            _analyzed(Sentiment.NEUTRAL, MAR),
            _analyzed(Sentiment.AGREE, JAN),
            _analyzed(Sentiment.AGREE, MAR),
        ]
        monthly = compute_monthly_stats(analyzed)
        assert [m.month for m in monthly] == ["Mar 2024", "Jan 2024"]
        assert monthly[0].agree == 1 and monthly[0].neutral == 1

    def test_same_month_different_years(self):
        """Test that the year is part of the bucket key."""
        analyzed = [
            _analyzed(Sentiment.AGREE, JAN),
            _analyzed(Sentiment.AGREE, JAN.replace(year=2023)),
        ]
        assert [m.month for m in compute_monthly_stats(analyzed)] == ["Jan 2024", "Jan 2023"]

    def test_empty(self):
        """Test empty input."""
        assert compute_monthly_stats([]) == []


class TestEngagement:
    """Test engagement helpers."""

    def setup_method(self):
        """Set up a stats snapshot."""
        self.stats = VideoStats(video_id="v", view_count=1000, like_count=100,
                                dislike_count=5, comment_count=10)

    def test_estimate_dislikes(self):
        """Test the 5% estimate is floored."""
        assert estimate_dislikes(100) == 5
        assert estimate_dislikes(39) == 1
        assert estimate_dislikes(0) == 0

    def test_engagement_rate(self):
        """Test likes plus dislikes over views."""
        assert engagement_rate(self.stats) == pytest.approx(10.5)

    def test_engagement_rate_zero_views(self):
        """Test that zero views does not divide by zero."""
        stats = VideoStats(video_id="v", view_count=0, like_count=3, dislike_count=0, comment_count=0)
        assert engagement_rate(stats) == pytest.approx(300.0)

    def test_likes_vs_dislikes_rows(self):
        """Test chart rows and the estimate label."""
        rows = likes_vs_dislikes(self.stats)
        assert [r["name"] for r in rows] == ["Likes", "Dislikes (est.)"]
        assert [r["value"] for r in rows] == [100, 5]
        assert likes_vs_dislikes(self.stats, include_dislikes=False)[0]["name"] == "Likes"
        assert len(likes_vs_dislikes(self.stats, include_dislikes=False)) == 1


class TestCorePackage:
    """Test the names re-exported by sentitube.core."""

    def test_exports_are_explicit(self):
        """Test that module internals do not leak into the package."""
        import sentitube.core as core

        for name in core.__all__:
            assert hasattr(core, name)
        for name in ("math", "Counter", "logger", "Enum", "ErrorMessages", "dataclass"):
            assert not hasattr(core, name)


if __name__ == "__main__":
    pytest.main([__file__])
