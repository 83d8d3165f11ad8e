"""Test the dashboard submission flow."""

from datetime import datetime, timezone

import pytest
from unittest.mock import Mock
from sentitube.core.errors import ApiKeyError, FetchNetworkError, VideoNotFoundError
from sentitube.core.models import Comment, SentimentReport, VideoReport, VideoStats
from sentitube.services.dashboard import DashboardController


def _report(video_id="abc", n_comments=2, comments_error=None):
    stats = VideoStats(video_id=video_id, view_count=10, like_count=5, dislike_count=0, comment_count=n_comments)
    comments = [
        Comment(id=f"{video_id}-{i}", author="U", text="hi", like_count=0,
                published_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        for i in range(n_comments)
    ]
    return VideoReport(stats=stats, comments=comments, comments_error=comments_error)


class TestDashboardController:
    """Test DashboardController."""

    def setup_method(self):
        """Set up a controller with mocked services."""
        self.youtube = Mock()
        self.analyzer = Mock()
        self.analyzer.analyze.return_value = SentimentReport()
        self.controller = DashboardController(self.youtube, self.analyzer)

    def test_invalid_url_makes_no_call(self):
        """Test input validation happens before any network call."""
        assert self.controller.submit("https://vimeo.com/1") is None
        assert self.controller.error == "Invalid YouTube URL. Please enter a valid YouTube video URL."
        self.youtube.fetch.assert_not_called()
        assert self.controller.generation == 0

    def test_invalid_url_keeps_previous_results(self):
        """Test a rejected URL leaves displayed results in place."""
        self.youtube.fetch.return_value = _report()
        self.controller.submit("https://youtu.be/abc")
        self.controller.submit("not a url")
        assert self.controller.stats is not None
        assert len(self.controller.comments) == 2
        assert self.controller.error.startswith("Invalid YouTube URL")

    def test_successful_submit(self):
        """Test stats and comments replace the previous state."""
        self.youtube.fetch.return_value = _report()
        token = self.controller.submit("https://www.youtube.com/watch?v=abc")

        self.youtube.fetch.assert_called_once_with("abc")
        assert token == 1
        assert self.controller.video_id == "abc"
        assert self.controller.stats.view_count == 10
        assert len(self.controller.comments) == 2
        assert self.controller.error is None
        assert self.controller.loading is False

    @pytest.mark.parametrize("error, message", [
        (VideoNotFoundError("abc"), "Video not found. Please check the URL."),
        (ApiKeyError(), "API Key error. Please check your YouTube API key."),
        (FetchNetworkError("boom"), "Error fetching video data: boom"),
    ])
    def test_fetch_errors_clear_stats(self, error, message):
        """Test that each failure shows its own banner and clears statistics."""
        self.youtube.fetch.return_value = _report()
        self.controller.submit("https://youtu.be/abc")

        self.youtube.fetch.side_effect = error
        self.controller.submit("https://youtu.be/def")

        assert self.controller.error == message
        assert self.controller.stats is None
        assert self.controller.comments == []
        assert self.controller.analysis is None
        assert self.controller.loading is False

    def test_comments_error_keeps_stats(self):
        """Test a comments failure shows a banner but keeps statistics."""
        self.youtube.fetch.return_value = _report(n_comments=0, comments_error="Error fetching comments. x")
        self.controller.submit("https://youtu.be/abc")
        assert self.controller.stats is not None
        assert self.controller.error == "Error fetching comments. x"

    def test_run_analysis_commits_result(self):
        """Test that a current analysis is stored."""
        self.youtube.fetch.return_value = _report()
        token = self.controller.submit("https://youtu.be/abc")

        report = self.controller.run_analysis(token)

        assert report is self.analyzer.analyze.return_value
        assert self.controller.analysis is report
        comments = self.analyzer.analyze.call_args.args[0]
        assert [c.id for c in comments] == ["abc-0", "abc-1"]

    def test_run_analysis_without_comments(self):
        """Test that nothing is analyzed when there are no comments."""
        self.youtube.fetch.return_value = _report(n_comments=0)
        token = self.controller.submit("https://youtu.be/abc")
        assert self.controller.run_analysis(token) is None
        self.analyzer.analyze.assert_not_called()

    def test_stale_analysis_is_discarded(self):
        """Test that a result from a superseded submission is dropped."""
        self.youtube.fetch.side_effect = [_report("abc"), _report("def")]
        old_token = self.controller.submit("https://youtu.be/abc")

        def analyze_while_resubmitted(comments, progress=None):
            # a new video is submitted while this analysis is in flight
            self.controller.submit("https://youtu.be/def")
            return SentimentReport()

        self.analyzer.analyze.side_effect = analyze_while_resubmitted

        assert self.controller.run_analysis(old_token) is None
        assert self.controller.analysis is None
        assert self.controller.video_id == "def"
        assert not self.controller.is_current(old_token)

    def test_analysis_error_banner(self):
        """Test that an unexpected analysis failure is reported."""
        self.youtube.fetch.return_value = _report()
        token = self.controller.submit("https://youtu.be/abc")
        self.analyzer.analyze.side_effect = RuntimeError("bad state")

        assert self.controller.run_analysis(token) is None
        assert self.controller.analysis_error == "Error analyzing comments: bad state"

    def test_failed_fetch_clears_previous_analysis_error(self):
        """Test that an old analysis banner does not survive a new submission."""
        self.youtube.fetch.return_value = _report("abc")
        token = self.controller.submit("https://youtu.be/abc")
        self.analyzer.analyze.side_effect = RuntimeError("boom")
        self.controller.run_analysis(token)
        assert self.controller.analysis_error == "Error analyzing comments: boom"

        self.youtube.fetch.side_effect = VideoNotFoundError("def")
        self.controller.submit("https://youtu.be/def")

        assert self.controller.error == "Video not found. Please check the URL."
        assert self.controller.analysis_error is None

    def test_new_submission_resets_analysis(self):
        """Test that results belong to exactly one submission."""
        self.youtube.fetch.return_value = _report()
        token = self.controller.submit("https://youtu.be/abc")
        self.controller.run_analysis(token)
        assert self.controller.analysis is not None

        self.controller.submit("https://youtu.be/abc")
        assert self.controller.analysis is None
        assert self.controller.generation == 2


if __name__ == "__main__":
    pytest.main([__file__])
