"""Basic usage examples for SentiTube."""

from sentitube import DashboardController, SentimentAnalyzer, YouTubeService
from sentitube.core.urls import require_video_id

VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def example_fetch_and_analyze():
    """Example: fetch stats and comments, then classify them."""
    print(f"🔍 Fetching {VIDEO_URL}")

    youtube_service = YouTubeService()
    report = youtube_service.fetch(require_video_id(VIDEO_URL))
    print(f"📊 {report.stats.view_count:,} views, {report.stats.like_count:,} likes, "
          f"{len(report.comments)} comments fetched")

    analyzer = SentimentAnalyzer()
    sentiment = analyzer.analyze(report.comments)
    stats = sentiment.sentiment_stats
    print(f"🤖 agree {stats.agree}% · disagree {stats.disagree}% · neutral {stats.neutral}%")
    for month in sentiment.monthly_stats:
        print(f"  {month.month}: {month.agree}/{month.disagree}/{month.neutral}")


def example_dashboard_session():
    """Example: drive the dashboard state without a UI."""
    print("\n🖥️ Dashboard session")

    controller = DashboardController()
    token = controller.submit(VIDEO_URL)
    if controller.error:
        print(f"❌ {controller.error}")
    if token is None or not controller.comments:
        return

    report = controller.run_analysis(token)
    if report:
        print(f"✅ Analyzed {len(report.analyzed)} comments, skipped {report.skipped}")


if __name__ == "__main__":
    example_fetch_and_analyze()
    example_dashboard_session()
