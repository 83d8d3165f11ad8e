"""Command-line interface for SentiTube."""

import argparse
import json
import logging
import subprocess
import sys

from .core.aggregation import engagement_rate
from .core.config import settings
from .core.constants import FileConstants
from .core.errors import SentiTubeError
from .core.text import excerpt
from .core.urls import require_video_id
from .services.analyzer import SentimentAnalyzer
from .services.youtube_client import YouTubeService
from .ui import run_streamlit_app
from .utils.data_prep import export_to_csv, export_to_json, prepare_export, sentiment_tables

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _print_stats(stats):
    print(f"Video: {stats.title or stats.video_id}")
    if stats.channel_title:
        print(f"Channel: {stats.channel_title}")
    print(f"Views: {stats.view_count:,}")
    print(f"Likes: {stats.like_count:,}")
    if settings.show_estimated_dislikes:
        print(f"Dislikes (est.): {stats.dislike_count:,}")
    print(f"Comments: {stats.comment_count:,}")
    print(f"Engagement rate: {engagement_rate(stats):.2f}%")


def cmd_stats(args):
    """Stats command."""
    video_id = require_video_id(args.url)
    report = YouTubeService().fetch(video_id)

    _print_stats(report.stats)
    if report.comments_error:
        print(report.comments_error)

    print(f"\nTop {len(report.comments)} comments:")
    for comment in report.comments:
        print(f"  [{comment.published_at:%Y-%m-%d}] {comment.author}: {excerpt(comment.text, 100)}")


def cmd_analyze(args):
    """Analyze command."""
    video_id = require_video_id(args.url)
    report = YouTubeService().fetch(video_id)
    _print_stats(report.stats)

    if report.comments_error:
        print(report.comments_error)
    if not report.comments:
        print("No comments found!")
        return

    print(f"\nAnalyzing {len(report.comments)} comments...")
    analyzer = SentimentAnalyzer(workers=args.workers)
    sentiment = analyzer.analyze(
        report.comments,
        progress=lambda done, total: logger.info(f"Analyzed {done}/{total} comments"),
    )

    stats = sentiment.sentiment_stats
    print(f"\nSentiment: agree {stats.agree}% · disagree {stats.disagree}% · neutral {stats.neutral}%")
    print("Monthly distribution:")
    for month in sentiment.monthly_stats:
        print(f"  {month.month}: agree={month.agree} disagree={month.disagree} neutral={month.neutral}")

    if args.verbose:
        print("\nAnalyzed comments:")
        for item in sentiment.analyzed:
            print(f"  [{item.sentiment.value}] {item.author}: {excerpt(item.comment.text, 80)}")
            print(f"      {item.analysis}")

    if args.out:
        export_to_json(prepare_export(report, sentiment), args.out)
        print(f"Results exported to {args.out}")


def cmd_export(args):
    """Export command: summarize a saved report and optionally write its comments as CSV."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return 1

    if not isinstance(data, dict) or not data.get("sentiment"):
        print(f"No sentiment analysis in {args.input_file}. Run 'sentitube analyze URL --out FILE' first.")
        return 1

    overall, monthly = sentiment_tables(data)
    video = data.get("video") or {}
    print(f"Video: {video.get('title') or video.get('video_id', 'unknown')}")
    print("\nOverall sentiment (%):")
    print(overall.to_string(index=False))
    print("\nMonthly distribution:")
    print(monthly.to_string(index=False) if not monthly.empty else "  (none)")

    if args.output:
        rows = export_to_csv(data, args.output)
        print(f"\nExported {rows} analyzed comments to {args.output}")
    return 0


def cmd_ui(args):
    """UI command."""
    print("Launching SentiTube UI...")
    try:
        run_streamlit_app()
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
    except KeyboardInterrupt:
        print("\nUI stopped by user")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SentiTube - YouTube comment sentiment dashboard")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Stats command
    stats_parser = subparsers.add_parser('stats', help='Show video statistics and top comments')
    stats_parser.add_argument('url', help='YouTube video URL')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze comment sentiment')
    analyze_parser.add_argument('url', help='YouTube video URL')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--workers', type=int, default=None,
                                help='Concurrent classification calls (default: sequential)')
    analyze_parser.add_argument('-v', '--verbose', action='store_true', help='Print every analyzed comment')

    # Export command
    export_parser = subparsers.add_parser('export', help='Summarize a saved analysis and export its comments')
    export_parser.add_argument('--in', dest='input_file', required=True, help='JSON report written by analyze --out')
    export_parser.add_argument('--out', dest='output', help='CSV file for the analyzed comments (optional)')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {
        'stats': cmd_stats,
        'analyze': cmd_analyze,
        'export': cmd_export,
        'ui': cmd_ui,
    }
    try:
        status = commands[args.command](args)
    except SentiTubeError as e:
        logger.error(f"Command failed: {e}")
        print(e.user_message)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return
    if status:
        sys.exit(status)
