"""YouTube statistics and comments service for SentiTube."""

import logging
from datetime import datetime
from typing import List

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.config import settings
from ..core.constants import ErrorMessages, FetchConstants
from ..core.errors import ApiKeyError, FetchNetworkError, SentiTubeError, VideoNotFoundError
from ..core.aggregation import estimate_dislikes
from ..core.models import Comment, VideoReport, VideoStats

logger = logging.getLogger(__name__)


def _to_int(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _translate_http_error(e: HttpError, video_id: str) -> SentiTubeError:
    """Map an API HttpError onto the dashboard's error taxonomy."""
    status = getattr(e.resp, "status", None)
    if status in (401, 403):
        return ApiKeyError(f"YouTube API rejected the request ({status}): {e}")
    if status == 404:
        return VideoNotFoundError(video_id)
    return FetchNetworkError(str(e))


def _comments_disabled(e: HttpError) -> bool:
    content = e.content or b""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    return getattr(e.resp, "status", None) == 403 and "commentsDisabled" in content


class YouTubeService:
    """Read-only client for the YouTube Data API v3."""

    def __init__(self, api_key: str = None):
        self.youtube = None
        self._init_youtube(api_key if api_key is not None else settings.youtube_api_key)

    def _init_youtube(self, youtube_key: str):
        """Initialize YouTube client."""
        if youtube_key:
            try:
                self.youtube = build("youtube", "v3", developerKey=youtube_key, cache_discovery=False)
                logger.info("YouTube client initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize YouTube client: {e}")
                self.youtube = None
        else:
            logger.warning("YouTube API key not provided")

    def _require_client(self):
        if self.youtube is None:
            raise ApiKeyError("YouTube API key not configured")
        return self.youtube

    def get_video_stats(self, video_id: str) -> VideoStats:
        """Fetch view, like and comment counts for a video."""
        youtube = self._require_client()
        try:
            response = youtube.videos().list(
                part=FetchConstants.STATS_PARTS,
                id=video_id,
            ).execute()
        except HttpError as e:
            logger.error(f"YouTube stats fetch failed for {video_id}: {e}")
            raise _translate_http_error(e, video_id) from e
        except Exception as e:
            logger.error(f"YouTube stats request failed for {video_id}: {e}")
            raise FetchNetworkError(str(e)) from e

        items = response.get("items") or []
        if not items:
            logger.warning(f"No video found for id {video_id}")
            raise VideoNotFoundError(video_id)

        video = items[0]
        statistics = video.get("statistics", {})
        snippet = video.get("snippet", {})
        like_count = _to_int(statistics.get("likeCount"))

        stats = VideoStats(
            video_id=video_id,
            view_count=_to_int(statistics.get("viewCount")),
            like_count=like_count,
            dislike_count=estimate_dislikes(like_count, settings.dislike_ratio),
            comment_count=_to_int(statistics.get("commentCount")),
            title=snippet.get("title", ""),
            channel_title=snippet.get("channelTitle", ""),
        )
        logger.info(f"Fetched stats for {video_id}: {stats.view_count} views, {stats.like_count} likes")
        return stats

    def get_top_comments(self, video_id: str, max_results: int = None) -> List[Comment]:
        """Fetch one page of top-level comments ordered by relevance."""
        youtube = self._require_client()
        max_results = max_results or settings.max_comments or FetchConstants.MAX_COMMENTS
        try:
            response = youtube.commentThreads().list(
                part=FetchConstants.COMMENT_PARTS,
                videoId=video_id,
                maxResults=max_results,
                order=FetchConstants.COMMENT_ORDER,
                textFormat=FetchConstants.COMMENT_TEXT_FORMAT,
            ).execute()
        except HttpError as e:
            if _comments_disabled(e):
                logger.info(f"Comments are disabled for {video_id}")
                return []
            logger.error(f"YouTube comments fetch failed for {video_id}: {e}")
            raise _translate_http_error(e, video_id) from e
        except Exception as e:
            logger.error(f"YouTube comments request failed for {video_id}: {e}")
            raise FetchNetworkError(str(e)) from e

        try:
            comments = [self._to_comment(item) for item in response.get("items", [])]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed comment payload for {video_id}: {e}")
            raise FetchNetworkError(f"Malformed comment payload: {e}") from e

        logger.info(f"Retrieved {len(comments)} comments for video {video_id}")
        return comments[:max_results]

    @staticmethod
    def _to_comment(item: dict) -> Comment:
        top_comment = item["snippet"]["topLevelComment"]["snippet"]
        return Comment(
            id=item["id"],
            author=top_comment.get("authorDisplayName", ""),
            text=top_comment.get("textDisplay", ""),
            like_count=_to_int(top_comment.get("likeCount")),
            published_at=_parse_timestamp(top_comment["publishedAt"]),
            author_profile_image_url=top_comment.get("authorProfileImageUrl"),
        )

    def fetch(self, video_id: str) -> VideoReport:
        """Fetch statistics, then comments.

        Stats failures raise. A comment failure after the stats succeeded is
        recorded on the report so the statistics can still be shown.
        """
        stats = self.get_video_stats(video_id)
        try:
            comments = self.get_top_comments(video_id)
        except SentiTubeError as e:
            logger.warning(f"Keeping stats for {video_id} without comments: {e}")
            return VideoReport(stats=stats, comments=[],
                               comments_error=ErrorMessages.COMMENTS.format(message=e))
        return VideoReport(stats=stats, comments=comments)
