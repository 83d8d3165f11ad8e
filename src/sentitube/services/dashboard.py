"""Dashboard state and submission flow, independent of the UI toolkit."""

import logging
from typing import List, Optional

from ..core.constants import ErrorMessages
from ..core.errors import SentiTubeError
from ..core.models import Comment, SentimentReport, VideoStats
from ..core.urls import extract_video_id
from .analyzer import ProgressCallback, SentimentAnalyzer
from .youtube_client import YouTubeService

logger = logging.getLogger(__name__)


class DashboardController:
    """Owns the state cells one dashboard session renders.

    Every accepted submission bumps ``generation``. An analysis run records
    the generation it started under and its result is dropped if a newer
    submission arrived in the meantime.
    """

    def __init__(self, youtube_service: YouTubeService = None, analyzer: SentimentAnalyzer = None):
        self._youtube_service = youtube_service
        self._analyzer = analyzer

        self.video_id: Optional[str] = None
        self.stats: Optional[VideoStats] = None
        self.comments: List[Comment] = []
        self.error: Optional[str] = None
        self.loading = False
        self.analysis: Optional[SentimentReport] = None
        self.analysis_error: Optional[str] = None
        self.generation = 0

    @property
    def youtube_service(self) -> YouTubeService:
        if self._youtube_service is None:
            self._youtube_service = YouTubeService()
        return self._youtube_service

    @property
    def analyzer(self) -> SentimentAnalyzer:
        if self._analyzer is None:
            self._analyzer = SentimentAnalyzer()
        return self._analyzer

    def submit(self, url: str) -> Optional[int]:
        """Handle a submitted URL.

        Returns the generation token of the accepted submission, or None when
        the URL was rejected. A rejected URL only sets the error banner;
        previously displayed results stay in place.
        """
        video_id = extract_video_id(url)
        if not video_id:
            logger.info(f"Rejected URL without a video id: {url!r}")
            self.error = ErrorMessages.INVALID_URL
            return None

        self.generation += 1
        token = self.generation
        self.video_id = video_id
        self.error = None
        self.analysis_error = None
        self.loading = True
        try:
            report = self.youtube_service.fetch(video_id)
        except SentiTubeError as e:
            logger.error(f"Fetch failed for {video_id} [{e.category.value}]: {e}")
            self.error = e.user_message
            self.stats = None
            self.comments = []
            self.analysis = None
            return token
        finally:
            self.loading = False

        self.stats = report.stats
        self.comments = list(report.comments)
        self.error = report.comments_error
        self.analysis = None
        return token

    def is_current(self, token: int) -> bool:
        return token == self.generation

    def run_analysis(self, token: int = None,
                     progress: Optional[ProgressCallback] = None) -> Optional[SentimentReport]:
        """Analyze the current comments and commit the result if still current."""
        token = self.generation if token is None else token
        comments = list(self.comments)
        if not comments:
            return None

        try:
            report = self.analyzer.analyze(comments, progress)
        except Exception as e:
            logger.error(f"Error in analysis: {e}")
            if self.is_current(token):
                self.analysis_error = ErrorMessages.ANALYSIS.format(message=e)
            return None

        if not self.is_current(token):
            logger.info(f"Discarding stale analysis for generation {token} (current {self.generation})")
            return None

        self.analysis = report
        self.analysis_error = None
        return report
