"""Comment sentiment analysis pipeline."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from ..core.aggregation import compute_monthly_stats, compute_sentiment_stats
from ..core.config import settings
from ..core.models import AnalyzedComment, Comment, SentimentReport
from .llm import LLMServiceFactory

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class SentimentAnalyzer:
    """Classifies comments one by one and aggregates the labels.

    With ``workers == 1`` (the default) classification is strictly
    sequential: one call in flight at a time. Larger values use a bounded
    thread pool; results are always returned in input order.
    """

    def __init__(self, llm_service=None, workers: int = None):
        self.llm_service = llm_service or LLMServiceFactory.create()
        self.workers = max(1, workers or settings.analysis_workers)

    def _analyze_one(self, comment: Comment) -> AnalyzedComment:
        result = self.llm_service.classify_comment(comment.text)
        return AnalyzedComment(
            comment=comment,
            sentiment=result["sentiment"],
            analysis=result["analysis"],
        )

    def classify(self, comments: List[Comment],
                 progress: Optional[ProgressCallback] = None) -> List[AnalyzedComment]:
        """Label every comment that has text, preserving input order."""
        todo = []
        for comment in comments:
            if not comment.text or not comment.text.strip():
                logger.error(f"Comment missing text, skipping: {comment.id}")
                continue
            todo.append(comment)

        total = len(todo)
        analyzed: List[AnalyzedComment] = []
        if self.workers == 1 or total <= 1:
            for comment in todo:
                analyzed.append(self._analyze_one(comment))
                if progress:
                    progress(len(analyzed), total)
            return analyzed

        with ThreadPoolExecutor(max_workers=min(self.workers, total)) as executor:
            # map() yields in submission order
            for item in executor.map(self._analyze_one, todo):
                analyzed.append(item)
                if progress:
                    progress(len(analyzed), total)
        return analyzed

    def analyze(self, comments: List[Comment],
                progress: Optional[ProgressCallback] = None) -> SentimentReport:
        """Classify comments and compute overall and monthly statistics."""
        if not comments:
            logger.info("No comments to analyze")
            return SentimentReport()

        logger.info(f"Starting analysis of {len(comments)} comments")
        analyzed = self.classify(comments, progress)
        report = SentimentReport(
            analyzed=analyzed,
            sentiment_stats=compute_sentiment_stats(analyzed),
            monthly_stats=compute_monthly_stats(analyzed),
            skipped=len(comments) - len(analyzed),
        )
        logger.info(f"Analysis complete: {len(analyzed)} analyzed, {report.skipped} skipped, "
                    f"stats {report.sentiment_stats.as_dict()}")
        return report
