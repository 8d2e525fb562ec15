# articleinsight/services/analysis/errors.py
from __future__ import annotations


ANALYSIS_FAILED_MESSAGE = "分析过程中出现错误，请稍后重试"


class ArticleInsightError(Exception):
    """Base error for the analysis service."""


class AnalysisError(ArticleInsightError):
    """Raised when any source of a comprehensive analysis fails."""

    def __init__(self, message: str = ANALYSIS_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message
