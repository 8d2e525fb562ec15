"""
Market analysis tools for ArticleInsight.

This package contains the mock data sources, the concurrent
aggregator and the Markdown report formatter.  Known industries are
answered from a static table; anything else gets templated placeholder
data with random market figures.
"""

from .errors import AnalysisError, ArticleInsightError
from .report import export_to_markdown
from .service import AnalysisService, perform_comprehensive_analysis

__all__ = [
    "AnalysisError",
    "AnalysisService",
    "ArticleInsightError",
    "export_to_markdown",
    "perform_comprehensive_analysis",
]
