"""
Comprehensive keyword analysis.

:class:`AnalysisService` simulates four independent data sources
(search trends, social media pain points, competitors and market
opportunities).  Each source sleeps for its configured latency and then
answers from the static keyword table or the fallback generator.
:meth:`AnalysisService.perform_comprehensive_analysis` runs the four
concurrently and merges them into one :class:`AnalysisData`.
"""

from __future__ import annotations

import asyncio
from typing import List, Mapping, Optional

from articleinsight.config import ServiceConfigs
from articleinsight.models.schemas import AnalysisData, KeywordTrends, MarketData
from articleinsight.utils.logger import get_logger

from .errors import AnalysisError
from .fallback import (
    RandomSource,
    default_random_source,
    fallback_competitors,
    fallback_opportunities,
    fallback_pain_points,
    random_difficulty,
    random_market_size,
    related_keywords,
)
from .keyword_data import get_keyword_record
from .suggestions import generate_suggestions


logger = get_logger(__name__)

DEFAULT_DELAYS_MS: Mapping[str, int] = {
    "trend": 800,
    "pain_point": 600,
    "competitor": 700,
    "opportunity": 900,
}


class AnalysisService:
    """Mock market analysis backed by canned data and a random source.

    Args:
        rng: Random source used for trends and fallback market data.
            Defaults to an unseeded :class:`random.Random`.
        delays_ms: Per-source simulated latency in milliseconds, keyed by
            ``trend``, ``pain_point``, ``competitor`` and ``opportunity``.
            Missing keys fall back to :data:`DEFAULT_DELAYS_MS`.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        delays_ms: Optional[Mapping[str, int]] = None,
    ) -> None:
        self.rng = rng if rng is not None else default_random_source()
        self.delays_ms = {**DEFAULT_DELAYS_MS, **(delays_ms or {})}

    @classmethod
    def from_configs(
        cls,
        configs: ServiceConfigs,
        delays_ms: Optional[Mapping[str, int]] = None,
    ) -> "AnalysisService":
        """Build a service from :class:`ServiceConfigs`; ``delays_ms`` overrides."""
        configured = {
            "trend": configs.trend_delay_ms,
            "pain_point": configs.pain_point_delay_ms,
            "competitor": configs.competitor_delay_ms,
            "opportunity": configs.opportunity_delay_ms,
        }
        return cls(
            rng=default_random_source(configs.random_seed),
            delays_ms={**configured, **(delays_ms or {})},
        )

    async def _simulate_latency(self, source: str) -> None:
        delay = self.delays_ms.get(source, 0)
        if delay > 0:
            await asyncio.sleep(delay / 1000)

    # ====================================
    # Sources
    # ====================================
    async def search_keyword_trends(self, keyword: str) -> KeywordTrends:
        await self._simulate_latency("trend")
        return KeywordTrends(
            search_volume=self.rng.randint(100_000, 1_099_999),
            trend="rising" if self.rng.random() > 0.5 else "stable",
            related_keywords=related_keywords(keyword),
        )

    async def analyze_social_media_pain_points(self, keyword: str) -> List[str]:
        await self._simulate_latency("pain_point")
        record = get_keyword_record(keyword)
        if record:
            return list(record.pain_points)
        return fallback_pain_points(keyword)

    async def analyze_competitors(self, keyword: str) -> List[str]:
        await self._simulate_latency("competitor")
        record = get_keyword_record(keyword)
        if record:
            return list(record.competitors)
        return fallback_competitors(keyword)

    async def analyze_market_opportunities(self, keyword: str) -> MarketData:
        await self._simulate_latency("opportunity")
        record = get_keyword_record(keyword)
        if record:
            return MarketData(
                opportunities=record.opportunities,
                market_size=record.market_size,
                difficulty=record.difficulty,
            )
        return MarketData(
            opportunities=fallback_opportunities(keyword),
            market_size=random_market_size(self.rng),
            difficulty=random_difficulty(self.rng),
        )

    # ====================================
    # Aggregation
    # ====================================
    async def perform_comprehensive_analysis(self, keyword: str) -> AnalysisData:
        """Run all sources concurrently and merge them by field.

        Raises:
            AnalysisError: if any source fails.  No partial result is
                returned and nothing is retried.
        """
        logger.info("[analysis] start | keyword=%s", keyword)
        try:
            trends, pain_points, competitors, market = await asyncio.gather(
                self.search_keyword_trends(keyword),
                self.analyze_social_media_pain_points(keyword),
                self.analyze_competitors(keyword),
                self.analyze_market_opportunities(keyword),
            )
            suggestions = generate_suggestions(keyword, market.difficulty)
            data = AnalysisData(
                pain_points=pain_points,
                competitors=competitors,
                opportunities=market.opportunities,
                difficulty=market.difficulty,
                market_size=market.market_size,
                suggestions=suggestions,
            )
        except Exception as e:
            logger.exception("[analysis] Analysis failed | keyword=%s", keyword)
            raise AnalysisError() from e

        logger.info(
            "[analysis] done | keyword=%s | trend=%s | difficulty=%s",
            keyword,
            trends.trend,
            data.difficulty,
        )
        return data


_default_service: AnalysisService | None = None


def get_default_service() -> AnalysisService:
    global _default_service
    if _default_service is None:
        _default_service = AnalysisService.from_configs(ServiceConfigs())
    return _default_service


async def perform_comprehensive_analysis(keyword: str) -> AnalysisData:
    """Module-level shortcut using the process-wide default service."""
    return await get_default_service().perform_comprehensive_analysis(keyword)
