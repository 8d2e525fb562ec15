import random
import re
import time

import pytest

from articleinsight.models.schemas import DIFFICULTY_LEVELS
from articleinsight.services.analysis import AnalysisError, AnalysisService
from articleinsight.services.analysis.errors import ANALYSIS_FAILED_MESSAGE


NO_DELAY = {"trend": 0, "pain_point": 0, "competitor": 0, "opportunity": 0}


class FixedRandom:
    """Deterministic stand-in for random.Random."""

    def __init__(self, number: int = 321, pick: int = 0, fraction: float = 0.9):
        self.number = number
        self.pick = pick
        self.fraction = fraction

    def randint(self, a, b):
        return self.number if a <= self.number <= b else a

    def choice(self, seq):
        return seq[self.pick]

    def random(self):
        return self.fraction


def make_service(rng=None) -> AnalysisService:
    return AnalysisService(rng=rng or random.Random(7), delays_ms=NO_DELAY)


async def test_known_keyword_returns_static_data() -> None:
    data = await make_service().perform_comprehensive_analysis("人工智能")

    assert data.pain_points == (
        "技术门槛高，普通企业难以应用",
        "算法黑盒问题，缺乏可解释性",
        "数据隐私和安全风险较大",
    )
    assert data.competitors == (
        "OpenAI - ChatGPT及GPT系列产品",
        "百度 - 文心一言和智能云服务",
        "阿里云 - 通义千问和AI解决方案",
    )
    assert data.opportunities == (
        "垂直行业AI解决方案市场空白",
        "中小企业AI工具需求增长迅速",
        "AI+教育、医疗等细分领域机会",
    )
    assert data.difficulty == "高"
    assert data.market_size == "1500亿人民币"


async def test_unknown_keyword_uses_fallback() -> None:
    keyword = "智能家居"
    data = await make_service().perform_comprehensive_analysis(keyword)

    for items in (data.pain_points, data.competitors, data.opportunities):
        assert items
        assert all(keyword in item for item in items)
    assert data.difficulty in DIFFICULTY_LEVELS
    assert re.fullmatch(r"\d+亿人民币", data.market_size)


async def test_fallback_uses_injected_random_source() -> None:
    service = make_service(FixedRandom(number=456, pick=1))
    data = await service.perform_comprehensive_analysis("咖啡")

    assert data.market_size == "456亿人民币"
    assert data.difficulty == "中"
    assert data.suggestions[3] == "咖啡市场进入门槛相对较低，适合快速试错"


async def test_seeded_services_agree() -> None:
    first = await make_service(random.Random(42)).perform_comprehensive_analysis("露营")
    second = await make_service(random.Random(42)).perform_comprehensive_analysis("露营")
    assert first == second


async def test_suggestions_follow_difficulty() -> None:
    high = await make_service().perform_comprehensive_analysis("新能源汽车")
    medium = await make_service().perform_comprehensive_analysis("宠物经济")

    assert len(high.suggestions) == 4
    assert len(medium.suggestions) == 4
    assert high.suggestions[3] == "新能源汽车领域需要技术积累，建议组建专业团队"
    assert medium.suggestions[3] == "宠物经济市场进入门槛相对较低，适合快速试错"


async def test_trends_snapshot() -> None:
    trends = await make_service(FixedRandom(number=200_000, fraction=0.2)).search_keyword_trends(
        "宠物经济"
    )
    assert trends.search_volume == 200_000
    assert trends.trend == "stable"
    assert trends.related_keywords == ("宠物经济市场", "宠物经济前景", "宠物经济投资")


async def test_failing_source_raises_analysis_error() -> None:
    class BrokenService(AnalysisService):
        async def analyze_competitors(self, keyword):
            raise RuntimeError("competitor backend down")

    service = BrokenService(delays_ms=NO_DELAY)
    with pytest.raises(AnalysisError) as exc_info:
        await service.perform_comprehensive_analysis("人工智能")

    assert str(exc_info.value) == ANALYSIS_FAILED_MESSAGE
    assert isinstance(exc_info.value.__cause__, RuntimeError)


async def test_sources_run_concurrently() -> None:
    # 4 x 50ms sequential would take 200ms
    service = AnalysisService(
        delays_ms={"trend": 50, "pain_point": 50, "competitor": 50, "opportunity": 50}
    )
    started = time.perf_counter()
    await service.perform_comprehensive_analysis("人工智能")
    assert time.perf_counter() - started < 0.15
