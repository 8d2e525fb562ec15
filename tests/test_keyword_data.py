import dataclasses
import random

import pytest

from articleinsight.models.schemas import AnalysisData, DIFFICULTY_LEVELS, KeywordTrends
from articleinsight.services.analysis.fallback import (
    fallback_competitors,
    random_difficulty,
    random_market_size,
)
from articleinsight.services.analysis.keyword_data import get_keyword_record, known_keywords
from articleinsight.services.analysis.suggestions import generate_suggestions


def test_known_keywords() -> None:
    assert set(known_keywords()) == {"人工智能", "新能源汽车", "宠物经济"}


def test_records_are_read_only() -> None:
    record = get_keyword_record("宠物经济")
    assert record is not None
    assert record.difficulty == "中"
    assert record.market_size == "2000亿人民币"
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.difficulty = "低"  # type: ignore[misc]


def test_unknown_keyword_has_no_record() -> None:
    assert get_keyword_record("人工智能 ") is None


def test_fallback_text_mentions_keyword() -> None:
    assert fallback_competitors("奶茶") == ["奶茶领域头部企业A", "奶茶创新型公司B", "奶茶传统转型企业C"]


def test_random_market_figures_in_range() -> None:
    rng = random.Random(0)
    for _ in range(200):
        size = int(random_market_size(rng).removesuffix("亿人民币"))
        assert 100 <= size <= 1099
        assert random_difficulty(rng) in DIFFICULTY_LEVELS


@pytest.mark.parametrize("difficulty", ["低", "中"])
def test_suggestions_low_barrier(difficulty: str) -> None:
    suggestions = generate_suggestions("奶茶", difficulty)
    assert suggestions == [
        "从奶茶的细分需求切入市场",
        "重点关注用户体验和服务质量",
        "考虑与现有平台或企业合作",
        "奶茶市场进入门槛相对较低，适合快速试错",
    ]


def test_analysis_data_rejects_empty_lists_and_bad_difficulty() -> None:
    base = dict(
        pain_points=["x"],
        competitors=["x"],
        opportunities=["x"],
        difficulty="低",
        market_size="100亿人民币",
        suggestions=["x"],
    )
    with pytest.raises(ValueError):
        AnalysisData(**{**base, "competitors": []})
    with pytest.raises(ValueError):
        AnalysisData(**{**base, "difficulty": "极高"})


def test_analysis_data_serialises_camel_case() -> None:
    data = AnalysisData(
        pain_points=["x"],
        competitors=["y"],
        opportunities=["z"],
        difficulty="低",
        market_size="100亿人民币",
        suggestions=["s"],
    )
    dumped = data.model_dump(mode="json", by_alias=True)
    assert dumped["painPoints"] == ["x"]
    assert dumped["marketSize"] == "100亿人民币"


def test_keyword_trends_search_volume_range() -> None:
    KeywordTrends(search_volume=100_000, trend="rising", related_keywords=["x"])
    KeywordTrends(search_volume=1_099_999, trend="stable", related_keywords=["x"])
    with pytest.raises(ValueError):
        KeywordTrends(search_volume=99_999, trend="rising", related_keywords=["x"])
    with pytest.raises(ValueError):
        KeywordTrends(search_volume=1_100_000, trend="rising", related_keywords=["x"])
