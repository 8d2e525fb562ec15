"""
Static keyword table.

Canned market data for the handful of industries the service knows
about.  The table is built once at import and exposed read-only through
:func:`get_keyword_record`; unknown keywords go to
:mod:`articleinsight.services.analysis.fallback` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class KeywordRecord:
    pain_points: Tuple[str, ...]
    competitors: Tuple[str, ...]
    opportunities: Tuple[str, ...]
    difficulty: str
    market_size: str


_KEYWORD_TABLE: Mapping[str, KeywordRecord] = MappingProxyType(
    {
        "人工智能": KeywordRecord(
            pain_points=(
                "技术门槛高，普通企业难以应用",
                "算法黑盒问题，缺乏可解释性",
                "数据隐私和安全风险较大",
            ),
            competitors=(
                "OpenAI - ChatGPT及GPT系列产品",
                "百度 - 文心一言和智能云服务",
                "阿里云 - 通义千问和AI解决方案",
            ),
            opportunities=(
                "垂直行业AI解决方案市场空白",
                "中小企业AI工具需求增长迅速",
                "AI+教育、医疗等细分领域机会",
            ),
            difficulty="高",
            market_size="1500亿人民币",
        ),
        "新能源汽车": KeywordRecord(
            pain_points=(
                "充电基础设施不完善",
                "电池续航里程焦虑",
                "维修保养成本较高",
            ),
            competitors=(
                "特斯拉 - 全球电动车领导者",
                "比亚迪 - 国产新能源汽车龙头",
                "蔚来 - 高端智能电动汽车",
            ),
            opportunities=(
                "三四线城市市场渗透率低",
                "充电服务生态链机会",
                "二手新能源车市场待开发",
            ),
            difficulty="高",
            market_size="8000亿人民币",
        ),
        "宠物经济": KeywordRecord(
            pain_points=(
                "宠物医疗费用过高",
                "优质宠物服务供给不足",
                "宠物食品安全问题频发",
            ),
            competitors=(
                "皇家 - 宠物食品知名品牌",
                "瑞鹏宠物 - 连锁宠物医院",
                "波奇网 - 宠物电商平台",
            ),
            opportunities=(
                "宠物保险市场刚起步",
                "智能宠物用品需求增长",
                "宠物社交和服务平台机会",
            ),
            difficulty="中",
            market_size="2000亿人民币",
        ),
    }
)


def get_keyword_record(keyword: str) -> Optional[KeywordRecord]:
    """Return the static record for ``keyword`` or ``None`` if unknown."""
    return _KEYWORD_TABLE.get(keyword)


def known_keywords() -> Tuple[str, ...]:
    return tuple(_KEYWORD_TABLE)
