"""
Placeholder generator for keywords missing from the static table.

Text is templated around the keyword; market size and difficulty come
from a random source.  Any object exposing ``randint``, ``choice`` and
``random`` (e.g. :class:`random.Random`) can be passed in, which is how
tests pin the output.
"""

from __future__ import annotations

import random
from typing import List, Protocol, Sequence, TypeVar

from articleinsight.models.schemas import DIFFICULTY_LEVELS


T = TypeVar("T")


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def random(self) -> float: ...


def default_random_source(seed: int | None = None) -> RandomSource:
    return random.Random(seed)


def fallback_pain_points(keyword: str) -> List[str]:
    return [
        f"{keyword}行业成本控制困难",
        f"{keyword}产品同质化严重",
        f"{keyword}用户体验有待提升",
    ]


def fallback_competitors(keyword: str) -> List[str]:
    return [
        f"{keyword}领域头部企业A",
        f"{keyword}创新型公司B",
        f"{keyword}传统转型企业C",
    ]


def fallback_opportunities(keyword: str) -> List[str]:
    return [
        f"{keyword}下沉市场潜力巨大",
        f"{keyword}技术创新带来新机会",
        f"{keyword}政策支持力度加大",
    ]


def random_market_size(rng: RandomSource) -> str:
    """Market size between 100 and 1099 亿人民币."""
    return f"{rng.randint(100, 1099)}亿人民币"


def random_difficulty(rng: RandomSource) -> str:
    return rng.choice(DIFFICULTY_LEVELS)


def related_keywords(keyword: str) -> List[str]:
    return [f"{keyword}市场", f"{keyword}前景", f"{keyword}投资"]
