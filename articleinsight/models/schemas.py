# articleinsight/models/schemas.py
from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


DIFFICULTY_LEVELS: Tuple[str, ...] = ("低", "中", "高")
Difficulty = Literal["低", "中", "高"]
Trend = Literal["rising", "stable"]


class _CamelModel(BaseModel):
    """Base immutable model; JSON keys pakai camelCase (painPoints, marketSize)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MarketData(_CamelModel):
    """Result of the market opportunity lookup."""

    opportunities: Tuple[str, ...]
    market_size: str
    difficulty: Difficulty

    @field_validator("opportunities")
    @classmethod
    def check_non_empty(cls, items: Tuple[str, ...]) -> Tuple[str, ...]:
        if not items:
            raise ValueError("list must not be empty")
        return items


class KeywordTrends(_CamelModel):
    """Search trend snapshot for a keyword."""

    search_volume: int = Field(ge=100_000, le=1_099_999)
    trend: Trend
    related_keywords: Tuple[str, ...]


class AnalysisData(_CamelModel):
    """Merged result of a comprehensive keyword analysis.

    Every list is non-empty and ``difficulty`` is one of
    :data:`DIFFICULTY_LEVELS`.  Instances are frozen; build a new one per
    request.
    """

    pain_points: Tuple[str, ...]
    competitors: Tuple[str, ...]
    opportunities: Tuple[str, ...]
    difficulty: Difficulty
    market_size: str
    suggestions: Tuple[str, ...]

    @field_validator("pain_points", "competitors", "opportunities", "suggestions")
    @classmethod
    def check_non_empty(cls, items: Tuple[str, ...]) -> Tuple[str, ...]:
        if not items:
            raise ValueError("list must not be empty")
        return items


class AnalysisRequest(BaseModel):
    keyword: str

    @field_validator("keyword")
    @classmethod
    def strip_keyword(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("keyword must not be blank")
        return value
