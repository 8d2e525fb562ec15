"""
Markdown report formatter.

Pure rendering of an :class:`AnalysisData` into the ArticleInsight
report layout.  The only varying input besides the data is the clock,
which can be passed as ``now``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from articleinsight.models.schemas import AnalysisData
from articleinsight.utils.helper import (
    format_locale_date,
    format_locale_datetime,
    local_now,
)


NEXT_STEPS = (
    "深入研究目标用户群体",
    "制作MVP原型验证假设",
    "寻找种子用户和早期反馈",
    "根据反馈迭代优化产品",
)


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def export_to_markdown(
    keyword: str, data: AnalysisData, now: Optional[datetime] = None
) -> str:
    """Render the analysis of ``keyword`` as a Markdown document.

    Args:
        keyword: Industry keyword, used in the title.
        data: Analysis result to render.
        now: Timestamp embedded in the overview and footer.  Defaults to
            the current time in the report time zone.

    Returns:
        The report text.
    """
    now = now or local_now()
    next_steps = "\n".join(f"{i}. {step}" for i, step in enumerate(NEXT_STEPS, 1))

    return f"""# {keyword}行业商业机会分析报告

## 📊 市场概览
- **市场规模**: {data.market_size}
- **进入难度**: {data.difficulty}
- **分析时间**: {format_locale_date(now)}

## 🔥 市场痛点分析
{_bullets(data.pain_points)}

## 💰 商业机会
{_bullets(data.opportunities)}

## ⚡ 竞品格局
{_bullets(data.competitors)}

## 💡 执行建议
{_bullets(data.suggestions)}

## 🎯 下一步行动
{next_steps}

---
*本报告由 ArticleInsight 自动生成 | 生成时间: {format_locale_datetime(now)}*
*📧 想要更深入的分析？联系我们获取定制报告*"""
