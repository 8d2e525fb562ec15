"""
Execution suggestions.

Derived synchronously from the keyword and the resolved difficulty.
The result always has four entries; only the last one depends on
whether the market is rated ``高``.
"""

from __future__ import annotations

from typing import List


HIGH_DIFFICULTY = "高"


def generate_suggestions(keyword: str, difficulty: str) -> List[str]:
    """Build the four suggestion lines for ``keyword``.

    Args:
        keyword: Industry keyword interpolated into the templates.
        difficulty: Resolved difficulty label (``低``/``中``/``高``).

    Returns:
        Three fixed suggestions followed by one difficulty-specific line.
    """
    suggestions = [
        f"从{keyword}的细分需求切入市场",
        "重点关注用户体验和服务质量",
        "考虑与现有平台或企业合作",
    ]

    if difficulty == HIGH_DIFFICULTY:
        suggestions.append(f"{keyword}领域需要技术积累，建议组建专业团队")
    else:
        suggestions.append(f"{keyword}市场进入门槛相对较低，适合快速试错")

    return suggestions
