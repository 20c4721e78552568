"""Least-squares trendline of amount against sequence index"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Trendline:
    """Fitted line y = intercept + slope * index"""
    slope: float
    intercept: float

    def value_at(self, index: float) -> float:
        return self.intercept + self.slope * index


def fit_trendline(amounts: Sequence[float]) -> Optional[Trendline]:
    """
    Fit an ordinary least-squares line through (index, amount) points

    x is the zero-based position in the sequence, not elapsed time.

    slope = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
    intercept = (Sy - slope*Sx) / n

    Args:
        amounts: Amounts in chronological order

    Returns:
        Trendline or None if fewer than 2 points
    """
    n = len(amounts)
    if n < 2:
        return None

    # Indices 0..n-1 are distinct, so the denominator is non-zero for n >= 2
    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_xx = 0.0
    for x, y in enumerate(amounts):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n

    return Trendline(slope=slope, intercept=intercept)
