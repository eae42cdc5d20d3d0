"""Synthetic monthly trend series for prompt volumes.

The series is not a seasonality model: each period is the base volume scaled by
an independent factor in [0.7, 1.3].
"""

from __future__ import annotations

import random
from datetime import date
from typing import List, Optional, Tuple

from brandradar.ingestion.article_types import TrendPoint


TREND_PERIODS = 6
TREND_VARIANCE = (0.7, 1.3)


def rolling_months(today: date, periods: int = TREND_PERIODS) -> List[Tuple[int, int]]:
    """(year, month) pairs for the window ending at ``today``'s month, oldest first."""
    out = []
    index = today.year * 12 + (today.month - 1)
    for back in range(periods - 1, -1, -1):
        y, m = divmod(index - back, 12)
        out.append((y, m + 1))
    return out


def period_label(year: int, month: int) -> str:
    return date(year, month, 1).strftime("%b %Y")


def synthesize_trend(
    base: int,
    rng: Optional[random.Random] = None,
    *,
    today: Optional[date] = None,
) -> Tuple[TrendPoint, ...]:
    rng = rng or random.Random()
    today = today or date.today()
    lo, hi = TREND_VARIANCE
    points = []
    for year, month in rolling_months(today):
        factor = lo + rng.random() * (hi - lo)
        points.append(TrendPoint(period=period_label(year, month), volume=int(base * factor)))
    return tuple(points)
