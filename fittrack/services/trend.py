from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from fittrack.config import settings as cfg
from fittrack.services.samples import Sample


class Trend(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    FLAT = "flat"


_COLORS = {
    Trend.FALLING: cfg.TREND_COLOR_FALLING,
    Trend.RISING: cfg.TREND_COLOR_RISING,
    Trend.FLAT: cfg.TREND_COLOR_FLAT,
}


def classify_trend(first: float, last: float, epsilon: float = cfg.TREND_EPSILON) -> Trend:
    """
    delta = round(last - first, 2)
    delta < -eps -> FALLING, delta > eps -> RISING, otherwise FLAT
    """
    delta = round(last - first, 2)
    if delta < -epsilon:
        return Trend.FALLING
    if delta > epsilon:
        return Trend.RISING
    return Trend.FLAT


def trend_color(trend: Trend) -> str:
    return _COLORS[trend]


def series_trend(series: Sequence[Sample]) -> Trend:
    if len(series) < 2:
        return Trend.FLAT
    return classify_trend(series[0].value, series[-1].value)


def weight_delta(first: Optional[float], last: Optional[float]) -> Optional[float]:
    """One-decimal net change, or None when either end is missing."""
    if first is None or last is None:
        return None
    return round(last - first, 1)
