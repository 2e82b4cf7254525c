from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from fittrack.config.settings import WEIGHT_UNIT
from fittrack.services.trend import weight_delta


@dataclass
class Stats:
    count: int
    first_weight: Optional[float]
    last_weight: Optional[float]
    avg_calories: Optional[int]
    weight_diff: Optional[float]


def _finite_or_none(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


def calc_stats(entries: Sequence[Mapping[str, Any]]) -> Optional[Stats]:
    """Summary tiles for the entry list; None when there is nothing logged yet."""
    if not entries:
        return None

    ordered = sorted(entries, key=lambda e: str(e.get("date", "")))
    first_w = ordered[0].get("weight")
    last_w = ordered[-1].get("weight")

    calories: List[float] = [c for c in (_finite_or_none(e.get("calories")) for e in entries) if c is not None]
    # half-up, not banker's rounding
    avg_cal = math.floor(sum(calories) / len(calories) + 0.5) if calories else None

    return Stats(
        count=len(entries),
        first_weight=first_w,
        last_weight=last_w,
        avg_calories=avg_cal,
        weight_diff=weight_delta(_finite_or_none(first_w), _finite_or_none(last_w)),
    )


def format_weight_diff(diff: Optional[float], unit: str = WEIGHT_UNIT) -> str:
    if diff is None:
        return "—"
    # plain number text: -1 kg, +1.2 kg; -0.0 prints as 0
    diff = diff + 0.0
    if diff > 0:
        return f"+{diff:g} {unit}"
    return f"{diff:g} {unit}"
