from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional


@dataclass(frozen=True)
class Sample:
    date: str  # YYYY-MM-DD
    value: float


def _finite(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def prepare_series(entries: Iterable[Mapping[str, Any]], field: str = "weight") -> List[Sample]:
    """
    Keep entries carrying a finite ``field`` value, oldest date first.

    Dates are zero-padded ISO strings, so plain string ordering is date ordering.
    Empty and single-sample results are returned as-is; the chart decides what
    to draw for them.
    """
    samples: List[Sample] = []
    for entry in entries:
        value = _finite(entry.get(field))
        if value is None:
            continue
        samples.append(Sample(date=str(entry.get("date", "")), value=value))
    samples.sort(key=lambda s: s.date)
    return samples
