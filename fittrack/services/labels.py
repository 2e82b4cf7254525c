from __future__ import annotations

"""Axis label placement for the weight chart."""

from dataclasses import dataclass
from typing import List, Sequence

from fittrack.config import settings as cfg
from fittrack.services.samples import Sample
from fittrack.services.scale import Mapping


@dataclass(frozen=True)
class Label:
    text: str
    x: float
    y: float
    centered: bool = False


def format_date(iso: str) -> str:
    """``YYYY-MM-DD`` -> ``DD.MM.YYYY``."""
    parts = iso.split("-")
    if len(parts) != 3:
        return iso
    y, m, d = parts
    return f"{d}.{m}.{y}"


def short_date(iso: str) -> str:
    return format_date(iso)[: cfg.DATE_LABEL_WIDTH]


def date_label_indices(count: int) -> List[int]:
    """Every index, or every second one past the crowding threshold; the last is always kept."""
    if count <= 0:
        return []
    step = cfg.DATE_LABEL_CROWDED_STRIDE if count > cfg.DATE_LABEL_CROWDING_THRESHOLD else 1
    indices = list(range(0, count, step))
    if indices[-1] != count - 1:
        indices.append(count - 1)
    return indices


def value_labels(mapping: Mapping, dpr: float, unit: str = cfg.WEIGHT_UNIT) -> List[Label]:
    area = mapping.area
    dom = mapping.domain
    return [
        Label(f"max: {dom.max:.1f} {unit}", area.left, area.top - cfg.VALUE_LABEL_MAX_OFFSET * dpr),
        Label(f"min: {dom.min:.1f} {unit}", area.left, area.bottom + cfg.VALUE_LABEL_MIN_OFFSET * dpr),
    ]


def date_labels(series: Sequence[Sample], mapping: Mapping, dpr: float) -> List[Label]:
    y = mapping.area.bottom + cfg.DATE_LABEL_OFFSET * dpr
    return [
        Label(short_date(series[i].date), mapping.x_at(i), y, centered=True)
        for i in date_label_indices(len(series))
    ]
