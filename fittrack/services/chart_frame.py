from __future__ import annotations

"""
Frame composition for the animated weight chart.

``build_plan`` does everything that is fixed for one animation (series,
viewport, domain, mapping, trend color, labels). ``compose_frame`` turns a
plan plus an animation progress in ``[0, 1]`` into a flat description of what
to draw; ``fittrack.gui.chart_painter`` turns that description into QPainter
calls. Nothing here touches Qt.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping as MappingT, Optional, Tuple, Union

from fittrack.config import settings as cfg
from fittrack.services.labels import Label, date_labels, value_labels
from fittrack.services.samples import Sample, prepare_series
from fittrack.services.scale import Mapping, Viewport, build_mapping
from fittrack.services.trend import Trend, series_trend, trend_color

Point = Tuple[float, float]
Segment = Tuple[float, float, float, float]


@dataclass(frozen=True)
class ChartPlan:
    series: Tuple[Sample, ...]
    viewport: Viewport
    dpr: float
    mapping: Mapping
    trend: Trend
    color: str
    value_labels: Tuple[Label, ...]
    date_labels: Tuple[Label, ...]

    def vertex(self, index: int) -> Point:
        return self.mapping.x_at(index), self.mapping.y_at(self.series[index].value)


@dataclass(frozen=True)
class Placeholder:
    viewport: Viewport
    dpr: float
    message: Label


@dataclass
class Frame:
    viewport: Viewport
    dpr: float
    color: str = cfg.TREND_COLOR_FLAT
    grid: List[Segment] = field(default_factory=list)
    polyline: List[Point] = field(default_factory=list)
    points: List[Point] = field(default_factory=list)
    value_labels: List[Label] = field(default_factory=list)
    date_labels: List[Label] = field(default_factory=list)
    placeholder: Optional[Label] = None


def build_plan(
    entries: Iterable[MappingT[str, Any]],
    viewport: Viewport,
    dpr: float,
    value_field: str = cfg.CHART_FIELD_DEFAULT,
    unit: str = cfg.WEIGHT_UNIT,
) -> Union[ChartPlan, Placeholder]:
    series = prepare_series(entries, value_field)
    if len(series) < 2:
        px, py = cfg.PLACEHOLDER_POS
        message = cfg.PLACEHOLDER_TEXT.format(field=value_field)
        return Placeholder(viewport, dpr, Label(message, px * dpr, py * dpr))
    mapping = build_mapping(series, viewport, dpr)
    trend = series_trend(series)
    return ChartPlan(
        series=tuple(series),
        viewport=viewport,
        dpr=dpr,
        mapping=mapping,
        trend=trend,
        color=trend_color(trend),
        value_labels=tuple(value_labels(mapping, dpr, unit)),
        date_labels=tuple(date_labels(series, mapping, dpr)),
    )


def grid_lines(plan: ChartPlan) -> List[Segment]:
    area = plan.mapping.area
    steps = cfg.CHART_GRID_LINES - 1
    lines: List[Segment] = []
    for k in range(cfg.CHART_GRID_LINES):
        y = area.top + (k * (area.bottom - area.top)) / steps
        lines.append((area.left, y, area.right, y))
    return lines


def compose_frame(plan: ChartPlan, progress: float) -> Frame:
    """Everything visible at ``progress``: full segments up to floor(p), then a partial one."""
    progress = min(1.0, max(0.0, progress))
    n = len(plan.series)
    reach = progress * (n - 1)
    last_full = math.floor(reach)
    frac = reach - last_full

    polyline = [plan.vertex(i) for i in range(last_full + 1)]
    if last_full < n - 1:
        x1, y1 = plan.vertex(last_full)
        x2, y2 = plan.vertex(last_full + 1)
        polyline.append((x1 + (x2 - x1) * frac, y1 + (y2 - y1) * frac))

    return Frame(
        viewport=plan.viewport,
        dpr=plan.dpr,
        color=plan.color,
        grid=grid_lines(plan),
        polyline=polyline,
        points=[plan.vertex(i) for i in range(n) if i <= reach],
        value_labels=list(plan.value_labels),
        date_labels=list(plan.date_labels),
    )


def placeholder_frame(placeholder: Placeholder) -> Frame:
    return Frame(viewport=placeholder.viewport, dpr=placeholder.dpr, placeholder=placeholder.message)
