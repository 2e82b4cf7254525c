from __future__ import annotations

"""Value domain and pixel mapping for the weight chart."""

import math
from dataclasses import dataclass
from typing import Sequence

from fittrack.config import settings as cfg
from fittrack.services.samples import Sample


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int

    @staticmethod
    def for_container(container_width: float, dpr: float) -> "Viewport":
        """Device-pixel surface size for a container of ``container_width`` logical px."""
        return Viewport(
            width=max(0, math.floor(container_width * dpr)),
            height=math.floor(cfg.CHART_HEIGHT * dpr),
        )


@dataclass(frozen=True)
class Padding:
    x: float
    top: float
    bottom: float

    @staticmethod
    def for_density(dpr: float) -> "Padding":
        return Padding(
            x=cfg.CHART_PAD_X * dpr,
            top=cfg.CHART_PAD_TOP * dpr,
            bottom=cfg.CHART_PAD_BOTTOM * dpr,
        )


@dataclass(frozen=True)
class PlotArea:
    left: float
    right: float
    top: float
    bottom: float

    @staticmethod
    def inside(viewport: Viewport, padding: Padding) -> "PlotArea":
        return PlotArea(
            left=padding.x,
            right=viewport.width - padding.x,
            top=padding.top,
            bottom=viewport.height - padding.bottom,
        )


@dataclass(frozen=True)
class Domain:
    min: float
    max: float

    @property
    def range(self) -> float:
        # flat series still gets a usable unit span
        return (self.max - self.min) or 1.0


def compute_domain(series: Sequence[Sample]) -> Domain:
    if not series:
        raise ValueError("cannot compute a domain for an empty series")
    values = [s.value for s in series]
    return Domain(min=min(values), max=max(values))


@dataclass(frozen=True)
class Mapping:
    """Index/value to device-pixel transforms for one render."""

    domain: Domain
    area: PlotArea
    count: int

    def x_at(self, index: float) -> float:
        a = self.area
        return a.left + (index * (a.right - a.left)) / (self.count - 1)

    def y_at(self, value: float) -> float:
        a = self.area
        return a.bottom - ((value - self.domain.min) * (a.bottom - a.top)) / self.domain.range


def build_mapping(series: Sequence[Sample], viewport: Viewport, dpr: float) -> Mapping:
    if len(series) < 2:
        raise ValueError(f"mapping needs at least 2 samples, got {len(series)}")
    return Mapping(
        domain=compute_domain(series),
        area=PlotArea.inside(viewport, Padding.for_density(dpr)),
        count=len(series),
    )
