from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from PySide6.QtCore import QElapsedTimer, QEvent, QRectF, QTimer, Qt
from PySide6.QtGui import QColor, QImage, QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from fittrack.config import settings as cfg
from fittrack.gui.chart_painter import paint_frame
from fittrack.gui.frame_scheduler import Clock, FrameScheduler, RequestTick
from fittrack.services.chart_frame import (
    ChartPlan,
    Frame,
    Placeholder,
    build_plan,
    compose_frame,
    placeholder_frame,
)
from fittrack.services.scale import Viewport

log = logging.getLogger(__name__)


class WeightChart(QWidget):
    """Animated line chart of one numeric field of the entry log."""

    def __init__(
        self,
        parent=None,
        *,
        value_field: str = cfg.CHART_FIELD_DEFAULT,
        unit: str = cfg.WEIGHT_UNIT,
        clock: Optional[Clock] = None,
        request_tick: Optional[RequestTick] = None,
        duration_ms: float = cfg.CHART_DURATION_MS,
    ):
        super().__init__(parent)
        self.value_field = value_field
        self.unit = unit
        self.setFixedHeight(cfg.CHART_HEIGHT)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

        self._elapsed = QElapsedTimer()
        self._elapsed.start()
        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.setInterval(cfg.CHART_TICK_MS)
        self._frame_timer.timeout.connect(self._on_frame_timer)
        self._pending_tick = None
        self.scheduler = FrameScheduler(
            clock or self._elapsed_ms,
            request_tick or self._next_frame,
            duration_ms,
        )
        self.surface: Optional[QImage] = None
        self.last_frame: Optional[Frame] = None
        self._entries: List[Mapping[str, Any]] = []

    def _elapsed_ms(self) -> float:
        return self._elapsed.nsecsElapsed() / 1_000_000.0

    def _next_frame(self, callback) -> None:
        self._pending_tick = callback
        self._frame_timer.start()

    def _on_frame_timer(self) -> None:
        callback, self._pending_tick = self._pending_tick, None
        if callback is not None:
            callback()

    def set_value_field(self, value_field: str, unit: str) -> None:
        self.value_field = value_field
        self.unit = unit
        self.render_chart(self._entries)

    def render_chart(self, entries: Iterable[Mapping[str, Any]]) -> None:
        """Redraw from scratch for ``entries``; restarts the reveal animation."""
        self._entries = list(entries)
        dpr = self.devicePixelRatioF()
        viewport = Viewport.for_container(self.width(), dpr)

        surface = QImage(max(1, viewport.width), max(1, viewport.height), QImage.Format_ARGB32_Premultiplied)
        surface.fill(Qt.transparent)
        self.surface = surface

        plan = build_plan(self._entries, viewport, dpr, self.value_field, self.unit)
        if isinstance(plan, Placeholder):
            self.scheduler.cancel()
            log.debug("Chart placeholder (%d entries, field=%s)", len(self._entries), self.value_field)
            self._paint(placeholder_frame(plan))
            return

        log.debug("Chart render: %d points, trend=%s, viewport=%s", len(plan.series), plan.trend.value, viewport)
        self.scheduler.start(lambda progress, plan=plan: self._draw_pass(plan, progress))

    def _draw_pass(self, plan: ChartPlan, progress: float) -> None:
        self._paint(compose_frame(plan, progress))

    def _paint(self, frame: Frame) -> None:
        if self.surface is None:
            return
        self.last_frame = frame
        p = QPainter(self.surface)
        try:
            paint_frame(p, frame)
        finally:
            p.end()
        self.update()

    def event(self, e):
        if e.type() == QEvent.DevicePixelRatioChange:
            # moved to a screen with another density; surface size is stale
            self.render_chart(self._entries)
        return super().event(e)

    def resizeEvent(self, e):
        super().resizeEvent(e)
        if e.oldSize().width() != e.size().width():
            self.render_chart(self._entries)

    def paintEvent(self, e):
        p = QPainter(self)
        p.fillRect(self.rect(), QColor(cfg.CHART_BACKGROUND))
        if self.surface is not None:
            # surface is in device pixels; map it back onto the logical rect
            dpr = self.devicePixelRatioF()
            target = QRectF(0, 0, self.surface.width() / dpr, self.surface.height() / dpr)
            p.drawImage(target, self.surface)
        p.end()
