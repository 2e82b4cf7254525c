from __future__ import annotations

from typing import Tuple

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPainterPath, QPen

from fittrack.config import settings as cfg
from fittrack.services.chart_frame import Frame
from fittrack.services.labels import Label


def _rgba(rgba: Tuple[int, int, int, float]) -> QColor:
    r, g, b, a = rgba
    c = QColor(r, g, b)
    c.setAlphaF(a)
    return c


def _text_color(alpha: float) -> QColor:
    c = QColor(cfg.TEXT_COLOR)
    c.setAlphaF(alpha)
    return c


def _font(px: float, dpr: float) -> QFont:
    font = QFont(cfg.FONT_FAMILY)
    font.setPixelSize(max(1, round(px * dpr)))
    return font


def _draw_label(p: QPainter, label: Label, metrics: QFontMetricsF) -> None:
    x = label.x
    if label.centered:
        x -= metrics.horizontalAdvance(label.text) / 2.0
    p.drawText(QPointF(x, label.y), label.text)


def paint_frame(p: QPainter, frame: Frame) -> None:
    """Clear the whole surface and draw ``frame`` onto it."""
    dpr = frame.dpr
    p.setRenderHint(QPainter.Antialiasing)
    p.setCompositionMode(QPainter.CompositionMode_Source)
    p.fillRect(0, 0, frame.viewport.width, frame.viewport.height, Qt.transparent)
    p.setCompositionMode(QPainter.CompositionMode_SourceOver)

    if frame.placeholder is not None:
        p.save()
        p.setPen(_text_color(cfg.PLACEHOLDER_ALPHA))
        font = _font(cfg.PLACEHOLDER_FONT_PX, dpr)
        p.setFont(font)
        _draw_label(p, frame.placeholder, QFontMetricsF(font))
        p.restore()
        return

    # grid
    p.save()
    p.setPen(QPen(_rgba(cfg.GRID_COLOR_RGBA), cfg.GRID_LINE_WIDTH * dpr))
    for x1, y1, x2, y2 in frame.grid:
        p.drawLine(QPointF(x1, y1), QPointF(x2, y2))
    p.restore()

    # series line
    stroke = QColor(frame.color)
    if frame.polyline:
        p.save()
        pen = QPen(stroke, cfg.SERIES_LINE_WIDTH * dpr)
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        p.setPen(pen)
        p.setBrush(Qt.NoBrush)
        path = QPainterPath(QPointF(*frame.polyline[0]))
        for x, y in frame.polyline[1:]:
            path.lineTo(x, y)
        p.drawPath(path)
        p.restore()

    # points on top of the line
    p.save()
    p.setBrush(QBrush(stroke))
    p.setPen(QPen(_rgba(cfg.POINT_OUTLINE_RGBA), cfg.POINT_OUTLINE_WIDTH * dpr))
    radius = cfg.POINT_RADIUS * dpr
    for x, y in frame.points:
        p.drawEllipse(QPointF(x, y), radius, radius)
    p.restore()

    # max/min
    p.save()
    p.setPen(_text_color(cfg.VALUE_LABEL_ALPHA))
    font = _font(cfg.VALUE_LABEL_FONT_PX, dpr)
    p.setFont(font)
    metrics = QFontMetricsF(font)
    for label in frame.value_labels:
        _draw_label(p, label, metrics)
    p.restore()

    # dates
    p.save()
    p.setPen(_text_color(cfg.DATE_LABEL_ALPHA))
    font = _font(cfg.DATE_LABEL_FONT_PX, dpr)
    p.setFont(font)
    metrics = QFontMetricsF(font)
    for label in frame.date_labels:
        _draw_label(p, label, metrics)
    p.restore()
