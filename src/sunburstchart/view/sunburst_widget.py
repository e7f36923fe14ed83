"""
Sunburst Widget
===============
A QWidget that paints a sunburst chart and forwards mouse input to the
InteractionLayer.

Signals:
    segment_clicked(object): The source Node of a clicked segment.
    hover_label_changed(str): The new center label after hover/unhover.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from sunburstchart.config import HOVER_OPACITY, LABEL_COLOR, STROKE_COLOR, STROKE_WIDTH
from sunburstchart.model.chart import ChartGeometry, build_chart
from sunburstchart.model.geometry_primitives import Arc as ArcPrimitive, Point
from sunburstchart.model.interaction import InteractionLayer
from sunburstchart.model.paths import PathDescriptor
from sunburstchart.model.tree import Node

logger = logging.getLogger(__name__)


def to_painter_path(path: PathDescriptor) -> QPainterPath:
    """
    Replay a PathDescriptor on a QPainterPath.

    Qt measures angles counter-clockwise from 3 o'clock, the chart clockwise
    from 12 o'clock: qt = 90 - chart, and sweeps change sign.
    """
    qpath = QPainterPath()
    if path.is_empty:
        return qpath

    qpath.moveTo(QPointF(path.start.x, path.start.y))
    for segment in path.segments:
        if isinstance(segment, ArcPrimitive):
            r = segment.radius
            rect = QRectF(segment.center.x - r, segment.center.y - r, 2 * r, 2 * r)
            qpath.arcTo(rect, 90.0 - segment.from_angle, -(segment.to_angle - segment.from_angle))
        else:
            qpath.lineTo(QPointF(segment.end.x, segment.end.y))
    if path.closed:
        qpath.closeSubpath()
    return qpath


class SunburstWidget(QWidget):
    segment_clicked = Signal(object)
    hover_label_changed = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setMinimumSize(160, 160)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self._root: Optional[Node] = None
        self._chart: Optional[ChartGeometry] = None
        self._painter_paths: dict[tuple[int, ...], QPainterPath] = {}

        self.interaction = InteractionLayer(
            on_click=self.segment_clicked.emit,
            on_hover_changed=self._on_hover_changed,
        )

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_data(self, root: Optional[Node]) -> None:
        """Show a new tree (None clears the chart)."""
        self._root = root
        self._rebuild()
        self.update()

    def chart(self) -> Optional[ChartGeometry]:
        return self._chart

    def center_label(self) -> str:
        return self.interaction.label

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event) -> None:
        self._rebuild()
        super().resizeEvent(event)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        if self._chart is not None:
            pen = QPen(QColor(STROKE_COLOR))
            pen.setWidthF(STROKE_WIDTH)
            painter.setPen(pen)

            hovered = self.interaction.hovered_id
            for segment in self._chart.visible_segments:
                arc = segment.arc
                painter.setOpacity(HOVER_OPACITY if arc.node_id == hovered else 1.0)
                painter.setBrush(QColor(arc.color))
                painter.drawPath(self._painter_paths[arc.node_id])

            painter.setOpacity(1.0)
            font = QFont(painter.font())
            font.setBold(True)
            painter.setFont(font)
            painter.setPen(QColor(LABEL_COLOR))
            painter.drawText(self.rect(), Qt.AlignCenter, self.center_label())

        painter.end()

    def mouseMoveEvent(self, event) -> None:
        pos = event.position()
        before = self.interaction.hovered_id
        self.interaction.pointer_move(pos.x(), pos.y())
        if self.interaction.hovered_id != before:
            self.update()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event) -> None:
        self.interaction.on_pointer_leave()
        self.update()
        super().leaveEvent(event)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.interaction.pointer_press(pos.x(), pos.y())
        super().mousePressEvent(event)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _rebuild(self) -> None:
        """Lay out the tree for the current widget size."""
        w, h = self.width(), self.height()
        if self._root is None or w <= 0 or h <= 0:
            self._chart = None
            self._painter_paths = {}
            self.interaction.set_geometry([], Point(w / 2.0, h / 2.0), root_label="")
            return

        self._chart = build_chart(self._root, w, h)
        self._painter_paths = {
            segment.arc.node_id: to_painter_path(segment.path)
            for segment in self._chart.visible_segments
        }
        self.interaction.set_geometry(self._chart.arcs, self._chart.center, root_label=self._chart.root_label)

    def _on_hover_changed(self, label: str) -> None:
        self.hover_label_changed.emit(label)
