"""
Word Tree Widget
================
Draws the reduced word tree of F2 coloured by the current scene.

The widget owns no tree logic: it reads nodes, positions and categories from
the AnimationState it is given and repaints on request.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QPainter, QPen, QBrush, QFont, QFontMetricsF
from PySide6.QtWidgets import QWidget, QSizePolicy

from banachtarski.config import (
    NODE_RADIUS, LABEL_MAX_DEPTH, LEGEND_BAND_HEIGHT, EDGE_WIDTH,
    NODE_STROKE_WIDTH, LABEL_FONT_SIZE, STATUS_FONT_SIZE
)
from banachtarski.view import palette

if TYPE_CHECKING:
    from PySide6.QtGui import QPaintEvent, QResizeEvent
    from banachtarski.model.state import AnimationState
    from banachtarski.model.tree import Node

logger = logging.getLogger(__name__)


class WordTreeView(QWidget):
    """Custom-painted view of the word tree."""

    def __init__(self, state: AnimationState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._label_font = QFont()
        self._label_font.setPointSize(LABEL_FONT_SIZE)
        self._status_font = QFont()
        self._status_font.setPointSize(STATUS_FONT_SIZE)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.state.resize(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.fillRect(self.rect(), Qt.GlobalColor.white)

            painter.fillRect(QRectF(0, 0, self.width(), LEGEND_BAND_HEIGHT), palette.LEGEND_BAND)
            self._draw_edges(painter)
            self._draw_nodes(painter)
            self._draw_status(painter)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------------------

    def _point(self, word: str) -> QPointF:
        pos = self.state.positions[word]
        return QPointF(pos.x, pos.y)

    def _draw_edges(self, painter: QPainter) -> None:
        painter.setPen(QPen(palette.EDGE_COLOR, EDGE_WIDTH))
        for parent, child in self.state.tree.edges():
            painter.drawLine(self._point(parent.word), self._point(child.word))

    def _draw_nodes(self, painter: QPainter) -> None:
        painter.setFont(self._label_font)
        metrics = QFontMetricsF(self._label_font)

        # BFS order, so deeper levels are painted on top
        for node in self.state.tree:
            self._draw_node(painter, node, metrics)

    def _draw_node(self, painter: QPainter, node: Node, metrics: QFontMetricsF) -> None:
        center = self._point(node.word)
        fill, stroke = palette.colors_for(self.state.category_of(node.word), self.state.scene)

        painter.setBrush(QBrush(fill))
        painter.setPen(QPen(stroke, NODE_STROKE_WIDTH))
        painter.drawEllipse(center, NODE_RADIUS, NODE_RADIUS)

        if node.depth > LABEL_MAX_DEPTH:
            return

        label = node.label
        w = metrics.horizontalAdvance(label)
        # Baseline 2px above the circle
        painter.setPen(palette.LABEL_COLOR)
        painter.drawText(QPointF(center.x() - w / 2, center.y() - NODE_RADIUS - metrics.descent() - 2), label)

    def _draw_status(self, painter: QPainter) -> None:
        text = self.state.status_text()
        painter.setFont(self._status_font)
        metrics = QFontMetricsF(self._status_font)

        x = max(0.0, self.width() - metrics.horizontalAdvance(text) - 10)
        y = max(metrics.ascent(), self.height() - metrics.descent() - 8)
        painter.setPen(palette.STATUS_COLOR)
        painter.drawText(QPointF(x, y), text)
