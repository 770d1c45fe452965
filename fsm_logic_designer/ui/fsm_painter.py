# fsm_logic_designer/ui/fsm_painter.py
"""
Draws an FSM onto a QPainter.

`QPainterGraphic` implements the drawing surface expected by `FSM.draw_to`,
mapping the style names used by states and transitions to Qt pens and brushes.
"""

import logging
from typing import Dict, Sequence, Tuple

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QPolygonF, QTextOption

from ..core.fsm import FSM
from ..core.vector import Vector
from ..utils import config

logger = logging.getLogger(__name__)

_TEXT_BOX_WIDTH = 200.0
_TEXT_BOX_HEIGHT = 20.0


def _to_qpoint(v: Vector) -> QPointF:
    return QPointF(v.x, v.y)


class QPainterGraphic:
    """Graphic implementation backed by a QPainter."""

    def __init__(self, painter: QPainter):
        self.painter = painter
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self._font = QFont(config.APP_FONT_FAMILY.split(",")[0], config.APP_FONT_SIZE_STANDARD)
        self._styles: Dict[str, Tuple[QPen, QBrush]] = {
            "state": (QPen(QColor(config.COLOR_ITEM_STATE_DEFAULT_BORDER), config.DEFAULT_STATE_BORDER_WIDTH),
                      QBrush(QColor(config.COLOR_ITEM_STATE_DEFAULT_BG))),
            "transition": (QPen(QColor(config.COLOR_ITEM_TRANSITION_DEFAULT), config.DEFAULT_TRANSITION_LINE_WIDTH),
                           QBrush(Qt.BrushStyle.NoBrush)),
            "arrow": (QPen(QColor(config.COLOR_ITEM_TRANSITION_DEFAULT), 1.0),
                      QBrush(QColor(config.COLOR_ITEM_TRANSITION_DEFAULT))),
            "text": (QPen(QColor(config.COLOR_TEXT_PRIMARY)), QBrush(Qt.BrushStyle.NoBrush)),
            "values": (QPen(QColor(config.COLOR_TEXT_SECONDARY)), QBrush(Qt.BrushStyle.NoBrush)),
            "label": (QPen(QColor(config.COLOR_ITEM_TRANSITION_DEFAULT)), QBrush(Qt.BrushStyle.NoBrush)),
        }
        self._text_option = QTextOption(Qt.AlignmentFlag.AlignCenter)
        self.items_drawn = 0

    def _apply_style(self, style: str):
        pen, brush = self._styles.get(style, self._styles["text"])
        self.painter.setPen(pen)
        self.painter.setBrush(brush)

    def draw_circle(self, center: Vector, radius: float, style: str) -> None:
        self._apply_style(style)
        self.painter.drawEllipse(_to_qpoint(center), radius, radius)
        self.items_drawn += 1

    def draw_polyline(self, points: Sequence[Vector], style: str) -> None:
        if len(points) < 2:
            return
        self._apply_style(style)
        self.painter.drawPolyline(QPolygonF([_to_qpoint(p) for p in points]))
        self.items_drawn += 1

    def draw_polygon(self, points: Sequence[Vector], style: str) -> None:
        if len(points) < 3:
            return
        self._apply_style(style)
        self.painter.drawPolygon(QPolygonF([_to_qpoint(p) for p in points]))
        self.items_drawn += 1

    def draw_text(self, pos: Vector, text: str, style: str) -> None:
        self._apply_style(style)
        self.painter.setFont(self._font)
        rect = QRectF(pos.x - _TEXT_BOX_WIDTH / 2, pos.y - _TEXT_BOX_HEIGHT / 2,
                      _TEXT_BOX_WIDTH, _TEXT_BOX_HEIGHT)
        self.painter.drawText(rect, text, self._text_option)
        self.items_drawn += 1


def paint_fsm(painter: QPainter, fsm: FSM, offset: Vector = Vector()) -> QPainterGraphic:
    """Paints the whole FSM, translated by `offset` (e.g. the widget center)."""
    painter.save()
    try:
        painter.translate(offset.x, offset.y)
        graphic = QPainterGraphic(painter)
        fsm.draw_to(graphic)
    finally:
        painter.restore()
    logger.debug(f"Painted {graphic.items_drawn} primitives of {fsm!r}")
    return graphic
