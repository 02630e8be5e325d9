"""
Node Colours
Maps scene categories to fill/stroke colours.
"""
from __future__ import annotations

from PySide6.QtGui import QColor

from banachtarski.model.scenes import Category

COLOR_A = QColor(80, 115, 205)
COLOR_AA = QColor(50, 90, 170)
COLOR_B = QColor(230, 150, 60)
COLOR_BB = QColor(200, 120, 40)

EDGE_COLOR = QColor(0, 0, 0, 70)
NODE_FILL = QColor(240, 240, 240, 240)
NODE_STROKE = QColor(60, 60, 60, 120)
DIMMED_FILL = QColor(230, 230, 230)
LEGEND_BAND = QColor(0, 0, 0, 8)
LABEL_COLOR = QColor(0, 0, 0)
STATUS_COLOR = QColor(105, 105, 105)

STROKE_DARKEN = 0.6


def darken(c: QColor, f: float) -> QColor:
    """Scale the RGB channels by ``f`` (alpha becomes opaque)."""
    return QColor(int(c.red() * f), int(c.green() * f), int(c.blue() * f))


def mix(a: QColor, b: QColor, t: float) -> QColor:
    """Linear blend of two colours, t=0 -> a, t=1 -> b."""
    return QColor(
        int(a.red() * (1 - t) + b.red() * t),
        int(a.green() * (1 - t) + b.green() * t),
        int(a.blue() * (1 - t) + b.blue() * t),
    )


_CATEGORY_FILLS: dict[Category, QColor] = {
    Category.A: COLOR_A,
    Category.B: COLOR_B,
    Category.AA: COLOR_AA,
    Category.BB: COLOR_BB,
    Category.BOTH: mix(COLOR_AA, COLOR_BB, 0.5),
}


def colors_for(category: Category, scene: int) -> tuple[QColor, QColor]:
    """
    Fill and stroke colour of a node.

    Neutral nodes keep the plain node colours in the first two scenes and are
    dimmed in the coset scenes, so the highlighted coset stands out.
    """
    fill = _CATEGORY_FILLS.get(category)
    if fill is not None:
        return fill, darken(fill, STROKE_DARKEN)
    if scene >= 2:
        return DIMMED_FILL, NODE_STROKE
    return NODE_FILL, NODE_STROKE
