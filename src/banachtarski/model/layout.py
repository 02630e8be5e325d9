"""
Level-Order Tree Layout
Places every node of a word tree on a horizontal row per depth.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from banachtarski.config import TOP_MARGIN, LEVEL_HEIGHT, MIN_WIDTH

if TYPE_CHECKING:
    import numpy.typing as npt
    from banachtarski.model.tree import WordTree


@dataclass
class Position:
    """A point in widget pixel coordinates (y grows downwards)."""
    x: float
    y: float


def level_x_coordinates(count: int, width: float) -> npt.NDArray[np.float64]:
    """
    Evenly spaced x-coordinates of ``count`` nodes across ``width``.

    The i-th node (0-indexed) sits at (i + 1) * width / (count + 1).
    """
    return np.arange(1, count + 1, dtype=np.float64) * (width / (count + 1))


def level_y_coordinate(depth: int) -> float:
    """Vertical position of a depth level."""
    return TOP_MARGIN + depth * LEVEL_HEIGHT


def layout_tree(tree: WordTree, viewport: tuple[float, float]) -> dict[str, Position]:
    """
    Compute the position of every node for a viewport.

    Args:
        tree: The word tree to lay out.
        viewport: (width, height) of the drawing area in pixels. Widths below
            MIN_WIDTH are widened to MIN_WIDTH; the height is not used.

    Returns:
        Mapping word -> Position, recomputed from scratch on each call.
    """
    width = max(MIN_WIDTH, float(viewport[0]))

    positions: dict[str, Position] = {}
    for depth, level in tree.levels().items():
        y = level_y_coordinate(depth)
        xs = level_x_coordinates(len(level), width)
        for node, x in zip(level, xs):
            positions[node.word] = Position(float(x), y)

    return positions
