"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
word-tree model and the window that draws it.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (depth bounds, margins, timer
   intervals) scattered throughout the code.
2. Consistency: The model clamps to the same depth range the window offers
   through its keyboard shortcuts.

Exports:
    MIN_DEPTH, MAX_DEPTH, DEFAULT_DEPTH (int): Tree generation depth bounds.
    TOP_MARGIN, LEVEL_HEIGHT, MIN_WIDTH (float): Layout constants in pixels.
    AUTOPLAY_INTERVAL_MS (int): Period of the autoplay timer.
"""

# Application
VISIBLE_APP_NAME: str = "Banach-Tarski: F2"
APP_ID: str = "banach-tarski-animation"
WINDOW_SIZE: tuple[int, int] = (1400, 900)

# Tree generation
MIN_DEPTH: int = 1
MAX_DEPTH: int = 7
DEFAULT_DEPTH: int = 4

# Layout (pixels)
TOP_MARGIN: float = 150.0
LEVEL_HEIGHT: float = 100.0
MIN_WIDTH: float = 200.0

# Drawing
NODE_RADIUS: float = 10.0
LABEL_MAX_DEPTH: int = 4  # deeper levels are too dense for text
LEGEND_BAND_HEIGHT: float = 140.0
EDGE_WIDTH: float = 1.2
NODE_STROKE_WIDTH: float = 1.6
LABEL_FONT_SIZE: int = 11
STATUS_FONT_SIZE: int = 12

# Autoplay
AUTOPLAY_INTERVAL_MS: int = 1600
