"""
Application Initialization
==========================
This module constructs the model and the main window and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Instantiates the animation state (AnimationState).
3. Instantiates the Main Window (View), passing the state into it.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from banachtarski.config import APP_ID, VISIBLE_APP_NAME, DEFAULT_DEPTH, MIN_DEPTH, MAX_DEPTH
from banachtarski.logging_config import setup_logging
from banachtarski.model.scenes import SCENE_COUNT
from banachtarski.model.state import AnimationState
from banachtarski.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="banachtarski",
        description="Animated walk through the paradoxical decomposition of the free group F2.",
    )
    parser.add_argument(
        "--depth", type=int, default=DEFAULT_DEPTH,
        help=f"initial tree depth, clamped to [{MIN_DEPTH}, {MAX_DEPTH}] (default: %(default)s)",
    )
    parser.add_argument(
        "--scene", type=int, default=1,
        help=f"initial scene, 1..{SCENE_COUNT} (default: %(default)s)",
    )
    parser.add_argument("--autoplay", action="store_true", help="start with autoplay enabled")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="console log level (default: %(default)s)",
    )
    parser.add_argument(
        "--trace-scenes", action="store_true",
        help="log every scene change, including autoplay ticks, at DEBUG level",
    )
    parser.add_argument("--log-file", default=None, help="optional path to also write the log to")
    return parser.parse_args(argv)


def create_app(argv: Sequence[str]) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv))
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(
        level=getattr(logging, args.log_level),
        log_file=args.log_file,
        trace_scenes=args.trace_scenes,
    )

    # 2. Create the Qt Application
    app = create_app(sys.argv[:1])

    # 3. Initialize the Data Model
    state = AnimationState(depth=args.depth, scene=args.scene - 1, autoplay=args.autoplay)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
