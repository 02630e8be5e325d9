"""
Main Application Window
=======================
The top-level window hosting the word tree view.

Why is this file needed?
------------------------
1. Input: It routes keyboard shortcuts to the AnimationState.
2. Autoplay: It owns the QTimer that advances the scene periodically.
"""
import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QMainWindow

from banachtarski.config import VISIBLE_APP_NAME, WINDOW_SIZE, AUTOPLAY_INTERVAL_MS
from banachtarski.model.state import AnimationState
from banachtarski.view.widgets.word_tree_view import WordTreeView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Keys:
        Space / Right: next scene
        Left: previous scene
        + / =: deeper tree, -: shallower tree
        R: toggle autoplay
        Esc: close
    """
    def __init__(self, state: AnimationState) -> None:
        super().__init__()
        self.state: AnimationState = state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        self.tree_view = WordTreeView(self.state, self)
        self.setCentralWidget(self.tree_view)

        # --- AUTOPLAY TIMER ---
        # Runs all the time; the state decides whether a tick advances the scene
        self._timer = QTimer(self)
        self._timer.setInterval(AUTOPLAY_INTERVAL_MS)
        self._timer.timeout.connect(self.on_autoplay_tick)
        self._timer.start()

        self._key_actions = {
            Qt.Key.Key_Space: self.state.next_scene,
            Qt.Key.Key_Right: self.state.next_scene,
            Qt.Key.Key_Left: self.state.previous_scene,
            Qt.Key.Key_Plus: lambda: self.state.change_depth(+1),
            Qt.Key.Key_Equal: lambda: self.state.change_depth(+1),
            Qt.Key.Key_Minus: lambda: self.state.change_depth(-1),
            Qt.Key.Key_R: self.state.toggle_autoplay,
        }

        self.tree_view.setFocus()

    def on_autoplay_tick(self) -> None:
        if self.state.tick():
            self.tree_view.update()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = event.key()

        if key == Qt.Key.Key_Escape:
            self.close()
            return

        action = self._key_actions.get(key)
        if action is None:
            super().keyPressEvent(event)
            return

        action()
        self.tree_view.update()

    def closeEvent(self, event, /) -> None:
        """Stop the autoplay timer before the window goes away."""
        self._timer.stop()
        logger.info("Main window closed.")
        event.accept()
