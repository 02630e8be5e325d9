"""
Animation State (Data Model)
============================
This module defines the central data structure for the running animation.

Why is this file needed?
------------------------
1. State Management: It holds the current depth, scene, autoplay flag, the
   generated tree and its layout in one place.
2. Decoupling: The model functions (build, layout, classify) keep no global
   state; the window owns one AnimationState and passes it around.

Classes:
    AnimationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from banachtarski.config import DEFAULT_DEPTH, MIN_WIDTH
from banachtarski.model.layout import Position, layout_tree
from banachtarski.model.scenes import (
    SCENE_COUNT, Category, classify, next_scene, previous_scene, scene_title
)
from banachtarski.model.tree import WordTree, build_tree, clamp_depth

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """
    Singleton-like class that holds the entire state of the animation.
    Pass this instance to the views that draw it.
    """
    depth: int = DEFAULT_DEPTH
    scene: int = 0
    autoplay: bool = False
    viewport: tuple[float, float] = (MIN_WIDTH, MIN_WIDTH)

    tree: WordTree = field(init=False, repr=False)
    positions: dict[str, Position] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.depth = clamp_depth(self.depth)
        self.scene %= SCENE_COUNT
        self.rebuild()

    # --- Tree ---

    def rebuild(self) -> None:
        """Regenerate the tree for the current depth and lay it out again."""
        self.tree = build_tree(self.depth)
        self.relayout()
        logger.info(f"Tree rebuilt: depth {self.depth}, {len(self.tree)} nodes.")

    def relayout(self) -> None:
        self.positions = layout_tree(self.tree, self.viewport)

    def resize(self, width: float, height: float) -> None:
        """Store the new viewport size and recompute all positions."""
        self.viewport = (width, height)
        self.relayout()

    def set_depth(self, depth: int) -> None:
        depth = clamp_depth(depth)
        if depth == self.depth:
            return
        self.depth = depth
        self.rebuild()

    def change_depth(self, delta: int) -> None:
        """Step the depth by ``delta``, staying within the allowed range."""
        self.set_depth(self.depth + delta)

    # --- Scenes ---

    def next_scene(self) -> None:
        self.scene = next_scene(self.scene)
        logger.debug(f"Scene -> {self.scene + 1}/{SCENE_COUNT}")

    def previous_scene(self) -> None:
        self.scene = previous_scene(self.scene)
        logger.debug(f"Scene -> {self.scene + 1}/{SCENE_COUNT}")

    def toggle_autoplay(self) -> None:
        self.autoplay = not self.autoplay
        logger.info(f"Autoplay {'on' if self.autoplay else 'off'}.")

    def tick(self) -> bool:
        """
        Autoplay timer step.

        Returns:
            True if the scene advanced and the view needs repainting.
        """
        if not self.autoplay:
            return False
        self.next_scene()
        return True

    def category_of(self, word: str) -> Category:
        return classify(word, self.scene)

    def status_text(self) -> str:
        """One-line status: depth, scene, autoplay and scene title."""
        auto = "on" if self.autoplay else "off"
        return (f"Depth: {self.depth}   Scene: {self.scene + 1}/{SCENE_COUNT}   "
                f"Auto: {auto}   —   {scene_title(self.scene)}")
