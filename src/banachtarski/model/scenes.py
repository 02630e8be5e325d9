"""
Narrative Scenes
================
The animation walks through five scenes of the paradoxical decomposition of F2.
Each scene colours the nodes of the word tree by a different rule.

Scene indices are 0-based and valid in [0, SCENE_COUNT - 1].
"""
from __future__ import annotations

from enum import StrEnum

from banachtarski.model.words import in_a, in_b, in_coset_aa, in_coset_bb

SCENE_COUNT: int = 5

SCENE_TITLES: tuple[str, ...] = (
    "Scene 1: Reduced word tree of F₂",
    "Scene 2: Partition F₂ = A ∪ B (by first letter)",
    "Scene 3: aA",
    "Scene 4: bB",
    "Scene 5: aA ∪ bB = F₂ (excerpt)",
)


class Category(StrEnum):
    """Visual category of a node within a scene."""
    NEUTRAL = "neutral"
    A = "A"
    B = "B"
    AA = "aA"
    BB = "bB"
    BOTH = "aA+bB"


def _check_scene(scene: int) -> None:
    if not 0 <= scene < SCENE_COUNT:
        raise ValueError(f"Scene index {scene} outside [0, {SCENE_COUNT - 1}].")


def classify(word: str, scene: int) -> Category:
    """
    Category of ``word`` in scene ``scene``.

    Args:
        word: A reduced word.
        scene: Scene index in [0, 4].

    Returns:
        The category used to colour the node.

    Raises:
        ValueError: If ``scene`` is out of range.
    """
    _check_scene(scene)

    match scene:
        case 0:
            return Category.NEUTRAL
        case 1:
            if in_a(word):
                return Category.A
            if in_b(word):
                return Category.B
            return Category.NEUTRAL
        case 2:
            return Category.AA if in_coset_aa(word) else Category.NEUTRAL
        case 3:
            return Category.BB if in_coset_bb(word) else Category.NEUTRAL
        case _:
            is_aa = in_coset_aa(word)
            is_bb = in_coset_bb(word)
            if is_aa and is_bb:
                return Category.BOTH
            if is_aa:
                return Category.AA
            if is_bb:
                return Category.BB
            return Category.NEUTRAL


def next_scene(scene: int) -> int:
    return (scene + 1) % SCENE_COUNT


def previous_scene(scene: int) -> int:
    return (scene + SCENE_COUNT - 1) % SCENE_COUNT


def scene_title(scene: int) -> str:
    """Legend text of a scene."""
    _check_scene(scene)
    return SCENE_TITLES[scene]
