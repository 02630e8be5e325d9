"""
Tests for the scene classification.
Run with: python -m pytest tests/ -v
"""
import pytest

from banachtarski.model.scenes import (
    SCENE_COUNT,
    Category,
    classify,
    next_scene,
    previous_scene,
    scene_title,
)
from banachtarski.model.tree import build_tree
from banachtarski.model.words import in_coset_aa, in_coset_bb


class TestClassify:
    """Test the per-scene colouring rules."""

    @pytest.mark.parametrize("word", ["", "a", "bA", "BBa"])
    def test_scene_one_is_neutral(self, word):
        assert classify(word, 0) is Category.NEUTRAL

    def test_partition_scene(self):
        assert classify("", 1) is Category.A
        assert classify("a", 1) is Category.A
        assert classify("Ab", 1) is Category.A
        assert classify("b", 1) is Category.B
        assert classify("Ba", 1) is Category.B

    def test_aa_scene(self):
        assert classify("a", 2) is Category.AA
        assert classify("ab", 2) is Category.NEUTRAL

    def test_bb_scene(self):
        assert classify("ab", 3) is Category.BB
        assert classify("b", 3) is Category.NEUTRAL

    def test_union_scene(self):
        assert classify("", 4) is Category.BOTH
        assert classify("aa", 4) is Category.BOTH
        assert classify("ab", 4) is Category.BB
        assert classify("ba", 4) is Category.AA

    def test_union_scene_matches_predicates(self):
        for node in build_tree(4):
            w = node.word
            category = classify(w, 4)
            assert (category is Category.BOTH) == (in_coset_aa(w) and in_coset_bb(w))
            assert category is not Category.NEUTRAL

    def test_partition_scene_never_neutral(self):
        for node in build_tree(3):
            assert classify(node.word, 1) in (Category.A, Category.B)

    @pytest.mark.parametrize("scene", [-1, 5, 42])
    def test_scene_out_of_range(self, scene):
        with pytest.raises(ValueError):
            classify("a", scene)


class TestNavigation:
    """Scene index wraps in both directions."""

    def test_next_wraps(self):
        assert next_scene(4) == 0
        assert [next_scene(i) for i in range(SCENE_COUNT)] == [1, 2, 3, 4, 0]

    def test_previous_wraps(self):
        assert previous_scene(0) == 4
        assert [previous_scene(i) for i in range(SCENE_COUNT)] == [4, 0, 1, 2, 3]

    def test_titles(self):
        assert scene_title(0).startswith("Scene 1")
        assert scene_title(4).startswith("Scene 5")
        with pytest.raises(ValueError):
            scene_title(SCENE_COUNT)
