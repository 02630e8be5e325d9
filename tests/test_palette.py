"""
Tests for the node colours.
Run with: python -m pytest tests/ -v
"""
from banachtarski.model.scenes import Category
from banachtarski.view.palette import (
    COLOR_A, COLOR_AA, COLOR_BB, DIMMED_FILL, NODE_FILL, NODE_STROKE,
    colors_for, darken, mix,
)


class TestColours:
    def test_darken(self):
        c = darken(COLOR_A, 0.6)
        for got, expected in zip((c.red(), c.green(), c.blue()), (48, 69, 123)):
            assert abs(got - expected) <= 1

    def test_mix(self):
        c = mix(COLOR_AA, COLOR_BB, 0.5)
        assert (c.red(), c.green(), c.blue()) == (125, 105, 105)

    def test_category_colours(self):
        fill, stroke = colors_for(Category.A, 1)
        assert fill == COLOR_A
        assert stroke == darken(COLOR_A, 0.6)

    def test_neutral_plain_in_first_scenes(self):
        assert colors_for(Category.NEUTRAL, 0) == (NODE_FILL, NODE_STROKE)

    def test_neutral_dimmed_in_coset_scenes(self):
        for scene in (2, 3, 4):
            assert colors_for(Category.NEUTRAL, scene)[0] == DIMMED_FILL
