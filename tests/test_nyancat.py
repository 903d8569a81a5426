import io
import random

import pytest

from nyanburger.console import Color, Console
from nyanburger.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from nyanburger.nyancat import NyanCat


@pytest.mark.parametrize("level,step", [(0, 1), (1, 1), (2, 2)])
def test_fall_step_is_truncated_speed(level, step):
    cat = NyanCat(5, 3, level, random.Random(1))
    cat.move()
    assert cat.y == 3 + step


def test_falling_past_bottom_resets():
    cat = NyanCat(5, SCREEN_HEIGHT, 0, random.Random(2))
    cat.move()
    assert cat.y == 0
    assert 0 <= cat.x < SCREEN_WIDTH


def test_reaching_bottom_row_does_not_reset():
    cat = NyanCat(5, SCREEN_HEIGHT - 1, 0, random.Random(2))
    cat.move()
    assert (cat.x, cat.y) == (5, SCREEN_HEIGHT)


def test_high_level_cats_always_hide_after_reset():
    cat = NyanCat(5, 5, 10, random.Random(3))
    for _ in range(20):
        cat.reset_position()
        assert cat.visible is False


def test_reset_is_deterministic_for_seed():
    a = NyanCat(0, 9, 1, random.Random(42))
    b = NyanCat(0, 9, 1, random.Random(42))
    a.reset_position()
    b.reset_position()
    assert (a.x, a.y, a.visible) == (b.x, b.y, b.visible)


def test_draw_visible_cat():
    out = io.StringIO()
    NyanCat(1, 1, 0).draw(Console(out))
    assert Color.MAGENTA.ansi + "N" in out.getvalue()


def test_hidden_cat_draws_nothing():
    out = io.StringIO()
    cat = NyanCat(1, 1, 0)
    cat.visible = False
    cat.draw(Console(out))
    assert out.getvalue() == ""