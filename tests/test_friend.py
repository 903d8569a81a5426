import io
import random

import pytest

from nyanburger.cheeseburger import Cheeseburger
from nyanburger.console import Color, Console
from nyanburger.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from nyanburger.friend import Friend


def make_friend(level=1, x=10, y=5):
    return Friend(x, y, "wishi", level, random.Random(7))


@pytest.mark.parametrize("level,text", [(0, "F"), (1, "FF"), (2, "FFF"), (3, "FFFF"), (5, "FFFF")])
def test_draw_shows_support_level(level, text):
    out = io.StringIO()
    make_friend(level).draw(Console(out))
    assert Color.DARK_CYAN.ansi + text + "\x1b[0m" in out.getvalue()


def test_inactive_friend_draws_nothing():
    out = io.StringIO()
    friend = make_friend()
    friend.active = False
    friend.draw(Console(out))
    assert out.getvalue() == ""


def test_move_and_reset():
    friend = make_friend(y=SCREEN_HEIGHT - 1)
    friend.move()
    assert friend.y == SCREEN_HEIGHT
    friend.move()
    assert friend.y == 0
    assert 0 <= friend.x < SCREEN_WIDTH


def test_set_target_x_is_clamped():
    friend = make_friend()
    friend.set_target_x(-4)
    assert friend.target_x == 0
    friend.set_target_x(SCREEN_WIDTH)
    assert friend.target_x == SCREEN_WIDTH - 3
    friend.set_target_x(20)
    assert friend.target_x == 20


def test_collision_allows_one_column_slack():
    friend = make_friend(x=10, y=5)
    assert friend.collides_with(Cheeseburger(9, 5))
    assert friend.collides_with(Cheeseburger(11, 5))
    assert not friend.collides_with(Cheeseburger(12, 5))
    assert not friend.collides_with(Cheeseburger(10, 6))


def test_inactive_friend_never_collides():
    friend = make_friend()
    friend.active = False
    assert not friend.collides_with(Cheeseburger(friend.x, friend.y))


@pytest.mark.parametrize("level,gain", [(1, 1), (2, 2), (3, 3), (7, 3), (0, 0)])
def test_offer_help_grants_lives(level, gain):
    burger = Cheeseburger(0, 0)
    before = burger.lives
    messages = make_friend(level).offer_help(burger)
    assert burger.lives == before + gain
    assert messages[0] == f"wishi offers level {level} support!"


def test_offer_help_message_for_single_life():
    messages = make_friend(1).offer_help(Cheeseburger(0, 0))
    assert messages[-1] == "You gained 1 life!"


def test_inactive_friend_offers_nothing():
    burger = Cheeseburger(0, 0)
    friend = make_friend(3)
    friend.active = False
    assert friend.offer_help(burger) == []
    assert burger.lives == 3


def test_increase_support_level():
    friend = make_friend(1)
    friend.increase_support_level()
    friend.increase_support_level(2)
    assert friend.support_level == 1 + 1 + 2