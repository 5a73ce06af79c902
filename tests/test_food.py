"""
Tests for food glyph selection.
"""

import random

import pytest

from termsnake.food import FALLBACK_GLYPH, FOOD_EMOJIS, FOOD_POINTS, Food, food_glyph, has_unicode_support, new_food
from termsnake.geometry import Coord


@pytest.mark.parametrize(
    "lang, expected",
    [
        ("en_US.UTF-8", True),
        ("de_DE.utf-8", True),
        ("C", False),
        ("", False),
    ],
)
def test_unicode_support_follows_lang(lang, expected):
    assert has_unicode_support(lang) is expected


def test_unicode_support_reads_environment(monkeypatch):
    monkeypatch.setenv("LANG", "C")
    assert has_unicode_support() is False
    monkeypatch.setenv("LANG", "en_GB.UTF-8")
    assert has_unicode_support() is True


def test_plain_terminal_gets_fallback_glyph():
    assert food_glyph(unicode=False) == FALLBACK_GLYPH


def test_unicode_terminal_gets_an_emoji():
    assert food_glyph(random.Random(7), unicode=True) in FOOD_EMOJIS


def test_food_is_worth_ten_points():
    food = Food(3, 4, glyph="@")
    assert food.points == FOOD_POINTS == 10
    assert food.position == Coord(3, 4)


def test_food_is_immutable():
    food = Food(3, 4, glyph="@")
    with pytest.raises(AttributeError):
        food.x = 5


def test_new_food_picks_a_glyph(monkeypatch):
    monkeypatch.setenv("LANG", "C")
    assert new_food(1, 2).glyph == FALLBACK_GLYPH
