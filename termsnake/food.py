# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: food.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Food items placed in the arena.
# -----------------------------------------------------------------------------
import os
import random
from dataclasses import dataclass, field
from typing import Optional

from termsnake.geometry import Coord

FOOD_POINTS = 10
FALLBACK_GLYPH = "@"
FOOD_EMOJIS = (
    "🍒",
    "🍍",
    "🍑",
    "🍇",
    "🍏",
    "🍌",
    "🍫",
    "🍭",
    "🍕",
    "🍩",
    "🍗",
    "🍖",
    "🍬",
    "🍤",
    "🍪",
)


def has_unicode_support(lang: Optional[str] = None) -> bool:
    """Use the LANG locale hint to decide whether emoji can be drawn."""
    if lang is None:
        lang = os.environ.get("LANG", "")
    return "UTF-8" in lang.upper()


def food_glyph(rng: Optional[random.Random] = None, unicode: Optional[bool] = None) -> str:
    """Pick a random food emoji, or the plain fallback on non-Unicode terminals."""
    if unicode is None:
        unicode = has_unicode_support()
    if not unicode:
        return FALLBACK_GLYPH
    return (rng or random).choice(FOOD_EMOJIS)


@dataclass(frozen=True)
class Food:
    x: int
    y: int
    points: int = FOOD_POINTS
    glyph: str = field(default_factory=food_glyph)

    @property
    def position(self) -> Coord:
        return Coord(self.x, self.y)


def new_food(x: int, y: int, rng: Optional[random.Random] = None) -> Food:
    return Food(x=x, y=y, glyph=food_glyph(rng))
