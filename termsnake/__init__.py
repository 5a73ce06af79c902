# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: __init__.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Terminal Snake game package.
# -----------------------------------------------------------------------------
"""
Terminal Snake built on curses.

The game engine (geometry, snake, food, arena, game) is independent of the
terminal; the presenter and keyboard listener are the only curses-facing
modules.
"""

from termsnake.arena import Arena
from termsnake.errors import ArenaFullError, SnakeDiedError, TermsnakeError
from termsnake.food import Food
from termsnake.game import Game
from termsnake.geometry import Coord, Direction
from termsnake.snake import Snake

__version__ = "1.0.0"

__all__ = [
    "Arena",
    "ArenaFullError",
    "Coord",
    "Direction",
    "Food",
    "Game",
    "Snake",
    "SnakeDiedError",
    "TermsnakeError",
]
