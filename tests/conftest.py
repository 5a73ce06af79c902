import logging
import queue
import random

import pytest
import structlog

from termsnake.arena import Arena
from termsnake.food import Food
from termsnake.geometry import Coord, Direction
from termsnake.snake import Snake


class FakeScreen:
    """Stands in for a curses window: records drawing, replays key codes."""

    def __init__(self, rows=30, cols=80, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.cells = {}
        self.refreshed = 0
        self.erased = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.erased += 1
        self.cells = {}

    def addstr(self, y, x, text, attr=0):
        self.cells[(y, x)] = (text, attr)

    def refresh(self):
        self.refreshed += 1

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def keypad(self, flag):
        pass

    def nodelay(self, flag):
        pass

    def text_at(self, y, x, length):
        """Read back `length` single-width characters starting at (y, x)."""
        return "".join(self.cells.get((y, x + i), (" ", 0))[0] for i in range(length))


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def points():
    return queue.Queue()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def canonical_snake():
    return Snake(Direction.RIGHT, [Coord(1, 1), Coord(1, 2), Coord(1, 3), Coord(1, 4)])


@pytest.fixture
def make_arena(points, rng):
    """Build an arena and optionally pin its food to a known cell."""

    def _make(snake, height=20, width=50, food=None):
        arena = Arena(snake, points, height, width, rng=rng)
        if food is not None:
            arena.food = Food(*food, glyph="@")
        return arena

    return _make


@pytest.fixture
def reset_logging():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
