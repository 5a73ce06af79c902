# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: geometry.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Grid coordinates and movement directions.
# -----------------------------------------------------------------------------
from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """Movement directions as (dx, dy) steps. UP increases y."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, 1)
    DOWN = (0, -1)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Coord(NamedTuple):
    """A grid cell address."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Coord":
        """Return the neighbouring cell one step in `direction`."""
        dx, dy = direction.value
        return Coord(self.x + dx, self.y + dy)
