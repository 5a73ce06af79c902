# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: snake.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: The player-controlled snake: body, direction and growth.
# -----------------------------------------------------------------------------
from typing import Iterable, List, Tuple

from termsnake.errors import SnakeDiedError
from termsnake.geometry import Coord, Direction


class Snake:
    """
    The snake's body segments, ordered tail first.

    The head is the last segment. `length` is the target length the body
    grows toward; each call to `move()` adds at most one segment.
    """

    def __init__(self, direction: Direction, body: Iterable[Coord]):
        self._body: List[Coord] = [Coord(*segment) for segment in body]
        if not self._body:
            raise ValueError("a snake needs at least one body segment")
        self.direction = direction
        self.length = len(self._body)

    @property
    def body(self) -> Tuple[Coord, ...]:
        """Read-only copy of the segments, tail first."""
        return tuple(self._body)

    @property
    def head(self) -> Coord:
        return self._body[-1]

    def change_direction(self, direction: Direction) -> None:
        """Turn the snake unless `direction` would reverse it into its neck."""
        if direction is not self.direction.opposite:
            self.direction = direction

    def move(self) -> None:
        """
        Advance the head one cell in the current direction.

        Raises:
            SnakeDiedError: the new head would land on the body. The body is
                left untouched in that case.
        """
        candidate = self.head.step(self.direction)

        if self.is_on_position(candidate):
            raise self.die("collided with itself")

        self._body.append(candidate)
        if len(self._body) > self.length:
            del self._body[0]

    def grow(self) -> None:
        self.length += 1

    def is_on_position(self, coord: Coord) -> bool:
        return coord in self._body

    def die(self, reason: str = "died") -> SnakeDiedError:
        return SnakeDiedError(reason)

    def __len__(self) -> int:
        return len(self._body)

    def __repr__(self) -> str:
        return f"Snake(direction={self.direction.name}, head={self.head}, length={self.length})"
