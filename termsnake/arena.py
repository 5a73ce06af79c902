# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: arena.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: The playing field: grid bounds, the snake and its food.
# -----------------------------------------------------------------------------
import queue
import random
from typing import Optional

import structlog

from termsnake.errors import ArenaFullError
from termsnake.food import Food, new_food
from termsnake.geometry import Coord
from termsnake.snake import Snake

log = structlog.get_logger(__name__)


class Arena:
    """
    A `width` x `height` grid holding one snake and one piece of food.

    Cells run from (0, 0) to (width - 1, height - 1). Points earned by
    eating are pushed onto `points` for the game loop to collect.
    """

    def __init__(
        self,
        snake: Snake,
        points: "queue.Queue[int]",
        height: int,
        width: int,
        rng: Optional[random.Random] = None,
    ):
        if height <= 0 or width <= 0:
            raise ValueError(f"arena size must be positive, got {width}x{height}")
        self.snake = snake
        self.points = points
        self.height = height
        self.width = width
        self.rng = rng or random.Random()
        self.food: Food = self.place_food()

    def move_snake(self) -> None:
        """
        Advance the snake one tick and resolve what it ran into.

        Raises:
            SnakeDiedError: the snake hit itself or left the arena.
        """
        self.snake.move()

        if self.snake_left_arena():
            raise self.snake.die("left the arena")

        if self.has_food(self.snake.head):
            log.debug("food_eaten", position=tuple(self.food.position), points=self.food.points)
            self.points.put_nowait(self.food.points)
            self.snake.grow()
            self.food = self.place_food()

    def snake_left_arena(self) -> bool:
        x, y = self.snake.head
        return not (0 <= x < self.width and 0 <= y < self.height)

    def has_food(self, coord: Coord) -> bool:
        return coord == self.food.position

    def is_occupied(self, coord: Coord) -> bool:
        return self.snake.is_on_position(coord)

    def place_food(self) -> Food:
        """Put new food on a random cell the snake does not cover."""
        free = self.width * self.height - sum(
            1 for x, y in set(self.snake.body) if 0 <= x < self.width and 0 <= y < self.height
        )
        if free <= 0:
            raise ArenaFullError("no free cell left for food")

        while True:
            x = self.rng.randrange(self.width)
            y = self.rng.randrange(self.height)
            if not self.is_occupied(Coord(x, y)):
                return new_food(x, y, self.rng)
