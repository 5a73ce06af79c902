# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: game.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Game state and the main loop merging ticks, keys and points.
# -----------------------------------------------------------------------------
import queue
import random
import time
from typing import Callable, Optional

import structlog

from termsnake.arena import Arena
from termsnake.errors import TermsnakeError
from termsnake.events import EventType, KeyboardEvent
from termsnake.geometry import Coord, Direction
from termsnake.snake import Snake

log = structlog.get_logger(__name__)

ARENA_HEIGHT = 20
ARENA_WIDTH = 50
INITIAL_SCORE = 0
BASE_INTERVAL_MS = 100


def initial_snake() -> Snake:
    return Snake(
        Direction.RIGHT,
        [Coord(1, 1), Coord(1, 2), Coord(1, 3), Coord(1, 4)],
    )


class Game:
    """
    Owns the arena, the score and the over flag.

    The loop in `run()` is the only writer of game state. Key presses arrive
    on `events` from the keyboard listener and points arrive on `points`
    from the arena; both queues belong to this instance.
    """

    def __init__(
        self,
        points: "Optional[queue.Queue[int]]" = None,
        events: "Optional[queue.Queue[KeyboardEvent]]" = None,
        rng: Optional[random.Random] = None,
    ):
        self.points: "queue.Queue[int]" = points if points is not None else queue.Queue()
        self.events: "queue.Queue[KeyboardEvent]" = events if events is not None else queue.Queue()
        self.rng = rng
        self.arena = self.initial_arena()
        self.score = INITIAL_SCORE
        self.is_over = False

    def initial_arena(self) -> Arena:
        return Arena(initial_snake(), self.points, ARENA_HEIGHT, ARENA_WIDTH, rng=self.rng)

    def end(self) -> None:
        self.is_over = True

    def retry(self) -> None:
        """Start over with a fresh arena and a zero score."""
        log.info("game_retry", previous_score=self.score)
        self.arena = self.initial_arena()
        self.score = INITIAL_SCORE
        self.is_over = False

    def add_points(self, points: int) -> None:
        self.score += points

    def move_interval(self) -> int:
        """Milliseconds between ticks; one less for every 10 points scored."""
        return max(BASE_INTERVAL_MS - self.score // 10, 0)

    def handle_event(self, event: KeyboardEvent) -> bool:
        """Apply a keyboard event. Returns False when the player quit."""
        if event.type is EventType.MOVE:
            self.arena.snake.change_direction(event.direction)
        elif event.type is EventType.RETRY:
            self.retry()
        elif event.type is EventType.END:
            return False
        return True

    def tick(self) -> None:
        """Advance the snake one cell, ending the game if it dies."""
        if self.is_over:
            return
        try:
            self.arena.move_snake()
        except TermsnakeError as e:
            log.info("snake_died", reason=str(e), score=self.score)
            self.end()

    def step(self, render: Callable[["Game"], None], sleep: Callable[[float], None]) -> bool:
        """
        Run one loop iteration.

        Pending points win over pending key presses; with nothing pending the
        snake moves, the screen is redrawn and the loop sleeps. Returns False
        once an END event has been handled.
        """
        try:
            self.add_points(self.points.get_nowait())
            return True
        except queue.Empty:
            pass

        try:
            event = self.events.get_nowait()
        except queue.Empty:
            pass
        else:
            return self.handle_event(event)

        self.tick()
        render(self)
        sleep(self.move_interval() / 1000)
        return True

    def run(
        self,
        render: Callable[["Game"], None],
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Play until the player quits. Returns the final score."""
        log.info("game_started", width=self.arena.width, height=self.arena.height)
        render(self)
        while self.step(render, sleep):
            pass
        log.info("game_quit", score=self.score)
        return self.score
