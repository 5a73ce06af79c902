# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: presenter.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Draws the game state onto a curses screen.
# -----------------------------------------------------------------------------
import curses
import threading
from typing import Optional

from rich.cells import cell_len

from termsnake.arena import Arena

TITLE = "Snake Game"
QUIT_MESSAGE = "Press ESC to quit"
GAME_OVER_MESSAGE = "Game over! Press R to retry"
TOO_SMALL_MESSAGE = "Terminal too small"

COLOR_SNAKE = 1

# Rows used around the arena: title, top border, bottom border, score, hint
EXTRA_ROWS = 5
# Columns used around the arena: two borders plus a spare last column
EXTRA_COLS = 3


class Presenter:
    """
    Renders read-only snapshots of a game onto `screen`.

    Arena y grows upwards, so y = 0 is drawn on the row just above the
    bottom border. All curses calls are made under `lock`, which the
    keyboard listener shares.
    """

    def __init__(self, screen, lock: Optional[threading.Lock] = None):
        self.screen = screen
        self.lock = lock or threading.Lock()
        self.default_attr = curses.A_NORMAL
        self.snake_attr = curses.A_REVERSE

    def setup(self) -> None:
        """Prepare the terminal: hidden cursor, nodelay keypad input, colors."""
        curses.curs_set(0)
        curses.set_escdelay(25)
        self.screen.keypad(True)
        self.screen.nodelay(True)

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(COLOR_SNAKE, curses.COLOR_GREEN, curses.COLOR_GREEN)
            self.snake_attr = curses.color_pair(COLOR_SNAKE)

    def render(self, game) -> None:
        with self.lock:
            self.screen.erase()
            rows, cols = self.screen.getmaxyx()
            arena = game.arena

            if rows < arena.height + EXTRA_ROWS or cols < arena.width + EXTRA_COLS:
                self.print_text(0, 0, TOO_SMALL_MESSAGE[: max(cols - 1, 0)])
                self.screen.refresh()
                return

            left = (cols - arena.width) // 2
            right = left + arena.width
            top = (rows - arena.height - EXTRA_ROWS) // 2 + 1
            bottom = top + arena.height + 1

            self.print_text(left, top - 1, TITLE)
            self.render_arena(arena, top, bottom, left)
            self.render_snake(arena, left, bottom)
            self.render_food(arena, left, bottom)
            self.print_text(left, bottom + 1, f"Score: {game.score}")
            self.print_text(right - cell_len(QUIT_MESSAGE), bottom + 1, QUIT_MESSAGE)
            if game.is_over:
                self.print_text(left, bottom + 2, GAME_OVER_MESSAGE)

            self.screen.refresh()

    def render_arena(self, arena: Arena, top: int, bottom: int, left: int) -> None:
        for row in range(top + 1, bottom):
            self.screen.addstr(row, left - 1, "│", self.default_attr)
            self.screen.addstr(row, left + arena.width, "│", self.default_attr)

        self.screen.addstr(top, left - 1, "┌" + "─" * arena.width + "┐", self.default_attr)
        self.screen.addstr(bottom, left - 1, "└" + "─" * arena.width + "┘", self.default_attr)

    def render_snake(self, arena: Arena, left: int, bottom: int) -> None:
        for x, y in arena.snake.body:
            self.screen.addstr(bottom - 1 - y, left + x, " ", self.snake_attr)

    def render_food(self, arena: Arena, left: int, bottom: int) -> None:
        food = arena.food
        self.screen.addstr(bottom - 1 - food.y, left + food.x, food.glyph, self.default_attr)

    def print_text(self, x: int, y: int, text: str) -> None:
        """Write `text` one character at a time, advancing by display width."""
        for char in text:
            self.screen.addstr(y, x, char, self.default_attr)
            x += cell_len(char)
