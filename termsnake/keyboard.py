# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: keyboard.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Background listener turning curses key codes into game events.
# -----------------------------------------------------------------------------
import curses
import queue
import threading
import time
from typing import Optional

import structlog

from termsnake import events
from termsnake.events import KeyboardEvent
from termsnake.geometry import Direction

log = structlog.get_logger(__name__)

KEY_ESC = 27
RETRY_KEYS = (ord("r"), ord("R"))
POLL_INTERVAL = 0.01  # Seconds to wait when no key is pending

ARROW_KEYS = {
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_UP: Direction.UP,
}


def key_to_event(key: int) -> Optional[KeyboardEvent]:
    """Map a curses key code to a game event, or None for keys we ignore."""
    if key in ARROW_KEYS:
        return events.move(ARROW_KEYS[key])
    if key == KEY_ESC:
        return events.END
    if key in RETRY_KEYS:
        return events.RETRY
    return None


class KeyboardListener(threading.Thread):
    """
    Polls the curses screen for key presses and feeds the game's event queue.

    curses is not thread-safe, so every `getch` happens under the same lock
    the presenter holds while drawing. The screen must be in nodelay mode.
    """

    def __init__(
        self,
        screen,
        events_queue: "queue.Queue[KeyboardEvent]",
        lock: threading.Lock,
        poll_interval: float = POLL_INTERVAL,
    ):
        super().__init__(name="keyboard-listener", daemon=True)
        self.screen = screen
        self.events = events_queue
        self.lock = lock
        self.poll_interval = poll_interval

    def poll_once(self) -> bool:
        """Read one pending key, if any. Returns False when no key was waiting."""
        with self.lock:
            key = self.screen.getch()
        if key == -1:
            return False

        event = key_to_event(key)
        if event is not None:
            self.events.put(event)
        return True

    def run(self) -> None:
        log.info("keyboard_listener_started")
        while True:
            if not self.poll_once():
                time.sleep(self.poll_interval)
