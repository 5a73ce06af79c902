"""
Tests for key translation and the keyboard listener.
"""

import curses
import queue
import threading

import pytest

from termsnake import events
from termsnake.events import EventType
from termsnake.geometry import Direction
from termsnake.keyboard import KEY_ESC, KeyboardListener, key_to_event

from tests.conftest import FakeScreen


@pytest.mark.parametrize(
    "key, direction",
    [
        (curses.KEY_UP, Direction.UP),
        (curses.KEY_DOWN, Direction.DOWN),
        (curses.KEY_LEFT, Direction.LEFT),
        (curses.KEY_RIGHT, Direction.RIGHT),
    ],
)
def test_arrow_keys_move(key, direction):
    event = key_to_event(key)
    assert event.type is EventType.MOVE
    assert event.direction is direction


def test_escape_ends():
    assert key_to_event(KEY_ESC) == events.END


@pytest.mark.parametrize("key", [ord("r"), ord("R")])
def test_r_retries(key):
    assert key_to_event(key) == events.RETRY


@pytest.mark.parametrize("key", [ord("x"), ord("q"), ord(" "), curses.KEY_HOME])
def test_other_keys_are_ignored(key):
    assert key_to_event(key) is None


class TestKeyboardListener:
    def test_poll_once_queues_known_keys(self):
        screen = FakeScreen(keys=[curses.KEY_LEFT, ord("x")])
        pending = queue.Queue()
        listener = KeyboardListener(screen, pending, threading.Lock())

        assert listener.poll_once() is True
        assert pending.get_nowait() == events.move(Direction.LEFT)

        assert listener.poll_once() is True
        assert pending.empty()

        assert listener.poll_once() is False

    def test_poll_once_holds_the_lock(self):
        lock = threading.Lock()

        class LockCheckingScreen(FakeScreen):
            def getch(self):
                assert lock.locked()
                return super().getch()

        listener = KeyboardListener(LockCheckingScreen(keys=[KEY_ESC]), queue.Queue(), lock)
        listener.poll_once()
        assert not lock.locked()

    def test_thread_delivers_events(self):
        pending = queue.Queue()
        listener = KeyboardListener(
            FakeScreen(keys=[-1, curses.KEY_UP, KEY_ESC]), pending, threading.Lock(), poll_interval=0.001
        )
        assert listener.daemon is True

        listener.start()

        assert pending.get(timeout=2) == events.move(Direction.UP)
        assert pending.get(timeout=2) == events.END
