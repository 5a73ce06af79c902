# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: events.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Abstract keyboard events delivered to the game loop.
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from termsnake.geometry import Direction


class EventType(Enum):
    MOVE = auto()
    RETRY = auto()
    END = auto()


@dataclass(frozen=True)
class KeyboardEvent:
    """A key press translated into something the game understands."""

    type: EventType
    direction: Optional[Direction] = None


def move(direction: Direction) -> KeyboardEvent:
    return KeyboardEvent(EventType.MOVE, direction)


RETRY = KeyboardEvent(EventType.RETRY)
END = KeyboardEvent(EventType.END)
