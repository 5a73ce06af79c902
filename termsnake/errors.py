# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: errors.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Exception types raised by the game engine.
# -----------------------------------------------------------------------------


class TermsnakeError(Exception):
    """Base class for game engine errors."""


class SnakeDiedError(TermsnakeError):
    """The snake ran into itself or left the arena."""

    def __init__(self, reason: str = "died") -> None:
        super().__init__(reason)
        self.reason = reason


class ArenaFullError(TermsnakeError):
    """No free cell is left to place food on."""
