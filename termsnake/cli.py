# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: cli.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Typer entry point that runs the game inside curses.
# -----------------------------------------------------------------------------
import curses
import threading
from typing import Optional

import structlog
import typer
from rich.console import Console

from termsnake.config import settings
from termsnake.game import Game
from termsnake.keyboard import KeyboardListener
from termsnake.logging_config import setup_logging
from termsnake.presenter import Presenter

app = typer.Typer(help="Terminal Snake: arrow keys to steer, R to retry, ESC to quit.")
console = Console()
log = structlog.get_logger(__name__)


def play(stdscr) -> int:
    """
    Run one game session on an initialised curses screen.

    The presenter and the keyboard listener share a lock, since curses must
    not be called from two threads at once. Ctrl+C quits like ESC.
    """
    lock = threading.Lock()
    presenter = Presenter(stdscr, lock)
    presenter.setup()

    game = Game()
    KeyboardListener(stdscr, game.events, lock).start()

    try:
        return game.run(presenter.render)
    except KeyboardInterrupt:
        log.info("game_interrupted", score=game.score)
        return game.score


@app.command()
def main(
    log_level: Optional[str] = typer.Option(None, help="Logging level, e.g. DEBUG or INFO."),
    log_file: Optional[str] = typer.Option(None, help="File to write JSON log records to."),
):
    """
    Play Snake in the terminal.
    """
    setup_logging(log_level or settings.LOG_LEVEL, log_file or settings.LOG_FILE)
    log.info("app_starting", app_name=settings.APP_NAME)

    try:
        score = curses.wrapper(play)
    except curses.error:
        log.exception("terminal_failure")
        console.print("[bold red]The terminal could not be drawn on.[/bold red]")
        raise typer.Exit(code=1)

    console.print(f"[bold green]{settings.APP_NAME}[/bold green] final score: [bold]{score}[/bold]")
