# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: logging_config.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Configures structured logging for the game using structlog.
# -----------------------------------------------------------------------------
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

MAX_LOG_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 3


def setup_logging(log_level: str = "INFO", log_file: str = "logs/termsnake.log") -> None:
    """
    Set up structured logging for the game.

    curses owns the terminal while the game runs, so records are written as
    JSON lines to a rotating file instead of stdout.

    Args:
        log_level: The minimum log level to capture (e.g., "INFO", "DEBUG").
        log_file: Path of the log file; parent directories are created.
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    logging.basicConfig(
        format="%(message)s",
        handlers=[handler],
        level=log_level.upper(),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
