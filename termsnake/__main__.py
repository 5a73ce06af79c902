# -*- coding: utf-8 -*-
# -----------------------------------------------------------------------------
# filename: __main__.py
# author: dunamismax
# version: 1.0.0
# date: 10-17-2026
# github: https://github.com/dunamismax
# description: Allows `python -m termsnake`.
# -----------------------------------------------------------------------------
from termsnake.cli import app

if __name__ == "__main__":
    app()
