"""Logging setup for the CLI.

Diagnostics go to stderr through Rich so they never mix with the generated
output on stdout (which users pipe or redirect).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int | str = logging.WARNING, *, console: Console | None = None) -> None:
    """Configure the root logger with a single stderr `RichHandler`.

    Idempotent: a previous `RichHandler` is replaced, other handlers are kept.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
