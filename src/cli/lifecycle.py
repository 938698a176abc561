"""Process lifecycle hooks.

Signal handling lives in the CLI layer, registered once at startup, so the
core stays a pure function of its input.
"""

from __future__ import annotations

import signal
import sys
from types import FrameType

from rich.console import Console

GOODBYE_MESSAGE = "\n👋 Exiting gracefully... Goodbye!"

_installed = False


def _exit_handler(console: Console):
    def handler(signum: int, frame: FrameType | None) -> None:
        console.print(GOODBYE_MESSAGE)
        sys.exit(0)

    return handler


def install_signal_handlers(console: Console) -> bool:
    """Exit with status 0 on Ctrl+C / SIGTERM. Returns False if already installed."""

    global _installed
    if _installed:
        return False

    handler = _exit_handler(console)
    signal.signal(signal.SIGINT, handler)
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, handler)
    _installed = True
    return True


def configure_stdio() -> None:
    """Force UTF-8 on Windows consoles so the emoji in the output survive cp1252."""

    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
