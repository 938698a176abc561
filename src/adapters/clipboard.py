"""System clipboard sink (pyperclip).

pyperclip picks the platform backend (pbcopy, xclip/xsel, wl-copy, win32).
When none is available it raises `PyperclipException`; the CLI lets it
propagate.
"""

from __future__ import annotations

import logging

import pyperclip

from core.interfaces.sink import OutputSink

logger = logging.getLogger(__name__)


class ClipboardSink(OutputSink):
    """Copies the rendered output to the clipboard."""

    def write(self, text: str) -> None:
        pyperclip.copy(text)
        logger.debug("Copied %d characters to clipboard", len(text))
