"""File sink.

Why a sink:
- Persisting the output is infrastructure; the core only renders text.
- Same contract as the clipboard, so the CLI treats both uniformly.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.interfaces.sink import OutputSink

logger = logging.getLogger(__name__)


def export_text(*, text: str, output_path: Path) -> Path:
    """Write `text` as UTF-8, replacing any existing content."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), output_path)
    return output_path


class FileSink(OutputSink):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def write(self, text: str) -> None:
        export_text(text=text, output_path=self.path)
