"""Output sink contracts.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Clipboard and file writers stay interchangeable and easy to replace with a
  recording stub in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Minimal contract for something that receives the rendered output.

    Design rules:
    - `write` is synchronous; a run hands the output over once, at the end.
    - Failures propagate to the caller untouched.
    """

    def write(self, text: str) -> None:
        """Deliver `text` to the sink."""

        ...
