"""Domain errors.

The CLI turns these into a readable message and a non-zero exit code; the
core only raises them.
"""

from __future__ import annotations

from typing import Iterable


class CliFabricError(Exception):
    """Base class for errors raised by the generation core."""


class InvalidGeneratorTypeError(CliFabricError, ValueError):
    """Raised when a requested type is not one of the known generators."""

    def __init__(self, value: object, valid: Iterable[str]) -> None:
        self.value = value
        self.valid = tuple(valid)
        super().__init__(f"Invalid type {value!r}. Use: {', '.join(self.valid)}")
