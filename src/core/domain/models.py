"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to any I/O library.
- Records serialize to the exact JSON shape users paste into fixtures
  (camelCase keys, ISO-8601 timestamps).

Note:
- These models describe *what* is generated, not *how*.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from core.domain.errors import InvalidGeneratorTypeError


class GeneratorType(str, Enum):
    """Closed set of generators offered by the CLI.

    Declaration order is the order of the interactive menu.
    """

    UUIDV4 = "uuidv4"
    UUIDV5 = "uuidv5"
    CRYPTO = "crypto"
    NANOID = "nanoid"
    SHORTID = "shortid"
    ULID = "ulid"
    LOREM = "lorem"
    USER = "user"
    LOCATION = "location"
    DATE = "date"

    @classmethod
    def parse(cls, value: object) -> "GeneratorType":
        """Return the member for `value` or raise `InvalidGeneratorTypeError`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidGeneratorTypeError(value, cls.names()) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]

    @property
    def is_record(self) -> bool:
        """Record types render as a JSON array instead of plain lines."""

        return self in _RECORD_TYPES

    @property
    def uses_length(self) -> bool:
        return self in _LENGTH_TYPES

    def menu_label(self, ordinal: int) -> str:
        return f"{ordinal}. {self.value}"


_RECORD_TYPES = frozenset({GeneratorType.USER, GeneratorType.LOCATION, GeneratorType.DATE})
_LENGTH_TYPES = frozenset({GeneratorType.NANOID, GeneratorType.LOREM})


class GenerationRequest(BaseModel):
    """Canonical request produced by both input modes."""

    model_config = ConfigDict(frozen=True)

    type: GeneratorType = Field(
        ...,
        description="Generator to run.",
    )
    count: int = Field(
        default=1,
        ge=0,
        description="How many items to generate.",
    )
    length: int = Field(
        default=21,
        ge=0,
        description="NanoID length or lorem word count; ignored by other types.",
    )
    destination: Path | None = Field(
        default=None,
        description="Optional file the rendered output is written to.",
    )


class InteractiveAnswers(BaseModel):
    """Raw answer set returned by the interactive prompts.

    Values are kept as typed by the user; the resolver does the parsing.
    """

    type_label: str = Field(
        ...,
        min_length=1,
        description="Selected menu label, e.g. '4. nanoid'.",
    )
    count: str | None = Field(default=None)
    length: str | None = Field(default=None)
    save_file: str | None = Field(default=None)


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class UserRecord(_Record):
    """Fake person profile."""

    id: str
    first_name: str
    last_name: str
    email: str
    username: str
    avatar: str
    birth_date: datetime
    phone: str
    website: str


class LocationRecord(_Record):
    """Fake postal address with coordinates."""

    id: str
    street: str
    city: str
    state: str
    country: str
    zip_code: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timezone: str


class DateRecord(_Record):
    """Assorted fake dates around "now"."""

    past: datetime
    future: datetime
    recent: datetime
    birthdate: datetime
    weekday: str
    month: str


GeneratedItem = Union[str, UserRecord, LocationRecord, DateRecord]


class GenerationResult(BaseModel):
    """Items produced by one run, in generation order."""

    type: GeneratorType
    items: list[GeneratedItem] = Field(default_factory=list)
