"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the
  CLI.
- Lets adapters (Faker, clipboard) read configuration consistently.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
from faker.config import AVAILABLE_LOCALES
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "CLI Fabric"
APP_VERSION = "1.0.0"
REPOSITORY_URL = "https://github.com/ashutosh4336/cli-fabric"
WEBSITE_URL = "https://thehttp.in/"


def get_user_config_dir() -> Path:
    """Per-user configuration directory.

    Delegates to Click's `get_app_dir`: `%APPDATA%` on Windows,
    `~/Library/Application Support` on macOS, `$XDG_CONFIG_HOME` (or
    `~/.config`) elsewhere. Resolved on every call so tests can redirect it.
    """

    return Path(typer.get_app_dir("cli-fabric"))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed, validated at the edge (env vars) without leaking into the core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLI_FABRIC_",
        extra="ignore",
        case_sensitive=False,
        # Files are chosen per instance in __init__ (project .env, then user .env).
        env_file_encoding="utf-8",
    )

    default_count: int = Field(
        default=1,
        ge=1,
        description="Items generated when no valid count is given.",
    )
    default_length: int = Field(
        default=21,
        ge=1,
        description="NanoID length / lorem word count when none is given.",
    )
    copy_to_clipboard: bool = Field(
        default=True,
        description="Copy the rendered output to the system clipboard.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the startup banner.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used when rendering record types as JSON.",
    )
    faker_locale: str = Field(
        default="en_US",
        min_length=2,
        description="Faker locale for user/location/date records and lorem text.",
    )
    faker_seed: int | None = Field(
        default=None,
        description="Seed for Faker; makes record and lorem output reproducible.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    def __init__(self, **values: Any) -> None:
        values.setdefault("_env_file", (".env", str(get_user_env_file())))
        super().__init__(**values)

    @field_validator("faker_locale")
    @classmethod
    def check_faker_locale(cls, value: str) -> str:
        locale = value.strip().replace("-", "_")
        if locale not in AVAILABLE_LOCALES:
            raise ValueError(f"unknown Faker locale {value!r} (e.g. en_US, de_DE, ja_JP)")
        return locale
