"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The banner can be turned off for non-interactive use (pipes, scripts).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from core.config import APP_NAME, APP_VERSION, REPOSITORY_URL, WEBSITE_URL
from core.domain.errors import InvalidGeneratorTypeError
from core.domain.models import GeneratorType


def print_banner(console: Console) -> None:
    """Print the startup banner (title, website, repository)."""

    title = Text(f"{APP_NAME} v{APP_VERSION}", style="bold green")
    console.print()
    console.print(Text.assemble("  🚀  ", title))
    console.print()
    console.print(f"  {WEBSITE_URL}", style="dim", highlight=False)
    console.print(f"  {REPOSITORY_URL}", style="dim", highlight=False)
    console.print()


def build_menu_table() -> Table:
    """Numbered list of generator types for the interactive prompt."""

    table = Table(title="Generator types", show_header=False, box=None)
    table.add_column("#", style="cyan", justify="right", no_wrap=True)
    table.add_column("Type", style="white")
    for ordinal, gen_type in enumerate(GeneratorType, start=1):
        table.add_row(f"{ordinal}.", gen_type.value)
    return table


def print_output(
    console: Console,
    output: str,
    *,
    copied: bool,
    saved_to: Path | None = None,
) -> None:
    console.print("Generated:")
    console.print(output, markup=False, highlight=False, soft_wrap=True)
    if copied:
        console.print("(Copied to clipboard) ✅")
    if saved_to is not None:
        console.print(f"📂 Saved to {saved_to}", markup=False, highlight=False)


def print_invalid_type(console: Console, error: InvalidGeneratorTypeError) -> None:
    console.print(
        f"[red]❌ Invalid type {escape(repr(error.value))}.[/red] Use: {', '.join(error.valid)}",
        highlight=False,
    )
    console.print("Usage: cli-fabric <type> [<length>] [--count=N] [--save=PATH]", markup=False)


def print_settings_error(console: Console, error: ValidationError) -> None:
    """One line per invalid `CLI_FABRIC_*` setting."""

    console.print("[red]❌ Invalid configuration:[/red]")
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        env_name = f"CLI_FABRIC_{field.upper()}"
        console.print(f"  {env_name}: {item['msg']}", markup=False, highlight=False)
