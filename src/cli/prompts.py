"""Interactive prompts.

Collects the raw answer set; parsing and defaults belong to the resolver.
Numeric answers must be plain digits, otherwise the question is repeated.
"""

from __future__ import annotations

import re

import typer
from rich.console import Console
from rich.markup import escape

from cli.ui_components import build_menu_table
from core.domain.models import GeneratorType, InteractiveAnswers
from core.services.request_resolver import strip_menu_ordinal

_DIGITS = re.compile(r"^\d+$")

_LENGTH_MESSAGES = {
    GeneratorType.NANOID: "Enter Nano ID length",
    GeneratorType.LOREM: "Enter Lorem Ipsum word count",
}


def _menu_labels() -> dict[str, str]:
    """Accepted inputs (ordinal, type name, full label) -> menu label."""

    labels: dict[str, str] = {}
    for ordinal, gen_type in enumerate(GeneratorType, start=1):
        label = gen_type.menu_label(ordinal)
        labels[str(ordinal)] = label
        labels[gen_type.value] = label
        labels[label] = label
    return labels


def ask_type_label(console: Console) -> str:
    labels = _menu_labels()
    console.print(build_menu_table())
    while True:
        choice = typer.prompt("Choose generator type", default="1").strip().lower()
        if choice in labels:
            return labels[choice]
        console.print(f"[red]Unknown choice:[/red] {escape(choice)}", highlight=False)


def ask_number(console: Console, message: str, default: str) -> str:
    while True:
        value = typer.prompt(message, default=default).strip()
        if _DIGITS.match(value):
            return value
        console.print("[red]Enter a valid number[/red]")


def ask_answers(console: Console, *, default_count: int = 1, default_length: int = 21) -> InteractiveAnswers:
    """Run the interactive questionnaire."""

    type_label = ask_type_label(console)
    gen_type = GeneratorType(strip_menu_ordinal(type_label))

    count = None
    if gen_type is not GeneratorType.LOREM:
        count = ask_number(console, "How many items to generate?", str(default_count))

    length = None
    if gen_type.uses_length:
        length = ask_number(console, _LENGTH_MESSAGES[gen_type], str(default_length))

    save_file = typer.prompt("Save to file? (leave empty to skip)", default="", show_default=False)

    return InteractiveAnswers(
        type_label=type_label,
        count=count,
        length=length,
        save_file=save_file,
    )
