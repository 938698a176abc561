"""Typer application.

Why a single command with pass-through args:
- `cli-fabric nanoid 10 --count=3 --save=out.txt` keeps the historical token
  shape; unknown `--flags` reach the resolver untouched.
- With no tokens the interactive questionnaire runs instead.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.clipboard import ClipboardSink
from adapters.fake_data import FakeDataProvider
from adapters.file_exporter import FileSink
from cli.lifecycle import configure_stdio, install_signal_handlers
from cli.logging_setup import setup_logging
from cli.prompts import ask_answers
from cli.ui_components import print_banner, print_invalid_type, print_output, print_settings_error
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.errors import InvalidGeneratorTypeError
from core.domain.models import GeneratorType
from core.interfaces.sink import OutputSink
from core.services import dispatcher
from core.services.request_resolver import resolve_answers, resolve_argv

_HELP = (
    "Generate UUIDs, NanoIDs, ShortIDs, ULIDs, lorem ipsum and fake records.\n\n"
    "Usage: cli-fabric <type> [<length>] [--count=N] [--save=PATH]\n\n"
    f"Types: {', '.join(GeneratorType.names())}. Run without arguments for interactive mode."
)

app = typer.Typer(add_completion=False)

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"{APP_NAME} v{APP_VERSION}", highlight=False)
        raise typer.Exit()


@app.command(
    help=_HELP,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def generate(
    ctx: typer.Context,
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the startup banner."),
    no_clipboard: bool = typer.Option(False, "--no-clipboard", help="Do not copy the output to the clipboard."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Generate identifiers or sample data and copy them to the clipboard."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_settings_error(_err_console, exc)
        raise typer.Exit(code=1) from exc

    setup_logging("DEBUG" if verbose else settings.log_level)

    if settings.show_banner and not no_banner:
        print_banner(_console)

    tokens = list(ctx.args)
    try:
        if tokens:
            request = resolve_argv(
                tokens,
                default_count=settings.default_count,
                default_length=settings.default_length,
            )
        else:
            answers = ask_answers(
                _console,
                default_count=settings.default_count,
                default_length=settings.default_length,
            )
            request = resolve_answers(
                answers,
                default_count=settings.default_count,
                default_length=settings.default_length,
            )
        result = dispatcher.generate(request, provider=FakeDataProvider(settings))
    except InvalidGeneratorTypeError as exc:
        print_invalid_type(_err_console, exc)
        raise typer.Exit(code=1) from exc

    output = dispatcher.format_output(result, indent=settings.json_indent)

    sinks: list[OutputSink] = []
    copied = settings.copy_to_clipboard and not no_clipboard
    if copied:
        sinks.append(ClipboardSink())
    if request.destination is not None:
        sinks.append(FileSink(request.destination))
    for sink in sinks:
        sink.write(output)

    print_output(_console, output, copied=copied, saved_to=request.destination)


def run() -> None:
    """Console-script entrypoint."""

    configure_stdio()
    install_signal_handlers(_console)
    app()


if __name__ == "__main__":
    run()
