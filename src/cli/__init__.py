"""Command-line layer: Typer app, prompts, Rich output, lifecycle hooks."""
