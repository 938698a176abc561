from __future__ import annotations

import pytest


class RecordingSink:
    """Stands in for the clipboard; keeps every write."""

    instances: list["RecordingSink"] = []

    def __init__(self) -> None:
        self.writes: list[str] = []
        RecordingSink.instances.append(self)

    def write(self, text: str) -> None:
        self.writes.append(text)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # AppSettings reads ./.env, the per-user .env and CLI_FABRIC_* variables;
    # none of a developer's own configuration may reach the tests.
    from core.config import AppSettings

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    for name in AppSettings.model_fields:
        monkeypatch.delenv(f"CLI_FABRIC_{name.upper()}", raising=False)


@pytest.fixture
def clipboard(monkeypatch):
    import cli.main

    RecordingSink.instances = []
    monkeypatch.setattr(cli.main, "ClipboardSink", RecordingSink)
    return RecordingSink


def generated_block(output: str) -> str:
    """Text printed between 'Generated:' and the clipboard/save notices."""

    _, _, rest = output.partition("Generated:\n")
    lines = []
    for line in rest.splitlines():
        if line.startswith("(Copied to clipboard)") or line.startswith("📂 Saved to"):
            break
        lines.append(line)
    return "\n".join(lines)
