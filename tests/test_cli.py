import json
import uuid

import pytest
from typer.testing import CliRunner

from cli.main import app
from conftest import generated_block

runner = CliRunner()


def test_uuidv4_with_count(clipboard):
    result = runner.invoke(app, ["uuidv4", "--count=3", "--no-banner"])
    assert result.exit_code == 0, result.output
    lines = generated_block(result.output).splitlines()
    assert len(lines) == 3
    assert all(uuid.UUID(line).version == 4 for line in lines)
    (sink,) = clipboard.instances
    assert sink.writes == ["\n".join(lines)]
    assert "(Copied to clipboard) ✅" in result.output


def test_nanoid_positional_length(clipboard):
    result = runner.invoke(app, ["nanoid", "10", "--count=2", "--no-banner"])
    assert result.exit_code == 0, result.output
    lines = generated_block(result.output).splitlines()
    assert [len(line) for line in lines] == [10, 10]


def test_save_flag_writes_file(clipboard, tmp_path):
    target = tmp_path / "out.txt"
    result = runner.invoke(app, ["nanoid", "--count=2", f"--save={target}", "--no-banner"])
    assert result.exit_code == 0, result.output
    contents = target.read_text(encoding="utf-8").split("\n")
    assert [len(line) for line in contents] == [21, 21]
    assert "📂 Saved to" in result.output


def test_user_records_are_a_json_array(clipboard):
    result = runner.invoke(app, ["user", "--count=2", "--no-banner"])
    assert result.exit_code == 0, result.output
    (sink,) = clipboard.instances
    payload = json.loads(sink.writes[0])
    assert len(payload) == 2
    assert "firstName" in payload[0]


def test_invalid_type_exits_with_usage(clipboard, tmp_path):
    target = tmp_path / "never.txt"
    result = runner.invoke(app, ["bogus", f"--save={target}", "--no-banner"])
    assert result.exit_code == 1
    assert "Invalid type" in result.output
    assert "uuidv4" in result.output
    assert clipboard.instances == []
    assert not target.exists()


def test_no_clipboard_flag(clipboard):
    result = runner.invoke(app, ["ulid", "--no-clipboard", "--no-banner"])
    assert result.exit_code == 0, result.output
    assert clipboard.instances == []
    assert "Copied to clipboard" not in result.output
    assert len(generated_block(result.output)) == 26


def test_banner_shows_version(clipboard):
    result = runner.invoke(app, ["shortid"])
    assert result.exit_code == 0, result.output
    assert "CLI Fabric v" in result.output


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("CLI Fabric v")


def test_settings_default_length(clipboard, monkeypatch):
    monkeypatch.setenv("CLI_FABRIC_DEFAULT_LENGTH", "8")
    result = runner.invoke(app, ["nanoid", "--no-banner"])
    assert result.exit_code == 0, result.output
    assert len(generated_block(result.output)) == 8


def test_settings_disable_clipboard(clipboard, monkeypatch):
    monkeypatch.setenv("CLI_FABRIC_COPY_TO_CLIPBOARD", "false")
    result = runner.invoke(app, ["crypto", "--no-banner"])
    assert result.exit_code == 0, result.output
    assert clipboard.instances == []


class TestInteractive:
    def test_nanoid_by_ordinal(self, clipboard):
        result = runner.invoke(app, ["--no-banner"], input="4\n2\n10\n\n")
        assert result.exit_code == 0, result.output
        lines = generated_block(result.output).splitlines()
        assert [len(line) for line in lines] == [10, 10]

    def test_lorem_skips_count(self, clipboard):
        result = runner.invoke(app, ["--no-banner"], input="lorem\n5\n\n")
        assert result.exit_code == 0, result.output
        assert "How many items" not in result.output
        (sink,) = clipboard.instances
        assert len(sink.writes[0].split()) == 5

    def test_invalid_number_is_asked_again(self, clipboard):
        result = runner.invoke(app, ["--no-banner"], input="1\nabc\n2\n\n")
        assert result.exit_code == 0, result.output
        assert "Enter a valid number" in result.output
        assert len(generated_block(result.output).splitlines()) == 2

    def test_unknown_menu_choice_is_asked_again(self, clipboard):
        result = runner.invoke(app, ["--no-banner"], input="42\n6\n1\n\n")
        assert result.exit_code == 0, result.output
        assert "Unknown choice" in result.output

    def test_save_to_file(self, clipboard, tmp_path):
        target = tmp_path / "dates.json"
        result = runner.invoke(app, ["--no-banner"], input=f"10\n2\n{target}\n")
        assert result.exit_code == 0, result.output
        payload = json.loads(target.read_text(encoding="utf-8"))
        assert len(payload) == 2
        assert {"past", "future", "recent", "birthdate", "weekday", "month"} == set(payload[0])


def test_unknown_faker_locale_is_a_settings_error(clipboard, monkeypatch):
    monkeypatch.setenv("CLI_FABRIC_FAKER_LOCALE", "xx_YY")
    result = runner.invoke(app, ["uuidv4", "--no-banner"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "CLI_FABRIC_FAKER_LOCALE" in result.output
    assert "xx_YY" in result.output
    assert clipboard.instances == []


def test_location_in_locale_without_states(clipboard, monkeypatch):
    monkeypatch.setenv("CLI_FABRIC_FAKER_LOCALE", "ja_JP")
    result = runner.invoke(app, ["location", "--count=2", "--no-banner"])
    assert result.exit_code == 0, result.output
    (sink,) = clipboard.instances
    payload = json.loads(sink.writes[0])
    assert len(payload) == 2
    assert all(record["state"] for record in payload)
