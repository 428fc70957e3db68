"""Tests for the command-line interface."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gauger import __version__
from gauger.cli import cli

STRONG = "aB3$aB3$aB3$aB3$"


def _json_from(output: str):
    start = min(i for i in (output.find("{"), output.find("[")) if i != -1)
    return json.loads(output[start:])


def test_analyze_json() -> None:
    result = CliRunner().invoke(cli, ["--output", "json", "analyze", "password"], obj={})
    assert result.exit_code == 0, result.output
    data = _json_from(result.output)
    assert data["analysis"]["strength"] == "very_weak"
    assert "common_pattern" in [w["kind"] for w in data["analysis"]["weaknesses"]]
    assert 16 <= data["generated"]["length"] <= 21
    assert data["suggestions"]


def test_analyze_console() -> None:
    result = CliRunner().invoke(cli, ["-q", "analyze", STRONG, "--no-generate"], obj={})
    assert result.exit_code == 0, result.output
    assert "VERY STRONG" in result.output
    assert "No weaknesses detected." in result.output
    assert STRONG not in result.output


def test_analyze_prompts_for_password() -> None:
    result = CliRunner().invoke(
        cli, ["--output", "json", "analyze", "--no-generate"], input="hunter2\n", obj={}
    )
    assert result.exit_code == 0, result.output
    data = _json_from(result.output)
    assert data["analysis"]["length"] == 7
    assert data["generated"] is None


def test_suggest_nothing_to_improve() -> None:
    result = CliRunner().invoke(cli, ["-q", "suggest", STRONG], obj={})
    assert result.exit_code == 0, result.output
    assert "Nothing to improve." in result.output


def test_suggest_json_is_capped() -> None:
    result = CliRunner().invoke(cli, ["--output", "json", "suggest", ""], obj={})
    assert result.exit_code == 0, result.output
    assert len(_json_from(result.output)["suggestions"]) == 5


def test_generate_json() -> None:
    result = CliRunner().invoke(cli, ["--output", "json", "generate", "--count", "3"], obj={})
    assert result.exit_code == 0, result.output
    passwords = _json_from(result.output)
    assert len(passwords) == 3
    assert all(16 <= p["length"] <= 21 and p["secure"] for p in passwords)


def test_generate_count_out_of_range() -> None:
    result = CliRunner().invoke(cli, ["generate", "--count", "0"], obj={})
    assert result.exit_code == 2


def test_invalid_config_is_a_usage_error(tmp_path: Path) -> None:
    path = tmp_path / "gauger.toml"
    path.write_text("[generator]\nmin_length = 30\nmax_length = 20\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(path), "generate"], obj={})
    assert result.exit_code == 2
    assert "--config" in result.output


@pytest.mark.parametrize(
    "toml",
    ['[analyzer]\nmin_length = "8"\n', '[analyzer]\nextra_common_passwords = "acme"\n'],
)
def test_wrongly_typed_config_is_a_usage_error(tmp_path: Path, toml: str) -> None:
    path = tmp_path / "gauger.toml"
    path.write_text(toml, encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(path), "analyze", "hunter2"], obj={})
    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)
    assert "--config" in result.output


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
