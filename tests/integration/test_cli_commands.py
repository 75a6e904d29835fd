"""CLI tests for normalization commands and their diagnostics."""

from __future__ import annotations

import json
from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from lotindex.cli import app


def _clean_env() -> dict[str, str | None]:
    """Unset `LOTINDEX_*` variables that would change command defaults."""

    return {
        "LOTINDEX_PREFIX_SEPARATOR": None,
        "LOTINDEX_EXTENSION_SEPARATOR": None,
        "LOTINDEX_INDEX_LANGUAGE": None,
        "LOTINDEX_MIN_TOKEN_LENGTH": None,
        "LOTINDEX_STOPWORDS_PATH": None,
    }


def test_filter_command_prints_canonical_text() -> None:
    """Filter command should print normalized text."""

    result = CliRunner().invoke(app, ["filter", "<p>Crème Brûlée, 1,200 pcs!</p>"], env=_clean_env())

    assert result.exit_code == 0
    assert "creme brulee 1200 pcs" in result.stdout


def test_filter_command_reads_stdin() -> None:
    """Omitted text argument should fall back to stdin."""

    result = CliRunner().invoke(app, ["filter"], input="Hello, World!\n", env=_clean_env())

    assert result.exit_code == 0
    assert "hello world" in result.stdout


def test_lots_command_prints_identifiers_and_remainder() -> None:
    """Lots command should print sorted lot numbers and the remainder."""

    result = CliRunner().invoke(app, ["lots", "lot 45 and lot 46"], env=_clean_env())

    assert result.exit_code == 0
    assert "Lot numbers: 45, 46" in result.stdout
    assert "Remainder: lot  and lot" in result.stdout


def test_lots_command_uses_separator_from_environment() -> None:
    """Environment separators should reach the extractor."""

    env = _clean_env()
    env["LOTINDEX_PREFIX_SEPARATOR"] = "/"

    result = CliRunner().invoke(app, ["lots", "see ABC/12 here"], env=env)

    assert result.exit_code == 0
    assert "Lot numbers: ABC/12" in result.stdout


def test_items_tokens_and_min_length_commands() -> None:
    """Token-level commands should print their filtered text."""

    runner = CliRunner()

    items = runner.invoke(app, ["items", "item #12, #345 and #6"], env=_clean_env())
    tokens = runner.invoke(app, ["tokens", "the the Cat cat 3 3"], env=_clean_env())
    min_length = runner.invoke(
        app, ["min-length", "a bb ccc dddd", "--min", "3"], env=_clean_env()
    )
    no_items = runner.invoke(app, ["items", "no digits"], env=_clean_env())

    assert items.exit_code == 0
    assert "Item numbers: 12, 345, 6" in items.stdout
    assert "3 cat the" in tokens.stdout
    assert "ccc dddd" in min_length.stdout
    assert "Item numbers: (none)" in no_items.stdout


def test_document_command_prints_json() -> None:
    """Document command should print the index document as JSON."""

    result = CliRunner().invoke(app, ["document", "Lot ABC-123.X9 Vintage clock"], env=_clean_env())

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {
        "content": "abc123 clock lot vintage x9",
        "item_numbers": ["123", "9"],
        "lot_numbers": ["ABC-123.X9"],
    }


def test_query_command_uses_yaml_config(tmp_path: Path) -> None:
    """Query command should apply language and minimum length from YAML config."""

    config_path = tmp_path / "lotindex.yml"
    config_path.write_text("index_language: en\nmin_token_length: 3\n", encoding="utf-8")

    result = CliRunner().invoke(
        app,
        ["query", "Lot 0042 the antique clock", "--config", str(config_path)],
        env=_clean_env(),
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "lot_numbers": ["0042"],
        "terms": ["antique", "clock", "lot"],
    }


def test_verbose_flag_emits_phase_logs() -> None:
    """Verbose runs should log phase events."""

    result = CliRunner().invoke(app, ["filter", "x", "--verbose"], env=_clean_env())

    assert result.exit_code == 0
    assert "[phase] level=INFO stage=config event=start" in result.output
    assert "[phase] level=INFO stage=filter event=complete chars=1" in result.output


def test_missing_config_file_reports_config_stage(tmp_path: Path) -> None:
    """Missing `--config` paths should fail with stage-aware diagnostics."""

    result = CliRunner().invoke(
        app, ["filter", "x", "--config", str(tmp_path / "missing.yml")], env=_clean_env()
    )

    assert result.exit_code == 1
    assert "filter failed at stage `config`: Config file not found" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_invalid_config_file_reports_detail(tmp_path: Path) -> None:
    """Invalid config keys should be reported with the loader detail."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("bogus: 1\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["lots", "x", "--config", str(config_path)], env=_clean_env())

    assert result.exit_code == 1
    assert "lots failed at stage `config`" in result.output
    assert "unsupported key(s): bogus" in result.output


def test_missing_stopword_file_reports_stopwords_stage(tmp_path: Path) -> None:
    """A configured but missing stopword file should fail at the stopwords stage."""

    config_path = tmp_path / "lotindex.yml"
    config_path.write_text(
        f"stopwords_path: {tmp_path / 'nope.yml'}\n", encoding="utf-8"
    )

    result = CliRunner().invoke(app, ["filter", "x", "--config", str(config_path)], env=_clean_env())

    assert result.exit_code == 1
    assert "filter failed at stage `stopwords`" in result.output


def test_invalid_environment_reports_config_stage() -> None:
    """Invalid environment values should fail at the config stage."""

    env = _clean_env()
    env["LOTINDEX_MIN_TOKEN_LENGTH"] = "zero"

    result = CliRunner().invoke(app, ["tokens", "x"], env=env)

    assert result.exit_code == 1
    assert "tokens failed at stage `config`: Invalid environment configuration" in result.output


def test_unexpected_errors_report_generic_failure(monkeypatch: MonkeyPatch) -> None:
    """Non-stage exceptions should still exit with code 1 and a short message."""

    def _failing_filter(*_: object, **__: object) -> str:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("unexpected normalizer error")

    monkeypatch.setattr("lotindex.cli.TextNormalizer.filter", _failing_filter)

    result = CliRunner().invoke(app, ["filter", "x"], env=_clean_env())

    assert result.exit_code == 1
    assert "filter failed: unexpected normalizer error" in result.output
