"""Tests for the `load` and `structure` commands."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from filtered_loader.cli.main import app

# __file__ is tests/cli/test_main.py
FIXTURES = Path(__file__).parent.parent / "fixtures"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_structlog() -> Iterator[None]:
    # The CLI points structlog at the runner's stderr, which is closed afterwards.
    yield
    structlog.reset_defaults()


def _invoke(*args: str):
    return runner.invoke(app, [*args, "--log-format", "json"])


class TestLoad:
    def test_batch_prints_every_record(self) -> None:
        result = _invoke("load", str(FIXTURES / "numbers.jsonl"))

        assert result.exit_code == 0
        assert '{"a": 1, "label": "x", "ok": true}' in result.output
        assert '{"a": 3, "label": "z", "ok": true}' in result.output

    def test_incremental_mode_flag(self) -> None:
        result = _invoke("load", str(FIXTURES / "numbers.csv"), "--mode", "incremental")

        assert result.exit_code == 0
        assert '{"a": 2, "label": "y", "ok": false}' in result.output

    def test_config_applies_transform(self) -> None:
        result = _invoke(
            "load",
            str(FIXTURES / "numbers.jsonl"),
            "--config",
            str(FIXTURES / "scale_incremental.yaml"),
        )

        assert result.exit_code == 0
        assert '{"a": 2, "label": "x", "ok": true}' in result.output
        assert '{"a": 6, "label": "z", "ok": true}' in result.output

    def test_drop_fields_config(self) -> None:
        result = _invoke(
            "load",
            str(FIXTURES / "numbers.csv"),
            "-c",
            str(FIXTURES / "drop_batch.yaml"),
        )

        assert result.exit_code == 0
        assert '{"a": 1}' in result.output
        assert '{"a": 3}' in result.output
        assert '"label": "x"' not in result.output

    def test_missing_file_exits_1(self) -> None:
        result = _invoke("load", str(FIXTURES / "no_such_file.jsonl"))

        assert result.exit_code == 1
        assert "Failed to read source" in result.output

    def test_unknown_extension_exits_1(self) -> None:
        result = _invoke("load", str(FIXTURES / "scale_incremental.yaml"))

        assert result.exit_code == 1
        assert "unsupported source kind" in result.output

    def test_invalid_mode_exits_1(self) -> None:
        result = _invoke("load", str(FIXTURES / "numbers.jsonl"), "--mode", "sideways")

        assert result.exit_code == 1
        assert "Invalid mode" in result.output

    def test_invalid_log_format_exits_1(self) -> None:
        result = runner.invoke(
            app, ["load", str(FIXTURES / "numbers.jsonl"), "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.output

    def test_unknown_transform_exits_1(self) -> None:
        result = _invoke(
            "load",
            str(FIXTURES / "numbers.jsonl"),
            "-c",
            str(FIXTURES / "unknown_transform.yaml"),
        )

        assert result.exit_code == 1
        assert "unsupported transform kind 'discretize'" in result.output

    def test_structure_discovery_failure_exits_1(self) -> None:
        result = _invoke(
            "load",
            str(FIXTURES / "numbers.jsonl"),
            "-c",
            str(FIXTURES / "missing_field.yaml"),
        )

        assert result.exit_code == 1
        assert "Failed to discover structure" in result.output

    def test_malformed_record_exits_1(self) -> None:
        result = _invoke("load", str(FIXTURES / "missing_key.jsonl"), "-m", "incremental")

        assert result.exit_code == 1
        assert "missing key(s) 'label'" in result.output


    def test_console_log_format_prints_summary(self) -> None:
        result = runner.invoke(
            app,
            ["load", str(FIXTURES / "numbers.jsonl"), "--log-format", "console"],
        )

        assert result.exit_code == 0
        assert "batch filtered 3 records into 3" in result.output

    def test_json_log_format_has_no_summary(self) -> None:
        result = _invoke("load", str(FIXTURES / "numbers.jsonl"))

        assert result.exit_code == 0
        assert "filtered 3 records into" not in result.output

    def test_duplicate_csv_header_exits_1(self) -> None:
        result = _invoke("load", str(FIXTURES / "duplicate_header.csv"))

        assert result.exit_code == 1
        assert "Failed to read source" in result.output

    def test_non_utf8_file_exits_1(self) -> None:
        result = _invoke("load", str(FIXTURES / "invalid_utf8.jsonl"))

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output


class TestStructure:
    def test_prints_field_names(self) -> None:
        result = _invoke("structure", str(FIXTURES / "numbers.csv"))

        assert result.exit_code == 0
        assert "label" in result.output
        assert "numeric" in result.output
        assert "boolean" in result.output

    def test_reflects_transform(self) -> None:
        result = _invoke(
            "structure",
            str(FIXTURES / "numbers.csv"),
            "-c",
            str(FIXTURES / "drop_batch.yaml"),
        )

        assert result.exit_code == 0
        assert "numeric" in result.output
        assert "boolean" not in result.output

    def test_incremental_structure_discovery_failure_exits_1(self) -> None:
        result = _invoke(
            "structure",
            str(FIXTURES / "numbers.jsonl"),
            "-c",
            str(FIXTURES / "missing_field.yaml"),
        )

        assert result.exit_code == 1
        assert "Failed to discover structure" in result.output
