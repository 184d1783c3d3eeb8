"""Tests for CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from modeltime.cli.main import cli

GOLDEN = Path(__file__).parent / "golden"


@pytest.fixture(autouse=True)
def _restore_log_level() -> Iterator[None]:
    """The CLI sets the package logger level; put it back after each test."""
    package_logger = logging.getLogger("modeltime")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


class TestCLI:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_show_defaults(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show"])
        assert result.exit_code == 0
        assert "Periods: 16" in result.output
        assert "Data periods: 4" in result.output

    def test_show_with_config(self, tmp_path: Path) -> None:
        runner = CliRunner()
        output_file = tmp_path / "schedule.csv"
        result = runner.invoke(
            cli,
            ["show", "--config", str(GOLDEN / "uneven.json"), "--output", str(output_file)],
        )
        assert result.exit_code == 0
        assert "Periods: 6" in result.output
        assert output_file.exists()
        assert output_file.read_text().splitlines()[3] == "2,2007,2"

    def test_show_yaml_config(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "--config", str(GOLDEN / "reference.yaml")])
        assert result.exit_code == 0
        assert "Periods: 16" in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"start_year": 2000, "inter_year1": 1990}')
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "--config", str(bad)])
        assert result.exit_code == 1
        assert "Invalid modeltime configuration" in result.output

    def test_lookup(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["lookup", "2040"])
        assert result.exit_code == 0
        assert "period 10" in result.output

    def test_lookup_miss(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["lookup", "1800"])
        assert result.exit_code == 1

    def test_describe(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", "3"])
        assert result.exit_code == 0
        assert "model_period_to_year: 2005" in result.output

    def test_describe_out_of_range(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", "99"])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_undecodable_config(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_bytes(b'{"start_year": \xff}')
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "--config", str(bad)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Cannot read configuration file" in result.output

    def test_show_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "--debug"])
        assert result.exit_code == 0
        assert any("Modeltime finalized" in m for m in caplog.messages)

    def test_group_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--debug", "lookup", "2040"])
        assert result.exit_code == 0
        assert any("Modeltime finalized" in m for m in caplog.messages)

    def test_no_debug_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", "3"])
        assert result.exit_code == 0
        assert not any("Modeltime finalized" in m for m in caplog.messages)
