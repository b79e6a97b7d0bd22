"""Tests for the root CLI group."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from orgdir import __version__
from orgdir.cli import cli


class TestRootGroup:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for group in ("person", "employee", "dept", "export"):
            assert group in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.usefixtures("_isolated_roster")
    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output

    @pytest.mark.usefixtures("_isolated_roster")
    def test_examples_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["employee", "--examples"])
        assert result.exit_code == 0
        assert "orgdir employee hire" in result.output
