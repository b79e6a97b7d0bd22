"""Tests for the person command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from orgdir.cli import cli


@pytest.mark.usefixtures("_isolated_roster")
class TestPersonCommands:
    def test_add_and_find(self, cli_runner: CliRunner) -> None:
        added = cli_runner.invoke(cli, ["person", "add", "Ann Lee", "--age", "20"])
        assert added.exit_code == 0
        assert "OK" in added.stdout

        found = cli_runner.invoke(cli, ["--json", "person", "find", "ann lee"])
        assert found.exit_code == 0
        data = json.loads(found.stdout)
        assert data["data"]["name"] == "Ann Lee"
        assert data["data"]["kind"] == "person"

    def test_add_invalid_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["person", "add", "A1", "--age", "20"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr

    def test_find_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "person", "find", "Nobody"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "NOT_FOUND"

    def test_list(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "add", "Ann Lee", "--age", "20"])
        cli_runner.invoke(cli, ["person", "add", "Bo Chen", "--age", "33"])
        result = cli_runner.invoke(cli, ["--json", "person", "list"])
        data = json.loads(result.stdout)
        assert [item["name"] for item in data["data"]["items"]] == ["Ann Lee", "Bo Chen"]

    def test_quiet_find_prints_description(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "add", "Ann Lee", "--age", "20"])
        result = cli_runner.invoke(cli, ["-q", "person", "find", "Ann Lee"])
        assert result.stdout.strip() == "Ann Lee, age 20"

    def test_quiet_list(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["person", "add", "Ann Lee", "--age", "20"])
        result = cli_runner.invoke(cli, ["-q", "person", "list"])
        assert result.stdout.strip() == "Ann Lee"
