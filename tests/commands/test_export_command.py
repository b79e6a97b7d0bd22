"""Tests for the export command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from orgdir.cli import cli
from orgdir.infrastructure.roster import decode_employees


@pytest.mark.usefixtures("_isolated_roster")
class TestExportCommand:
    @pytest.fixture(autouse=True)
    def _seed(self, cli_runner: CliRunner, _isolated_roster: None) -> None:
        cli_runner.invoke(cli, ["person", "add", "Ann Lee", "--age", "20"])
        cli_runner.invoke(
            cli,
            ["employee", "hire", "John Smith", "--age", "30", "--id", "EMP0001",
             "--salary", "75000"],
        )

    def test_stdout_contains_only_employees(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [e["employee_id"] for e in data] == ["EMP0001"]

    def test_output_file_decodes(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "employees.json"
        result = cli_runner.invoke(cli, ["export", "-o", str(target)])
        assert result.exit_code == 0
        (employee,) = decode_employees(target.read_text(encoding="utf-8"))
        assert employee.name == "John Smith"
