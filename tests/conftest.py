"""Shared pytest fixtures and test helpers for orgdir tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from orgdir.domain.models import Employee
from orgdir.infrastructure.organization import Organization
from orgdir.services.directory import DirectoryService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def org() -> Organization:
    """Empty organization with no plugins attached."""
    return Organization()


@pytest.fixture
def service(org: Organization) -> DirectoryService:
    return DirectoryService(org)


@pytest.fixture
def it_department(service: DirectoryService) -> str:
    """Register the IT department and return its code."""
    result = service.create_department("Information Technology", "IT")
    assert result.ok
    return "IT"


@pytest.fixture
def _isolated_roster(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI commands from an empty temp directory with no config discovery.

    Use via ``@pytest.mark.usefixtures("_isolated_roster")``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ORGDIR_CONFIG", raising=False)
    monkeypatch.delenv("ORGDIR_ROSTER__PATH", raising=False)
    (tmp_path / "orgdir.toml").write_text("[plugins]\nenabled = false\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def hire(
    service: DirectoryService,
    name: str = "John Smith",
    *,
    age: int = 30,
    employee_id: str = "EMP0001",
    salary: float = 75000,
    department_code: str | None = None,
) -> Employee:
    """Hire an employee via DirectoryService, asserting success."""
    result = service.create_and_register_employee(
        name, age, employee_id, salary, department_code
    )
    assert result.ok, result.error
    found = service.organization.directory.find_by_employee_id(employee_id)
    assert found is not None
    return found
