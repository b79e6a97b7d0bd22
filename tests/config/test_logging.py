"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from decimal import Decimal
from pathlib import Path

import pytest
import structlog

from orgdir.config.logging import configure_logging, decimals_to_str


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    orgdir_logger = logging.getLogger("orgdir")
    orgdir_level = orgdir_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    orgdir_logger.setLevel(orgdir_level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("orgdir").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("orgdir").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("orgdir.test").warning("department.not_found", code="XX")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "department.not_found"
        assert parsed["code"] == "XX"
        assert parsed["level"] == "warning"

    def test_stdlib_records_rendered(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("orgdir.infrastructure").debug("Added %s", "person")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Added person"

    def test_info_suppressed_when_quiet(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("orgdir.test").info("person.added", name="Ann")
        assert capfd.readouterr().err.strip() == ""

    def test_decimals_rendered_exactly(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("orgdir.test").warning(
            "salary.out_of_range", salary=Decimal("1500000.00")
        )
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["salary"] == "1500000.00"

    def test_roster_path_bound_to_events(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        roster = tmp_path / "roster.json"
        configure_logging(verbose=False, log_json=True, roster_path=roster)
        logging.getLogger("orgdir.infrastructure").warning("Roster touched")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["roster"] == str(roster)

    def test_reconfigure_drops_previous_roster(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(log_json=True, roster_path=tmp_path / "old.json")
        configure_logging(log_json=True)
        structlog.get_logger("orgdir.test").warning("department.not_found", code="XX")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "roster" not in parsed


class TestDecimalsToStr:
    def test_only_decimals_converted(self) -> None:
        event = {"event": "salary.raised", "old": Decimal("75000"), "count": 2}
        assert decimals_to_str(None, "info", event) == {
            "event": "salary.raised",
            "old": "75000",
            "count": 2,
        }
