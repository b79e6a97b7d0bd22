"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Loads the roster lazily, saves it after successful
mutations, and routes results to stdout/stderr with exit codes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import click

from orgdir.commands._base import command_mutates
from orgdir.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from orgdir.config.settings import OrgSettings
    from orgdir.domain.models import Employee
    from orgdir.infrastructure.organization import Organization
    from orgdir.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The organization is built on first access so ``--help`` never reads
    the roster file.
    """

    def __init__(self, settings: OrgSettings) -> None:
        self.settings = settings
        self._org: Organization | None = None

        from orgdir.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            roster_path=settings.roster_path,
        )

    @property
    def organization(self) -> Organization:
        """The organization loaded from the roster file (empty if none exists)."""
        if self._org is None:
            from orgdir.domain.errors import RosterError
            from orgdir.infrastructure.organization import Organization
            from orgdir.infrastructure.roster import load_roster

            org = Organization()
            path = self.settings.roster_path
            if path.is_file():
                try:
                    load_roster(path.read_text(encoding="utf-8"), org=org)
                except RosterError as exc:
                    msg = f"Cannot load roster {path}: {exc}"
                    raise click.ClickException(msg) from exc
                logger.debug("Loaded roster from %s", path)
            if self.settings.plugins.enabled:
                from orgdir.plugins.manager import PluginManager

                manager = PluginManager()
                names = manager.discover_and_load()
                logger.debug("Loaded plugins: %s", ", ".join(names) or "none")
                org.attach_plugins(manager)
            self._org = org
        return self._org

    def save(self) -> None:
        """Write the organization back to the roster file."""
        from orgdir.infrastructure.roster import dump_roster

        path = self.settings.roster_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            dump_roster(self.organization, indent=self.settings.roster.indent) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved roster to %s", path)

    def require_employee(self, employee_id: str) -> Employee:
        """Resolve *employee_id* or emit a NOT_FOUND result (exit code 1)."""
        employee = self.organization.directory.find_by_employee_id(employee_id)
        if employee is None:
            from orgdir.services.directory import DirectoryService

            self.fail(DirectoryService(self.organization).find_employee(employee_id))
        return employee

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, warnings to stderr; the roster is saved when the
          running command is declared with ``mutates=True``.
        * Failure: stderr, exit code 1; nothing is saved.
        """
        if not result.ok:
            self.fail(result)
        settings = self._output_settings()
        if command_mutates():
            self.save()
        click.echo(format_result(result, settings=settings))
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
