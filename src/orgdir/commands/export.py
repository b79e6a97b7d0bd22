"""Command: export employees as JSON."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from orgdir.commands._base import OrgCommand

if TYPE_CHECKING:
    from orgdir.commands._context import AppContext


@click.command(
    cls=OrgCommand,
    examples="""\
  orgdir export
  orgdir export --output employees.json""",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to a file instead of stdout.",
)
@click.pass_obj
def export(app: AppContext, output: Path | None) -> None:
    """Export every employee in the structured JSON form."""
    from orgdir.infrastructure.roster import encode_employees

    text = encode_employees(app.organization.directory.employees())
    if output is None:
        click.echo(text)
        return
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Exported to {output}", err=True)
