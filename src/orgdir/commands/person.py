"""Command group: people in the directory (add, find, list)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orgdir.commands._base import OrgGroup
from orgdir.services.directory import DirectoryService

if TYPE_CHECKING:
    from orgdir.commands._context import AppContext


@click.group(
    cls=OrgGroup,
    examples="""\
  orgdir person add "Jane Doe" --age 41
  orgdir person find "jane doe"
  orgdir --json person list""",
)
def person() -> None:
    """Register and look up people."""


@person.command(mutates=True)
@click.argument("name")
@click.option("--age", type=int, required=True, help="Age in years (0-150).")
@click.pass_obj
def add(app: AppContext, name: str, age: int) -> None:
    """Register a person who is not an employee."""
    app.emit(DirectoryService(app.organization).create_person(name, age))


@person.command()
@click.argument("name")
@click.pass_obj
def find(app: AppContext, name: str) -> None:
    """Find a person or employee by name (case-insensitive)."""
    app.emit(DirectoryService(app.organization).find_person(name))


@person.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List everyone in the directory in registration order."""
    app.emit(DirectoryService(app.organization).list_people())
