"""Command group: departments (create, show, assign, remove, structure)."""

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
  orgdir dept create "Information Technology" IT
  orgdir dept assign EMP0001 it
  orgdir dept remove EMP0001
  orgdir dept structure""",
)
def dept() -> None:
    """Manage departments and their members."""


@dept.command(mutates=True)
@click.argument("name")
@click.argument("code")
@click.pass_obj
def create(app: AppContext, name: str, code: str) -> None:
    """Create an empty department identified by CODE."""
    app.emit(DirectoryService(app.organization).create_department(name, code))


@dept.command()
@click.argument("code")
@click.pass_obj
def show(app: AppContext, code: str) -> None:
    """Show one department and its members (code is case-insensitive)."""
    app.emit(DirectoryService(app.organization).find_department(code))


@dept.command(mutates=True)
@click.argument("employee_id")
@click.argument("code")
@click.pass_obj
def assign(app: AppContext, employee_id: str, code: str) -> None:
    """Move an employee into the department with CODE."""
    target = app.require_employee(employee_id)
    app.emit(DirectoryService(app.organization).assign_employee(target, code))


@dept.command(mutates=True)
@click.argument("employee_id")
@click.option("--code", default=None, help="Department to leave (default: current one).")
@click.pass_obj
def remove(app: AppContext, employee_id: str, code: str | None) -> None:
    """Remove an employee from a department."""
    target = app.require_employee(employee_id)
    app.emit(
        DirectoryService(app.organization).unassign_employee(target, department_code=code)
    )


@dept.command()
@click.pass_obj
def structure(app: AppContext) -> None:
    """Show every department with its member count and names."""
    app.emit(DirectoryService(app.organization).display_department_structure())
