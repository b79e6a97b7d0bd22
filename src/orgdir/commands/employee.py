"""Command group: employees (hire, raise)."""

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
  orgdir employee hire "John Smith" --age 30 --id EMP0001 --salary 75000 --dept IT
  orgdir employee raise EMP0001 10
  orgdir employee raise EMP0001 -- -5""",
)
def employee() -> None:
    """Hire employees and adjust salaries."""


@employee.command(mutates=True)
@click.argument("name")
@click.option("--age", type=int, required=True, help="Age in years (0-150).")
@click.option("--id", "employee_id", required=True, help="Employee id, e.g. EMP0001.")
@click.option("--salary", type=float, required=True, help="Annual salary (0-1,000,000).")
@click.option("--dept", "department_code", default=None, help="Department code to join.")
@click.pass_obj
def hire(
    app: AppContext,
    name: str,
    age: int,
    employee_id: str,
    salary: float,
    department_code: str | None,
) -> None:
    """Validate and register a new employee, optionally joining a department."""
    svc = DirectoryService(app.organization)
    app.emit(
        svc.create_and_register_employee(name, age, employee_id, salary, department_code)
    )


@employee.command("raise", mutates=True)
@click.argument("employee_id")
@click.argument("percentage", type=float)
@click.pass_obj
def raise_cmd(app: AppContext, employee_id: str, percentage: float) -> None:
    """Raise (or cut) an employee's salary by PERCENTAGE."""
    target = app.require_employee(employee_id)
    app.emit(DirectoryService(app.organization).give_raise(target, percentage))
