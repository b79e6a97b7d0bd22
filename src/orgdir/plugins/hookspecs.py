"""Pluggy hook specifications for orgdir lifecycle events.

Hooks fire synchronously after a mutation has been applied.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("orgdir")
hookimpl = pluggy.HookimplMarker("orgdir")


class OrgdirHookSpec:
    """Hook specifications for the orgdir plugin system."""

    @hookspec
    def post_register(self, kind: str, name: str) -> None:
        """Called after a person or employee is added to the directory."""

    @hookspec
    def post_department_create(self, department_id: str, code: str) -> None:
        """Called after a department is registered."""

    @hookspec
    def post_assign(self, employee_id: str, department_code: str) -> None:
        """Called after an employee joins a department."""

    @hookspec
    def post_unassign(self, employee_id: str, department_code: str) -> None:
        """Called after an employee leaves a department."""

    @hookspec
    def post_raise(self, employee_id: str, old_salary: str, new_salary: str) -> None:
        """Called after a salary change. Salaries are passed as decimal strings."""
