"""Subcommand modules for orgdir.

register_commands() imports lazily so ``orgdir --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    # --- Groups ---
    from orgdir.commands.dept import dept
    from orgdir.commands.employee import employee
    from orgdir.commands.person import person

    cli.add_command(person)
    cli.add_command(employee)
    cli.add_command(dept)

    # --- Standalone commands ---
    from orgdir.commands.export import export

    cli.add_command(export)
