"""Click base classes for orgdir commands.

``OrgCommand`` and ``OrgGroup`` accept an ``examples`` string, exposed as an
eager ``--examples`` flag so ``--help`` stays short. Commands that change the
directory are declared with ``mutates=True``; :meth:`AppContext.emit` writes
the roster file back only for those, and only after a successful result.
"""

from __future__ import annotations

from typing import Any

import click

ROSTER_EPILOG = "Saves the roster file when the command succeeds."


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        if getattr(ctx.command, "mutates", False):
            click.echo(f"\n{ROSTER_EPILOG}")
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def command_mutates(ctx: click.Context | None = None) -> bool:
    """Whether the command being invoked was declared with ``mutates=True``."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is None:
        return False
    return bool(getattr(ctx.command, "mutates", False))


class OrgCommand(click.Command):
    """Command with ``--examples`` and a ``mutates`` marker.

    A mutating command gets :data:`ROSTER_EPILOG` as its help epilog unless
    one is given.
    """

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        mutates: bool = False,
        **kwargs: Any,
    ) -> None:
        if mutates:
            kwargs.setdefault("epilog", ROSTER_EPILOG)
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.mutates = mutates
        if examples:
            _add_examples_option(self, examples)


class OrgGroup(click.Group):
    """Group whose subcommands default to :class:`OrgCommand`."""

    command_class = OrgCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def mutating_commands(self) -> list[str]:
        """Names of subcommands that write the roster, in registration order."""
        return [
            name for name, cmd in self.commands.items() if getattr(cmd, "mutates", False)
        ]

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        names = self.mutating_commands()
        if names:
            formatter.write_paragraph()
            formatter.write_text(f"Commands that save the roster: {', '.join(names)}.")
