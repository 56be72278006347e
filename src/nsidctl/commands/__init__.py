"""Subcommand modules for nsidctl.

register_commands() imports lazily so ``nsidctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nsidctl.commands.check import check
    from nsidctl.commands.parse import parse
    from nsidctl.commands.resolve import resolve

    cli.add_command(check)
    cli.add_command(parse)
    cli.add_command(resolve)
