"""Command: break a reference into its parts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsidctl.commands._base import NsidCommand

if TYPE_CHECKING:
    from nsidctl.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsidctl parse com.example.fooBar
  nsidctl parse com.example.foo#bar
  nsidctl parse '#main'
  nsidctl --json parse net.users.bob.ping""",
)
@click.argument("reference")
@click.pass_obj
def parse(app: AppContext, reference: str) -> None:
    """Parse REFERENCE (an NSID, NSID#fragment, or #fragment)."""
    app.emit(app.service.parse(reference))
