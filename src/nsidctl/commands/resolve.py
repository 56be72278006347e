"""Command: resolve a reference against a base NSID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsidctl.commands._base import NsidCommand

if TYPE_CHECKING:
    from nsidctl.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsidctl resolve com.example.foo '#bar'
  nsidctl resolve com.example.foo net.other.thing#main""",
)
@click.argument("base")
@click.argument("reference")
@click.pass_obj
def resolve(app: AppContext, base: str, reference: str) -> None:
    """Resolve REFERENCE as it would appear in the document for BASE."""
    app.emit(app.service.resolve(base, reference))
