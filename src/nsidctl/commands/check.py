"""Command: validate NSIDs, fragments, or references in bulk."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nsidctl.commands._base import NsidCommand
from nsidctl.domain.types import InputKind

if TYPE_CHECKING:
    from nsidctl.commands._context import AppContext


@click.command(
    cls=NsidCommand,
    examples="""\
  nsidctl check com.example.fooBar
  nsidctl check com.example.fooBar net.users.bob.ping
  nsidctl check --kind fragment '#main' '#record'
  nsidctl check --kind reference com.example.foo#bar '#main'
  cat nsids.txt | nsidctl -q check --stdin""",
)
@click.argument("values", nargs=-1)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in InputKind]),
    default=None,
    help="What the inputs are expected to be (default: [check] default_kind).",
)
@click.option("--stdin", "from_stdin", is_flag=True, help="Also read inputs from stdin, one per line.")
@click.pass_obj
def check(app: AppContext, values: tuple[str, ...], kind: str | None, from_stdin: bool) -> None:
    """Check that every VALUE is well formed."""
    inputs = list(values)
    if from_stdin:
        stream = click.get_text_stream("stdin")
        inputs.extend(line.strip() for line in stream if line.strip())

    app.emit(app.service.check(inputs, kind=InputKind(kind) if kind else None))
