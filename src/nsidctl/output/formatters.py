"""Adapt ServiceResult to the requested output mode.

Three modes, chosen by global CLI flags: JSON (``--json``) for machines,
quiet (``-q``) for piping, and Rich-rendered text for humans.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from nsidctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from nsidctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode flags, lifted from NsidSettings by the CLI context."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default human rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
