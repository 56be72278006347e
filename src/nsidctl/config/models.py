"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, nsidctl.toml only holds overrides.
An empty (or missing) nsidctl.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from nsidctl.domain.types import InputKind


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    default_kind: InputKind = InputKind.NSID
    stop_on_error: bool = False
