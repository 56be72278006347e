"""Input classification enums shared by the service and CLI layers."""

from __future__ import annotations

from enum import StrEnum


class InputKind(StrEnum):
    """What a raw input string is expected to be."""

    NSID = "nsid"
    FRAGMENT = "fragment"
    REFERENCE = "reference"
