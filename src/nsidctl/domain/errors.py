"""Parse errors for NSIDs and fragments.

Two externally visible error kinds, one per value type. Each carries a
``reason`` naming the rule that failed; callers that only care about
success or failure catch :class:`ParseError`.
"""

from __future__ import annotations

from enum import StrEnum


class NsidDefect(StrEnum):
    """Rule an NSID failed."""

    TOO_LONG = "too_long"
    EMPTY = "empty"
    INVALID_TLD = "invalid_tld"
    INVALID_DOMAIN_SEGMENT = "invalid_domain_segment"
    AUTHORITY_TOO_LONG = "authority_too_long"
    INVALID_NAME = "invalid_name"
    TOO_FEW_SEGMENTS = "too_few_segments"


class FragmentDefect(StrEnum):
    """Rule a fragment failed."""

    MISSING_PREFIX = "missing_prefix"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"


class ParseError(ValueError):
    """Base class for malformed NSID, fragment, and reference input."""

    code = "PARSE_ERROR"
    label = "value"

    def __init__(self, text: str | bytes, reason: StrEnum) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid {self.label} {text!r}: {reason}")


class InvalidNsidError(ParseError):
    """Malformed NSID, standalone or as the NSID part of a reference."""

    code = "NSID_FORMAT"
    label = "NSID"

    def __init__(self, text: str | bytes, reason: NsidDefect) -> None:
        super().__init__(text, reason)


class InvalidFragmentError(ParseError):
    """Malformed fragment, standalone or as the fragment part of a reference."""

    code = "NSID_FRAGMENT_FORMAT"
    label = "fragment"

    def __init__(self, text: str | bytes, reason: FragmentDefect) -> None:
        super().__init__(text, reason)
