"""nsidctl — Namespaced Identifier (NSID) validation and parsing."""

from __future__ import annotations

from nsidctl.domain.errors import InvalidFragmentError, InvalidNsidError, ParseError
from nsidctl.domain.fragment import Fragment, is_valid_fragment
from nsidctl.domain.grammar import SEGMENT_LEN_RANGE
from nsidctl.domain.nsid import (
    MAX_AUTHORITY_LEN,
    MAX_NSID_LEN,
    MIN_SEGMENTS,
    Nsid,
    NsidSegments,
    is_valid_nsid,
)
from nsidctl.domain.reference import FullReference, Reference, ReferenceKind

__version__ = "0.1.0"

__all__ = [
    "MAX_AUTHORITY_LEN",
    "MAX_NSID_LEN",
    "MIN_SEGMENTS",
    "SEGMENT_LEN_RANGE",
    "Fragment",
    "FullReference",
    "InvalidFragmentError",
    "InvalidNsidError",
    "Nsid",
    "NsidSegments",
    "ParseError",
    "Reference",
    "ReferenceKind",
    "__version__",
    "is_valid_fragment",
    "is_valid_nsid",
]
