"""NSID value type, validation, and lazy segment access.

An NSID is a reverse-domain dotted identifier: ``com.example.fooBar``.
The first segment is the TLD, the last is the name, and everything in
between is an interior domain segment.

INVARIANT: an :class:`Nsid` only ever holds text that passed
:func:`validate_nsid`. The text is stored exactly as given.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from nsidctl.domain.errors import InvalidNsidError, NsidDefect
from nsidctl.domain.grammar import (
    is_valid_domain_segment,
    is_valid_nsid_name,
    is_valid_tld,
    to_bytes,
)

MAX_NSID_LEN = 317
MAX_AUTHORITY_LEN = 253
MIN_SEGMENTS = 3


def find_nsid_defect(data: bytes) -> NsidDefect | None:
    """Return the first rule *data* breaks, or None if it is a valid NSID.

    Single left-to-right pass. The segment after the current one is
    fetched ahead so the final segment can be validated as a name and
    checked against the authority length bound.
    """
    if len(data) > MAX_NSID_LEN:
        return NsidDefect.TOO_LONG
    if not data:
        return NsidDefect.EMPTY

    segments = iter(data.split(b"."))
    tld = next(segments)
    if not is_valid_tld(tld):
        return NsidDefect.INVALID_TLD

    length = len(tld)  # authority bytes seen so far, separators included
    count = 1
    segment = next(segments, None)
    while segment is not None:
        following = next(segments, None)
        if following is not None:
            if not is_valid_domain_segment(segment):
                return NsidDefect.INVALID_DOMAIN_SEGMENT
        elif length >= MAX_AUTHORITY_LEN:
            return NsidDefect.AUTHORITY_TOO_LONG
        elif not is_valid_nsid_name(segment):
            return NsidDefect.INVALID_NAME

        count += 1
        length += 1 + len(segment)
        segment = following

    if count < MIN_SEGMENTS:
        return NsidDefect.TOO_FEW_SEGMENTS
    return None


def validate_nsid(value: str | bytes) -> None:
    """Raise :class:`InvalidNsidError` unless *value* is a valid NSID."""
    defect = find_nsid_defect(to_bytes(value))
    if defect is not None:
        raise InvalidNsidError(value, defect)


def is_valid_nsid(value: str | bytes) -> bool:
    """Check whether *value* is a valid NSID."""
    return find_nsid_defect(to_bytes(value)) is None


class NsidSegments:
    """Lazy view over the dot-separated segments of an NSID.

    Nothing is split up front: forward iteration scans with ``find`` and
    reverse iteration with ``rfind``. The view can be iterated any number
    of times, from either end.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[str]:
        text = self._text
        start = 0
        while True:
            end = text.find(".", start)
            if end == -1:
                yield text[start:]
                return
            yield text[start:end]
            start = end + 1

    def __reversed__(self) -> Iterator[str]:
        text = self._text
        end = len(text)
        while True:
            start = text.rfind(".", 0, end)
            yield text[start + 1 : end]
            if start == -1:
                return
            end = start

    def __len__(self) -> int:
        return self._text.count(".") + 1

    def __repr__(self) -> str:
        return f"NsidSegments({self._text!r})"


@dataclass(frozen=True, order=True)
class Nsid:
    """A validated Namespaced Identifier.

    Build from text with ``Nsid("com.example.fooBar")`` or from raw bytes
    with :meth:`from_bytes`. Both raise :class:`InvalidNsidError`.
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"Nsid text must be str, not {type(self.text).__name__}"
            raise TypeError(msg)
        validate_nsid(self.text)

    @classmethod
    def from_bytes(cls, data: bytes) -> Nsid:
        """Validate raw bytes and build an NSID from them."""
        data = bytes(data)
        validate_nsid(data)
        # Validation guarantees pure ASCII.
        return cls._trusted(data.decode("ascii"))

    @classmethod
    def _trusted(cls, text: str) -> Nsid:
        """Wrap *text* that is already known to be a valid NSID."""
        nsid = object.__new__(cls)
        object.__setattr__(nsid, "text", text)
        return nsid

    def segments(self) -> NsidSegments:
        """Return a lazy, reversible view of the segments in textual order."""
        return NsidSegments(self.text)

    @property
    def name(self) -> str:
        """The final segment (``fooBar`` in ``com.example.fooBar``)."""
        return self.text.rpartition(".")[2]

    @property
    def authority(self) -> str:
        """Everything before the final segment (``com.example``)."""
        return self.text.rpartition(".")[0]

    @property
    def domain_authority(self) -> str:
        """The authority in DNS order (``example.com``)."""
        return ".".join(reversed(NsidSegments(self.authority)))

    def __str__(self) -> str:
        return self.text
