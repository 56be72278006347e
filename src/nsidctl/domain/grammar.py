"""Segment grammar — byte-level predicates for NSID segments.

Three segment positions with different rules:
- TLD (first segment): domain segment that does not start with a digit.
- Domain segment (interior): letters, digits, hyphens; no leading/trailing hyphen.
- Name (final segment): letters and digits only; does not start with a digit.

All predicates take ``bytes`` so that non-ASCII input is rejected
structurally rather than after decoding. Every predicate rejects empty input.
"""

from __future__ import annotations

SEGMENT_LEN_RANGE = range(1, 64)

_DIGITS = frozenset(b"0123456789")
_LETTERS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ALNUM = _LETTERS | _DIGITS
_DOMAIN_CHARS = _ALNUM | frozenset(b"-")

_HYPHEN = ord("-")


def to_bytes(value: str | bytes) -> bytes:
    """Encode *value* for byte-level validation.

    Lone surrogates are passed through so they fail the ASCII checks
    instead of raising ``UnicodeEncodeError``.
    """
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    return bytes(value)


def is_ascii_alphanumeric(segment: bytes) -> bool:
    """Return True if every byte of *segment* is ``[A-Za-z0-9]``.

    Empty input is vacuously alphanumeric; callers check length separately.
    """
    return all(b in _ALNUM for b in segment)


def is_valid_domain_segment(segment: bytes) -> bool:
    """Check an interior NSID segment.

    Examples:
        >>> is_valid_domain_segment(b"example")
        True
        >>> is_valid_domain_segment(b"b-1")
        True
        >>> is_valid_domain_segment(b"-bad")
        False
    """
    if len(segment) not in SEGMENT_LEN_RANGE:
        return False
    if segment[0] == _HYPHEN or segment[-1] == _HYPHEN:
        return False
    return all(b in _DOMAIN_CHARS for b in segment)


def is_valid_tld(segment: bytes) -> bool:
    """Check the first (leftmost) NSID segment.

    Examples:
        >>> is_valid_tld(b"com")
        True
        >>> is_valid_tld(b"8com")
        False
    """
    return is_valid_domain_segment(segment) and segment[0] not in _DIGITS


def is_valid_nsid_name(segment: bytes) -> bool:
    """Check the final (rightmost) NSID segment.

    Examples:
        >>> is_valid_nsid_name(b"fooBar")
        True
        >>> is_valid_nsid_name(b"foo-bar")
        False
        >>> is_valid_nsid_name(b"1foo")
        False
    """
    if len(segment) not in SEGMENT_LEN_RANGE:
        return False
    if segment[0] in _DIGITS:
        return False
    return is_ascii_alphanumeric(segment)
