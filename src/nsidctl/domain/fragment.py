"""Fragment value type — ``#name`` suffix naming a definition in a schema document."""

from __future__ import annotations

from dataclasses import dataclass

from nsidctl.domain.errors import FragmentDefect, InvalidFragmentError
from nsidctl.domain.grammar import SEGMENT_LEN_RANGE, is_ascii_alphanumeric, to_bytes

FRAGMENT_PREFIX = "#"


def find_fragment_defect(data: bytes) -> FragmentDefect | None:
    """Return the first rule *data* breaks, or None if it is a valid fragment."""
    if not data.startswith(b"#"):
        return FragmentDefect.MISSING_PREFIX
    name = data[1:]
    if len(name) not in SEGMENT_LEN_RANGE:
        return FragmentDefect.INVALID_LENGTH
    if not is_ascii_alphanumeric(name):
        return FragmentDefect.INVALID_CHARACTER
    return None


def validate_fragment(value: str | bytes) -> None:
    """Raise :class:`InvalidFragmentError` unless *value* is a valid fragment."""
    defect = find_fragment_defect(to_bytes(value))
    if defect is not None:
        raise InvalidFragmentError(value, defect)


def is_valid_fragment(value: str | bytes) -> bool:
    """Check whether *value* is a valid ``#``-prefixed fragment."""
    return find_fragment_defect(to_bytes(value)) is None


@dataclass(frozen=True, order=True)
class Fragment:
    """A validated fragment, stored with its leading ``#``."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"Fragment text must be str, not {type(self.text).__name__}"
            raise TypeError(msg)
        validate_fragment(self.text)

    @classmethod
    def from_bytes(cls, data: bytes) -> Fragment:
        """Validate raw bytes and build a fragment from them."""
        data = bytes(data)
        validate_fragment(data)
        return cls._trusted(data.decode("ascii"))

    @classmethod
    def _trusted(cls, text: str) -> Fragment:
        fragment = object.__new__(cls)
        object.__setattr__(fragment, "text", text)
        return fragment

    @property
    def name(self) -> str:
        """The fragment name without the leading ``#``."""
        return self.text[1:]

    def __str__(self) -> str:
        return self.text
