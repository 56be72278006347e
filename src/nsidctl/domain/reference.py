"""NSID references — full (NSID plus optional fragment) or relative (fragment only).

A :class:`FullReference` keeps one string and the offset where its
fragment starts. Nothing is sliced at parse time; NSID and fragment
values are built on request.

A :class:`Reference` is a two-case tagged value. The case is picked once,
at parse time, from the first character of the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from nsidctl.domain.errors import InvalidFragmentError, InvalidNsidError
from nsidctl.domain.fragment import FRAGMENT_PREFIX, Fragment, validate_fragment
from nsidctl.domain.nsid import Nsid, validate_nsid


@dataclass(frozen=True, order=True)
class FullReference:
    """An NSID optionally followed by a fragment: ``com.example.foo#bar``.

    ``frag_start == len(text)`` means no fragment is present.
    """

    text: str
    frag_start: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"FullReference text must be str, not {type(self.text).__name__}"
            raise TypeError(msg)

        frag_start = self.text.find(FRAGMENT_PREFIX)
        if frag_start == -1:
            frag_start = len(self.text)

        # Errors name the whole reference, not just the part that failed.
        try:
            validate_nsid(self.text[:frag_start])
        except InvalidNsidError as exc:
            raise InvalidNsidError(self.text, exc.reason) from exc
        if frag_start < len(self.text):
            try:
                validate_fragment(self.text[frag_start:])
            except InvalidFragmentError as exc:
                raise InvalidFragmentError(self.text, exc.reason) from exc

        object.__setattr__(self, "frag_start", frag_start)

    @classmethod
    def from_nsid(cls, nsid: Nsid) -> FullReference:
        """Wrap an already validated NSID as a reference without a fragment."""
        return cls._trusted(nsid.text, len(nsid.text))

    @classmethod
    def _trusted(cls, text: str, frag_start: int) -> FullReference:
        reference = object.__new__(cls)
        object.__setattr__(reference, "text", text)
        object.__setattr__(reference, "frag_start", frag_start)
        return reference

    def clone_nsid(self) -> Nsid:
        """Return the NSID part as a new :class:`Nsid`."""
        return Nsid._trusted(self.text[: self.frag_start])

    def has_fragment(self) -> bool:
        return self.frag_start < len(self.text)

    def clone_fragment(self) -> Fragment | None:
        """Return the fragment part (with its ``#``), or None if absent."""
        if not self.has_fragment():
            return None
        return Fragment._trusted(self.text[self.frag_start :])

    def fragment_name(self) -> str | None:
        """Return the fragment name without its ``#``, or None if absent."""
        if not self.has_fragment():
            return None
        return self.text[self.frag_start + 1 :]

    def __str__(self) -> str:
        return self.text


class ReferenceKind(StrEnum):
    """The two shapes a reference can take."""

    FULL = "full"
    RELATIVE = "relative"


@dataclass(frozen=True)
class Reference:
    """A full reference or a relative fragment.

    Examples::

        Reference.parse("#main").kind             # ReferenceKind.RELATIVE
        Reference.parse("com.example.foo").kind   # ReferenceKind.FULL
    """

    kind: ReferenceKind
    value: FullReference | Fragment

    def __post_init__(self) -> None:
        kind = ReferenceKind(self.kind)
        expected = FullReference if kind is ReferenceKind.FULL else Fragment
        if not isinstance(self.value, expected):
            msg = f"{kind} reference requires {expected.__name__}, got {type(self.value).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "kind", kind)

    @classmethod
    def parse(cls, text: str) -> Reference:
        """Parse *text*, dispatching on a leading ``#``.

        Raises:
            InvalidNsidError: The NSID part of a full reference is malformed.
            InvalidFragmentError: The fragment is malformed.
        """
        if text.startswith(FRAGMENT_PREFIX):
            return cls(ReferenceKind.RELATIVE, Fragment(text))
        return cls(ReferenceKind.FULL, FullReference(text))

    @property
    def full(self) -> FullReference | None:
        return self.value if isinstance(self.value, FullReference) else None

    @property
    def relative(self) -> Fragment | None:
        return self.value if isinstance(self.value, Fragment) else None

    def resolve(self, base: Nsid) -> FullReference:
        """Resolve against the NSID of the document the reference appears in.

        Full references are already absolute and are returned unchanged.
        """
        if isinstance(self.value, FullReference):
            return self.value
        return FullReference._trusted(base.text + self.value.text, len(base.text))

    def __str__(self) -> str:
        return str(self.value)
