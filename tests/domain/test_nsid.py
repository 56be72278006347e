"""Tests for NSID validation, construction, and segment access."""

import dataclasses

import pytest

from nsidctl.domain.errors import InvalidNsidError, NsidDefect, ParseError
from nsidctl.domain.nsid import (
    MAX_AUTHORITY_LEN,
    MAX_NSID_LEN,
    MIN_SEGMENTS,
    Nsid,
    NsidSegments,
    find_nsid_defect,
    is_valid_nsid,
)

VALID_NSIDS = [
    "com.example.fooBar",
    "net.users.bob.ping",
    "a-0.b-1.c",
    "a.b.c",
    "cn.8.lex.stuff",
]


def _authority(length: int) -> str:
    """A valid authority exactly *length* bytes long (193-255)."""
    return ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * (length - 192)])


class TestConstants:
    def test_wire_contract(self) -> None:
        assert MAX_NSID_LEN == 317
        assert MAX_AUTHORITY_LEN == 253
        assert MIN_SEGMENTS == 3


class TestValidExamples:
    @pytest.mark.parametrize("text", VALID_NSIDS)
    def test_parses(self, text: str) -> None:
        nsid = Nsid(text)
        assert str(nsid) == text
        assert nsid.text == text

    @pytest.mark.parametrize("text", VALID_NSIDS)
    def test_is_valid(self, text: str) -> None:
        assert is_valid_nsid(text)
        assert find_nsid_defect(text.encode()) is None


class TestInvalidExamples:
    @pytest.mark.parametrize(
        "text,reason",
        [
            ("", NsidDefect.EMPTY),
            ("com", NsidDefect.TOO_FEW_SEGMENTS),
            ("com.example", NsidDefect.TOO_FEW_SEGMENTS),
            ("com.exa🤯ple.thing", NsidDefect.INVALID_DOMAIN_SEGMENT),
            ("1com.example.foo", NsidDefect.INVALID_TLD),
            (".com.example.foo", NsidDefect.INVALID_TLD),
            ("com.-ex.foo", NsidDefect.INVALID_DOMAIN_SEGMENT),
            ("com..foo", NsidDefect.INVALID_DOMAIN_SEGMENT),
            ("com.example.foo-bar", NsidDefect.INVALID_NAME),
            ("com.example.1foo", NsidDefect.INVALID_NAME),
            ("com.example.", NsidDefect.INVALID_NAME),
            ("com.example.foo#bar", NsidDefect.INVALID_NAME),
        ],
    )
    def test_rejected_with_reason(self, text: str, reason: NsidDefect) -> None:
        with pytest.raises(InvalidNsidError) as exc_info:
            Nsid(text)
        assert exc_info.value.reason == reason
        assert exc_info.value.text == text
        assert not is_valid_nsid(text)

    def test_two_segments_rejected_three_accepted(self) -> None:
        assert not is_valid_nsid("com.example")
        assert is_valid_nsid("a.b.c")

    def test_lone_surrogate_rejected(self) -> None:
        with pytest.raises(InvalidNsidError):
            Nsid("com.ex\ud800.foo")

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Nsid("com.example")
        with pytest.raises(ParseError):
            Nsid("com.example")

    def test_error_message_names_input(self) -> None:
        with pytest.raises(InvalidNsidError, match="com.example"):
            Nsid("com.example")


class TestLengthBoundaries:
    def test_longest_reachable_nsid_accepted(self) -> None:
        text = _authority(252) + "." + "e" * 63
        assert len(text) == 316
        assert str(Nsid(text)) == text

    def test_317_bytes_passes_total_length_check(self) -> None:
        """At 317 bytes only the authority bound can reject."""
        text = _authority(253) + "." + "e" * 63
        assert len(text) == MAX_NSID_LEN
        assert find_nsid_defect(text.encode()) == NsidDefect.AUTHORITY_TOO_LONG

    def test_318_bytes_rejected_as_too_long(self) -> None:
        text = _authority(254) + "." + "e" * 63
        assert len(text) == MAX_NSID_LEN + 1
        assert find_nsid_defect(text.encode()) == NsidDefect.TOO_LONG

    def test_authority_252_accepted(self) -> None:
        text = _authority(252) + ".e"
        assert len(Nsid(text).authority) == 252

    def test_authority_253_rejected(self) -> None:
        with pytest.raises(InvalidNsidError) as exc_info:
            Nsid(_authority(253) + ".e")
        assert exc_info.value.reason == NsidDefect.AUTHORITY_TOO_LONG

    def test_too_long_checked_before_anything_else(self) -> None:
        assert find_nsid_defect(b"-" * 400) == NsidDefect.TOO_LONG


class TestFromBytes:
    def test_valid_bytes(self) -> None:
        nsid = Nsid.from_bytes(b"com.example.fooBar")
        assert nsid == Nsid("com.example.fooBar")
        assert isinstance(nsid.text, str)

    def test_bytearray_accepted(self) -> None:
        assert Nsid.from_bytes(bytearray(b"a.b.c")).text == "a.b.c"

    def test_non_ascii_bytes_rejected(self) -> None:
        with pytest.raises(InvalidNsidError) as exc_info:
            Nsid.from_bytes("com.exa🤯ple.thing".encode())
        assert exc_info.value.reason == NsidDefect.INVALID_DOMAIN_SEGMENT

    def test_invalid_utf8_rejected(self) -> None:
        with pytest.raises(InvalidNsidError):
            Nsid.from_bytes(b"com.\xff\xfe.foo")


class TestSegments:
    def test_forward_order(self) -> None:
        assert list(Nsid("net.users.bob.ping").segments()) == ["net", "users", "bob", "ping"]

    def test_reverse_order(self) -> None:
        segments = reversed(Nsid("net.users.bob.ping").segments())
        assert list(segments) == ["ping", "bob", "users", "net"]

    def test_len(self) -> None:
        assert len(Nsid("cn.8.lex.stuff").segments()) == 4

    def test_restartable(self) -> None:
        segments = Nsid("a.b.c").segments()
        assert list(segments) == list(segments)

    def test_is_a_view(self) -> None:
        assert isinstance(Nsid("a.b.c").segments(), NsidSegments)

    @pytest.mark.parametrize("text", VALID_NSIDS)
    def test_forward_and_reverse_agree(self, text: str) -> None:
        segments = Nsid(text).segments()
        forward = list(segments)
        backward = list(reversed(segments))
        assert forward == backward[::-1]
        assert ".".join(forward) == text

    def test_repr(self) -> None:
        assert repr(Nsid("a.b.c").segments()) == "NsidSegments('a.b.c')"


class TestDerivedParts:
    def test_name(self) -> None:
        assert Nsid("com.example.fooBar").name == "fooBar"

    def test_authority(self) -> None:
        assert Nsid("com.example.fooBar").authority == "com.example"

    def test_domain_authority(self) -> None:
        assert Nsid("com.example.fooBar").domain_authority == "example.com"
        assert Nsid("net.users.bob.ping").domain_authority == "bob.users.net"


class TestValueSemantics:
    def test_frozen(self) -> None:
        nsid = Nsid("a.b.c")
        with pytest.raises(dataclasses.FrozenInstanceError):
            nsid.text = "x.y.z"  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert Nsid("a.b.c") == Nsid("a.b.c")
        assert len({Nsid("a.b.c"), Nsid("a.b.c"), Nsid("a.b.d")}) == 2

    def test_ordering(self) -> None:
        assert sorted([Nsid("b.b.c"), Nsid("a.b.c")]) == [Nsid("a.b.c"), Nsid("b.b.c")]

    def test_no_case_folding(self) -> None:
        assert Nsid("com.Example.fooBar") != Nsid("com.example.fooBar")
        assert str(Nsid("com.Example.fooBar")) == "com.Example.fooBar"

    def test_repr(self) -> None:
        assert repr(Nsid("a.b.c")) == "Nsid(text='a.b.c')"


class TestTextMustBeStr:
    @pytest.mark.parametrize("data", [b"com.example.foo", bytearray(b"com.example.foo")])
    def test_bytes_rejected(self, data: bytes) -> None:
        with pytest.raises(TypeError, match="must be str"):
            Nsid(data)  # type: ignore[arg-type]

    def test_from_bytes_is_the_bytes_path(self) -> None:
        nsid = Nsid.from_bytes(b"com.example.foo")
        assert str(nsid) == "com.example.foo"
        assert list(nsid.segments()) == ["com", "example", "foo"]
