"""
Tests for trailer building and parsing.
"""

import hashlib

import pytest

from zpaper.lib.paperbase import (
    TrailerError,
    build_trailer,
    is_trailer_line,
    parse_trailer,
    split_trailer,
)


def _numbered(lines):
    return list(enumerate(lines, start=1))


def test_build_trailer_contents():
    payload = b"hello world"
    lines = build_trailer(payload)
    assert lines[0] == "# length: 11"
    assert lines[1] == f"# sha256: {hashlib.sha256(payload).hexdigest()}"
    assert lines[2].startswith("# alphabet: ybndrfg8ejkmcpqxot1uwisza345h769")
    assert "0x1c4047" in lines[2]
    assert all(is_trailer_line(line) for line in lines)


def test_build_trailer_empty_payload():
    lines = build_trailer(b"")
    assert lines[0] == "# length: 0"
    assert lines[1] == "# sha256: " + hashlib.sha256(b"").hexdigest()


def test_hints_become_trailer_lines():
    lines = build_trailer(b"x", hints=["backup of key 1", "two\nlines"])
    assert lines[3:] == ["# hint: backup of key 1", "# hint: two", "# hint: lines"]


def test_parse_round_trip():
    payload = b"\x00" * 77
    info = parse_trailer(_numbered(build_trailer(payload, hints=["note"])))
    assert info.length == 77
    assert info.sha256 == hashlib.sha256(payload).hexdigest()
    assert info.hints == ["note"]


def test_parse_ignores_unknown_entries():
    info = parse_trailer(
        _numbered(
            ["# length: 5", "# printed: 2024-01-01", "#", "# some words", "# hint: ok"]
        )
    )
    assert info.length == 5
    assert info.sha256 is None
    assert info.hints == ["ok"]


@pytest.mark.parametrize(
    "hint", ["length: 99 sheets", "sha256: see envelope", "alphabet: the usual", "hint: nested"]
)
def test_hint_text_is_never_metadata(hint):
    payload = b"abc"
    info = parse_trailer(_numbered(build_trailer(payload, hints=[hint])))
    assert info.length == 3
    assert info.sha256 == hashlib.sha256(payload).hexdigest()
    assert info.hints == [hint]


def test_non_ascii_hint_rejected():
    with pytest.raises(ValueError):
        build_trailer(b"x", hints=["caf\u00e9"])


def test_parse_is_case_insensitive_on_keys():
    info = parse_trailer(_numbered(["# Length: 9", "# SHA256: ABCDEF"]))
    assert info.length == 9
    assert info.sha256 == "abcdef"


def test_missing_length_is_none():
    assert parse_trailer(_numbered(["# sha256: 00"])).length is None


@pytest.mark.parametrize("value", ["ten", "-1", "", "1.5"])
def test_invalid_length(value):
    with pytest.raises(TrailerError) as exc_info:
        parse_trailer(_numbered(["# hint", f"# length: {value}"]))
    assert exc_info.value.line_number == 2


def test_conflicting_lengths():
    with pytest.raises(TrailerError):
        parse_trailer(_numbered(["# length: 3", "# length: 4"]))


def test_repeated_identical_length_is_fine():
    assert parse_trailer(_numbered(["# length: 3", "# length: 3"])).length == 3


def test_split_trailer():
    numbered = _numbered(["abcd", "# length: 1", "efgh"])
    data, trailer = split_trailer(numbered)
    assert data == [(1, "abcd"), (3, "efgh")]
    assert trailer == [(2, "# length: 1")]
