"""
Trailer lines: advisory metadata printed after the data lines.

Each trailer line starts with the marker character and is ignored by the
checksum chain. The ``length`` entry is what a decoder needs to drop
padding from the last chunk; the ``sha256`` entry is for the operator to
check by eye and is never used to accept or reject a decode.
"""

import hashlib
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from zpaper import config

from .alphabet import ZBASE32_ALPHABET
from .checksum import CRC20_POLY, CRC20_CHECK
from .errors import TrailerError

HINT_KEY = "hint"


@dataclass
class TrailerInfo:
    """Metadata recovered from trailer lines."""

    length: Optional[int] = None
    sha256: Optional[str] = None
    hints: List[str] = field(default_factory=list)


def payload_digest(payload: bytes) -> str:
    return hashlib.sha256(payload).hexdigest()


def is_trailer_line(line: str) -> bool:
    return line.startswith(config.TRAILER_MARKER)


def build_trailer(payload: bytes, hints: Sequence[str] = ()) -> List[str]:
    """
    Build the trailer lines for a payload.

    Args:
        payload: The original, unencoded bytes
        hints: Free-text ASCII notes for the reader, written as ``hint``
            entries so their content is never read as metadata

    Returns:
        Marker-prefixed lines without newlines

    Raises:
        ValueError: If a hint is not ASCII text
    """
    for hint in hints:
        if not hint.isascii():
            raise ValueError(f"Hints must be ASCII text: {hint!r}")

    marker = config.TRAILER_MARKER
    lines = [
        f"{marker} length: {len(payload)}",
        f"{marker} sha256: {payload_digest(payload)}",
        f"{marker} alphabet: {ZBASE32_ALPHABET}, "
        f"CRC-20 poly: 0x{CRC20_POLY:x}, check: 0x{CRC20_CHECK:x}",
    ]
    for hint in hints:
        for hint_line in hint.splitlines() or [""]:
            lines.append(f"{marker} {HINT_KEY}: {hint_line}".rstrip())
    return lines


def split_trailer(
    lines: Iterable[Tuple[int, str]],
) -> Tuple[List[Tuple[int, str]], List[Tuple[int, str]]]:
    """Separate numbered lines into (data lines, trailer lines)."""
    data, trailer = [], []
    for number, line in lines:
        (trailer if is_trailer_line(line) else data).append((number, line))
    return data, trailer


def parse_trailer(lines: Iterable[Tuple[int, str]]) -> TrailerInfo:
    """
    Read metadata out of numbered trailer lines.

    Recognised entries are ``length``, ``sha256`` and ``hint``; anything
    else is ignored. Unknown content never fails the parse.

    Raises:
        TrailerError: If a length entry is not a non-negative integer, or
            two length entries disagree
    """
    info = TrailerInfo()
    for number, line in lines:
        body = line[len(config.TRAILER_MARKER) :].strip()
        key, sep, value = body.partition(":")
        key = key.strip().lower()
        value = value.strip()

        if sep and key == "length":
            try:
                length = int(value, 10)
            except ValueError:
                raise TrailerError(f"invalid length {value!r}", number) from None
            if length < 0:
                raise TrailerError(f"invalid length {value!r}", number)
            if info.length is not None and info.length != length:
                raise TrailerError(
                    f"conflicting lengths {info.length} and {length}", number
                )
            info.length = length
        elif sep and key == "sha256":
            info.sha256 = value.lower()
        elif sep and key == HINT_KEY:
            info.hints.append(value)
    return info
