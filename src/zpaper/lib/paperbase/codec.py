"""
Whole-payload encode and decode.

Decoding needs the original payload length to drop padding from the last
line. It comes from one of two places:

- trailer mode (no ``length_hint``): read from the ``# length:`` trailer
  line, and every marker line is dropped before data processing;
- explicit mode (``length_hint`` given): the caller supplies it and must
  have removed trailer lines already, see ``split_trailer``.

Decoding stops at the first bad line. Because the checksum is cumulative,
carrying on would only report the same damage again on every later line.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from zpaper.lib.log import get_logger, log

from .errors import DigestMismatch, LengthMismatch, MalformedLine, TrailerError
from .checksum import Crc20
from .framing import LineDecoder, encode_chunk, iter_chunks
from .trailer import (
    build_trailer,
    is_trailer_line,
    parse_trailer,
    payload_digest,
    split_trailer,
)

_logger = get_logger("codec")


@dataclass
class DecodeResult:
    """Outcome of a successful decode."""

    payload: bytes
    digest: str
    lines: int
    expected_digest: Optional[str] = None
    hints: List[str] = field(default_factory=list)
    warnings: List[DigestMismatch] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.payload)


def encode_lines(payload: bytes) -> List[str]:
    """Encode a payload to its data lines, without trailer."""
    acc = Crc20()
    return [encode_chunk(chunk, acc) for chunk in iter_chunks(payload)]


def encode(payload: bytes, hints: Sequence[str] = (), trailer: bool = True) -> str:
    """
    Encode a payload to printable text.

    Args:
        payload: Bytes to encode; may be empty
        hints: Optional free-text trailer lines
        trailer: Append the length/digest trailer

    Returns:
        Newline-terminated text: ceil(len / 50) data lines then the trailer
    """
    payload = bytes(payload)
    lines = encode_lines(payload)
    data_lines = len(lines)
    if trailer:
        lines.extend(build_trailer(payload, hints))

    log(_logger, "debug", "encoded payload", length=len(payload), lines=data_lines)
    return "".join(line + "\n" for line in lines)


def _numbered_lines(text: str) -> List[Tuple[int, str]]:
    numbered = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if line:
            numbered.append((number, line))
    return numbered


def decode_text(text: str, length_hint: Optional[int] = None) -> DecodeResult:
    """
    Decode printable text back into the original payload.

    Args:
        text: Encoded text, one line per data line
        length_hint: Original payload length. When given, ``text`` must not
            contain trailer lines. When omitted it is read from the trailer.

    Returns:
        DecodeResult with the payload and any non-fatal digest warning

    Raises:
        MalformedLine: A line has the wrong length or a foreign character
        ChecksumMismatch: First line whose cumulative checksum disagrees
        LengthMismatch: Fewer bytes reconstructed than the length calls for
        TrailerError: Trailer mode without a usable length entry
    """
    numbered = _numbered_lines(text)

    expected_digest = None
    hints: List[str] = []
    if length_hint is None:
        data_lines, trailer_lines = split_trailer(numbered)
        info = parse_trailer(trailer_lines)
        if info.length is None:
            raise TrailerError("no length given and none found in trailer")
        length = info.length
        expected_digest = info.sha256
        hints = info.hints
    else:
        if length_hint < 0:
            raise ValueError(f"length must be non-negative: {length_hint}")
        data_lines = numbered
        length = length_hint
        # Marker lines are rejected before any line shape checks
        for number, line in data_lines:
            if is_trailer_line(line):
                raise MalformedLine(
                    number, "trailer line present with an explicit length", 1
                )

    decoder = LineDecoder()
    out = bytearray()
    last = len(data_lines) - 1
    for index, (number, line) in enumerate(data_lines):
        out += decoder.feed(line, number, final=index == last)

    if len(out) < length:
        raise LengthMismatch(length, len(out))
    if len(out) > length:
        log(_logger, "debug", "trimming padding", decoded=len(out), length=length)
        del out[length:]

    payload = bytes(out)
    result = DecodeResult(
        payload=payload,
        digest=payload_digest(payload),
        lines=decoder.lines_decoded,
        expected_digest=expected_digest,
        hints=hints,
    )

    if expected_digest is not None and expected_digest != result.digest:
        warning = DigestMismatch(expected_digest, result.digest)
        log(_logger, "warning", str(warning))
        result.warnings.append(warning)

    log(_logger, "debug", "decoded payload", length=len(payload), lines=result.lines)
    return result


def decode(text: str, length_hint: Optional[int] = None) -> bytes:
    """Decode printable text, returning only the payload bytes."""
    return decode_text(text, length_hint).payload
