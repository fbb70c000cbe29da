"""
Line framing: payload chunks to fixed-width symbol lines and back.

Every 5 payload bytes are read as a 40-bit little-endian integer (first
byte least significant) and written as eight 5-bit symbols, least
significant group first. A trailing group of n < 5 bytes is written as
ceil(8n / 5) symbols with the unused high bits zero; no pad characters are
emitted, so the final line of an encoding may be shorter than the others.

A line is the rendered chunk followed by the 4-symbol cumulative checksum
of every data portion up to and including this one.
"""

from typing import Dict, Iterator

from zpaper import config

from .alphabet import symbol_of, value_of, invalid_positions
from .checksum import Crc20, render_checksum, parse_checksum
from .errors import MalformedLine, ChecksumMismatch, InvalidSymbol

# Trailing group lengths: raw bytes -> symbols, and the inverse
_SYMBOLS_FOR_BYTES: Dict[int, int] = {1: 2, 2: 4, 3: 5, 4: 7, 5: 8}
_BYTES_FOR_SYMBOLS: Dict[int, int] = {v: k for k, v in _SYMBOLS_FOR_BYTES.items()}


def iter_chunks(payload: bytes, size: int = config.CHUNK_SIZE) -> Iterator[bytes]:
    """Yield successive ``size``-byte slices of payload; the last may be short."""
    for start in range(0, len(payload), size):
        yield payload[start : start + size]


def render_symbols(data: bytes) -> str:
    """Pack raw bytes into alphabet symbols."""
    group_size = config.RAW_BYTES_PER_GROUP
    out = []
    for start in range(0, len(data), group_size):
        group = data[start : start + group_size]
        val = int.from_bytes(group, "little")
        for _ in range(_SYMBOLS_FOR_BYTES[len(group)]):
            out.append(symbol_of(val & 0x1F))
            val >>= 5
    return "".join(out)


def parse_symbols(text: str) -> bytes:
    """
    Unpack alphabet symbols into raw bytes.

    Args:
        text: Symbols whose length leaves a remainder of 0, 2, 4, 5 or 7
            modulo 8

    Returns:
        The packed bytes; bits beyond the last whole byte are dropped

    Raises:
        InvalidSymbol: On a character outside the alphabet
        ValueError: If the length cannot come from render_symbols
    """
    group_size = config.SYMBOLS_PER_GROUP
    out = bytearray()
    for start in range(0, len(text), group_size):
        group = text[start : start + group_size]
        raw_count = _BYTES_FOR_SYMBOLS.get(len(group))
        if raw_count is None:
            raise ValueError(f"invalid symbol group length: {len(group)}")
        val = 0
        for ch in reversed(group):
            val = (val << 5) | value_of(ch)
        out += (val & ((1 << (8 * raw_count)) - 1)).to_bytes(raw_count, "little")
    return bytes(out)


def encode_chunk(chunk: bytes, acc: Crc20) -> str:
    """Render one chunk as a complete line, advancing the accumulator."""
    data = render_symbols(chunk)
    acc.update(data.encode("ascii"))
    return data + render_checksum(acc.finalize(), config.CHECKSUM_SYMBOLS)


def check_line_shape(line: str, line_number: int, final: bool) -> None:
    """
    Validate length and character set before any checksum work.

    Raises:
        MalformedLine: Naming the line and, for bad characters, the 1-based column
    """
    width = config.LINE_WIDTH
    crc_len = config.CHECKSUM_SYMBOLS
    min_width = _SYMBOLS_FOR_BYTES[1] + crc_len

    if len(line) > width:
        raise MalformedLine(line_number, f"line is {len(line)} characters, maximum {width}")
    if not final and len(line) != width:
        raise MalformedLine(
            line_number, f"line is {len(line)} characters, expected {width}"
        )
    if len(line) < min_width:
        raise MalformedLine(line_number, "line too short to hold data and checksum")

    remainder = (len(line) - crc_len) % config.SYMBOLS_PER_GROUP
    if remainder and remainder not in _BYTES_FOR_SYMBOLS:
        raise MalformedLine(
            line_number, f"invalid line length ({len(line)} characters)"
        )

    bad = invalid_positions(line)
    if bad:
        column = bad[0]
        try:
            value_of(line[column])
        except InvalidSymbol as e:
            raise MalformedLine(line_number, str(e), column + 1) from e


def decode_line(line: str, acc: Crc20, line_number: int, final: bool = False) -> bytes:
    """
    Validate one line against the running checksum and unpack its bytes.

    Args:
        line: The line without its newline
        acc: The operation's accumulator, advanced by this call
        line_number: Reported in errors
        final: Whether this is the last data line (which may be short)

    Returns:
        Up to CHUNK_SIZE reconstructed bytes

    Raises:
        MalformedLine: Bad length or characters
        ChecksumMismatch: The line, or one before it, was mis-transcribed
    """
    check_line_shape(line, line_number, final)

    split = len(line) - config.CHECKSUM_SYMBOLS
    data, claimed_text = line[:split], line[split:]

    claimed = parse_checksum(claimed_text)
    computed = acc.update(data.encode("ascii")).finalize()
    if computed != claimed:
        raise ChecksumMismatch(line_number, claimed, computed)

    return parse_symbols(data)


class LineDecoder:
    """
    Decodes data lines one at a time against a single checksum chain.

    Lets callers stop between lines; the accumulator lives and dies with
    the instance.
    """

    def __init__(self):
        self._acc = Crc20()
        self.lines_decoded = 0

    @property
    def checksum(self) -> int:
        return self._acc.finalize()

    def feed(self, line: str, line_number: int, final: bool = False) -> bytes:
        chunk = decode_line(line, self._acc, line_number, final)
        self.lines_decoded += 1
        return chunk
