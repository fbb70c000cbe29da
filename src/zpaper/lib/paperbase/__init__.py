"""
PAPERBASE - paper-transcribable codec for small binary payloads

Turns bytes into 84-column lines of z-base-32 text that survive printing,
OCR and hand correction, and turns them back. Each line ends in a
cumulative CRC-20, so a single wrong character is reported at the first
line it affects.

Example Usage:
    from zpaper.lib.paperbase import encode, decode

    text = encode(b"secret key material")
    assert decode(text) == b"secret key material"

    # Trailer stripped by the caller: supply the length explicitly
    data_only = encode(b"secret key material", trailer=False)
    decode(data_only, length_hint=19)
"""

from .alphabet import (
    ZBASE32_ALPHABET,
    EXCLUDED_SYMBOLS,
    symbol_of,
    value_of,
    is_symbol,
)

from .checksum import (
    Crc20,
    crc20_update,
    render_checksum,
    parse_checksum,
    CRC20_POLY,
    CRC20_CHECK,
)

from .framing import (
    LineDecoder,
    encode_chunk,
    decode_line,
    render_symbols,
    parse_symbols,
    iter_chunks,
)

from .trailer import (
    TrailerInfo,
    build_trailer,
    parse_trailer,
    split_trailer,
    is_trailer_line,
    payload_digest,
)

from .codec import (
    DecodeResult,
    encode,
    encode_lines,
    decode,
    decode_text,
)

from .errors import (
    PaperCodecError,
    InvalidSymbol,
    MalformedLine,
    ChecksumMismatch,
    LengthMismatch,
    TrailerError,
    DigestMismatch,
)

__all__ = [
    # Codec driver
    "encode",
    "encode_lines",
    "decode",
    "decode_text",
    "DecodeResult",
    # Alphabet
    "ZBASE32_ALPHABET",
    "EXCLUDED_SYMBOLS",
    "symbol_of",
    "value_of",
    "is_symbol",
    # Checksum
    "Crc20",
    "crc20_update",
    "render_checksum",
    "parse_checksum",
    "CRC20_POLY",
    "CRC20_CHECK",
    # Framing
    "LineDecoder",
    "encode_chunk",
    "decode_line",
    "render_symbols",
    "parse_symbols",
    "iter_chunks",
    # Trailer
    "TrailerInfo",
    "build_trailer",
    "parse_trailer",
    "split_trailer",
    "is_trailer_line",
    "payload_digest",
    # Errors
    "PaperCodecError",
    "InvalidSymbol",
    "MalformedLine",
    "ChecksumMismatch",
    "LengthMismatch",
    "TrailerError",
    "DigestMismatch",
]
