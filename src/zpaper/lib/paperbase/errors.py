"""
Exception taxonomy for the paper codec.

Every decode failure names the first offending line so the operator can
compare that printed line against the scan, correct it by hand and retry.
"""

from typing import Optional


class PaperCodecError(Exception):
    """Base exception for codec errors"""

    pass


class InvalidSymbol(PaperCodecError, ValueError):
    """A character outside the 32-symbol alphabet"""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"invalid symbol {symbol!r}")


class MalformedLine(PaperCodecError):
    """Wrong line length, bad character set or a missing checksum field"""

    def __init__(self, line_number: int, reason: str, column: Optional[int] = None):
        self.line_number = line_number
        self.reason = reason
        self.column = column
        where = f"line {line_number}"
        if column is not None:
            where += f", column {column}"
        super().__init__(f"malformed line ({where}): {reason}")


class ChecksumMismatch(PaperCodecError):
    """The computed checksum differs from the one written on the line"""

    def __init__(self, line_number: int, claimed: int, computed: int):
        self.line_number = line_number
        self.claimed = claimed
        self.computed = computed
        super().__init__(
            f"checksum mismatch at line {line_number} "
            f"(line claims 0x{claimed:05x}, computed 0x{computed:05x})"
        )


class LengthMismatch(PaperCodecError):
    """Fewer bytes were reconstructed than the original length calls for"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"length mismatch: expected {expected} bytes, reconstructed {actual}"
        )


class TrailerError(PaperCodecError):
    """Trailer metadata is missing or unreadable"""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class DigestMismatch(PaperCodecError):
    """
    Recomputed payload digest differs from the trailer's.

    Informational only: it is collected as a warning on the decode result
    and never raised, since the checksum chain is what vouches for the bytes.
    """

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"sha256 mismatch: trailer says {expected}, payload is {actual}")
