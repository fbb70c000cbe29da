"""
Cumulative CRC-20 over the lines of an encoding.

Parameters:
- Polynomial 0x1c4047 (Koopman notation), i.e. 0xc4047 once the implicit
  x^20 term is dropped. Hamming distance 6 up to 494 data bits, which
  covers an 80-symbol line.
- Initial register 0, no final xor.
- Bits are taken most significant first within each byte, no reflection.
- Check value over b"123456789" is 0xa5448.

The register is never reset between lines: the checksum printed on line k
covers lines 1..k, so a mistake on an earlier line also breaks every later
checksum.

Rendered on paper as 4 symbols, least significant 5-bit group first.
"""

from .alphabet import symbol_of, value_of

CRC20_POLY = 0x1C4047
CRC20_MASK = 0xFFFFF
CRC20_INIT = 0
CRC20_CHECK = 0xA5448

_TOP_BIT = 0x80000
_POLY_LOW = CRC20_POLY & CRC20_MASK


def crc20_update(data: bytes, crc: int = CRC20_INIT) -> int:
    """Fold ``data`` into a 20-bit CRC register and return the new register."""
    for byte in data:
        for shift in range(7, -1, -1):
            # The bit about to be shifted out, combined with the next data bit
            bit = bool(crc & _TOP_BIT) ^ bool((byte >> shift) & 1)
            crc = (crc << 1) & CRC20_MASK
            if bit:
                crc ^= _POLY_LOW
    return crc


class Crc20:
    """
    Running CRC-20 accumulator for one encode or decode operation.

    Create one per operation; instances are never shared between calls.
    """

    def __init__(self, value: int = CRC20_INIT):
        self.value = value & CRC20_MASK

    def update(self, data: bytes) -> "Crc20":
        self.value = crc20_update(data, self.value)
        return self

    def finalize(self) -> int:
        return self.value

    def copy(self) -> "Crc20":
        return Crc20(self.value)

    def __repr__(self) -> str:
        return f"Crc20(0x{self.value:05x})"


def render_checksum(value: int, width: int = 4) -> str:
    """Render a CRC value as ``width`` symbols, least significant group first."""
    symbols = []
    for _ in range(width):
        symbols.append(symbol_of(value & 0x1F))
        value >>= 5
    return "".join(symbols)


def parse_checksum(text: str) -> int:
    """Inverse of render_checksum. Raises InvalidSymbol on foreign characters."""
    value = 0
    for ch in reversed(text):
        value = (value << 5) | value_of(ch)
    return value
