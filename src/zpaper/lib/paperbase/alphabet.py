"""
z-base-32 alphabet used on paper.

The 32 symbols are digits and lowercase letters with the visually
confusable 0, 2, l and v left out.
"""

from typing import Dict, List

from .errors import InvalidSymbol

ZBASE32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
EXCLUDED_SYMBOLS = "02lv"

_DECODE_TABLE: Dict[str, int] = {ch: i for i, ch in enumerate(ZBASE32_ALPHABET)}


def symbol_of(value: int) -> str:
    """Map a 5-bit value (0..31) to its symbol."""
    if not 0 <= value < len(ZBASE32_ALPHABET):
        raise ValueError(f"value out of 5-bit range: {value}")
    return ZBASE32_ALPHABET[value]


def value_of(symbol: str) -> int:
    """
    Map a symbol back to its 5-bit value.

    Raises:
        InvalidSymbol: If the character is not one of the 32 symbols
    """
    try:
        return _DECODE_TABLE[symbol]
    except KeyError:
        raise InvalidSymbol(symbol) from None


def is_symbol(ch: str) -> bool:
    return ch in _DECODE_TABLE


def invalid_positions(text: str) -> List[int]:
    """Return the 0-based indexes of characters outside the alphabet."""
    return [i for i, ch in enumerate(text) if ch not in _DECODE_TABLE]
