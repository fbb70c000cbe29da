"""
Tests for the z-base-32 symbol mapping.
"""

import string

import pytest

from zpaper.lib.paperbase import (
    ZBASE32_ALPHABET,
    EXCLUDED_SYMBOLS,
    InvalidSymbol,
    symbol_of,
    value_of,
    is_symbol,
)


def test_alphabet_has_32_distinct_symbols():
    assert len(ZBASE32_ALPHABET) == 32
    assert len(set(ZBASE32_ALPHABET)) == 32


def test_alphabet_is_lowercase_and_digits():
    allowed = set(string.ascii_lowercase + string.digits)
    assert set(ZBASE32_ALPHABET) <= allowed


def test_confusable_characters_excluded():
    for ch in "02lv":
        assert ch in EXCLUDED_SYMBOLS
        assert ch not in ZBASE32_ALPHABET
        assert not is_symbol(ch)


def test_mapping_is_mutually_inverse():
    for value in range(32):
        assert value_of(symbol_of(value)) == value
    for ch in ZBASE32_ALPHABET:
        assert symbol_of(value_of(ch)) == ch


def test_known_positions():
    assert symbol_of(0) == "y"
    assert symbol_of(31) == "9"
    assert value_of("e") == 8


@pytest.mark.parametrize("ch", ["0", "2", "l", "v", "Y", "A", " ", "#", "=", "\n", ""])
def test_value_of_rejects_foreign_characters(ch):
    with pytest.raises(InvalidSymbol) as exc_info:
        value_of(ch)
    assert exc_info.value.symbol == ch


def test_invalid_symbol_is_a_value_error():
    with pytest.raises(ValueError):
        value_of("0")


@pytest.mark.parametrize("value", [-1, 32, 255])
def test_symbol_of_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        symbol_of(value)
