"""Bit and value helpers on unsigned integers."""

from __future__ import annotations

from collections.abc import Sequence

_WORD_BITS = 32
_WORD_MASK = 0xFFFFFFFF
_SIZE_BITS = 64


def fill_bits(num: int) -> int:
    """Return a number whose lowest ``num`` bits are set."""
    return 0 if num == 0 else (1 << num) - 1


def fill_range(low_bit: int, high_bit: int) -> int:
    """Return a number with bits ``low_bit`` to ``high_bit`` (inclusive) set."""
    return fill_bits(high_bit + 1 - low_bit) << low_bit


def byte_at(num: int, index: int) -> int:
    """Return byte ``index`` of ``num``, counting from the least significant."""
    return (num >> (index * 8)) & 0xFF


def bit_at(num: int, index: int) -> bool:
    """Return whether bit ``index`` of ``num`` is set."""
    return (num & (1 << index)) != 0


def bits_at(num: int, low_bit: int, high_bit: int) -> int:
    """Return the value of the closed bit range ``[high_bit:low_bit]``."""
    return (num >> low_bit) & fill_bits(high_bit + 1 - low_bit)


def is_pow_of_2(value: int) -> bool:
    """Return whether ``value`` has at most one bit set (zero counts)."""
    return (value & (value - 1)) == 0


def _check_size(num: int) -> None:
    if not 0 <= num < 1 << _SIZE_BITS:
        raise ValueError(f"{num} does not fit in {_SIZE_BITS} bits")


def ff1(num: int) -> int:
    """Return the 1-based position of the highest set bit, 0 for zero."""
    _check_size(num)
    return num.bit_length()


def reverse_bits(num: int, width: int) -> int:
    """Reverse the order of the lowest ``width`` bits of ``num``.

    Bits above ``width`` are kept as they are.
    """
    _check_size(num)
    if not 0 <= width <= _SIZE_BITS:
        raise ValueError(f"width must be between 0 and {_SIZE_BITS}")
    if num == 0:
        return 0

    for low in range(width // 2):
        high = width - 1 - low
        low_bit = (num >> low) & 1
        high_bit = (num >> high) & 1
        num &= ~((1 << low) | (1 << high))
        num |= (low_bit << high) | (high_bit << low)

    return num


def value_at(words: Sequence[int], low_bit: int, high_bit: int) -> int:
    """Read the closed bit range ``[high_bit:low_bit]`` of a 32-bit word array.

    The range may span two neighbouring words but not more than 32 bits.
    """
    if high_bit < low_bit or high_bit - low_bit > _WORD_BITS:
        raise ValueError(f"invalid bit range [{high_bit}:{low_bit}]")

    index = low_bit // _WORD_BITS
    boundary = (index + 1) * _WORD_BITS - 1
    low, high = low_bit % _WORD_BITS, high_bit % _WORD_BITS

    if high_bit > boundary:
        value = bits_at(words[index + 1], 0, high) << (_WORD_BITS - low)
        value |= bits_at(words[index], low, _WORD_BITS)
    else:
        value = bits_at(words[index], low, high)

    return value & _WORD_MASK