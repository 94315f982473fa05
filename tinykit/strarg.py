"""Recognition and parsing of numeric command-line arguments."""

from __future__ import annotations

from enum import IntEnum

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class NumberKind(IntEnum):
    """Notation of an integer literal."""

    INVALID = 0
    BINARY = 1
    DECIMAL = 2
    HEX = 3


def is_num(ch: str) -> bool:
    """Return True for a decimal digit."""
    return "0" <= ch <= "9"


def is_bin(ch: str) -> bool:
    """Return True for a binary digit."""
    return "0" <= ch <= "1"


def is_hex(ch: str) -> bool:
    """Return True for a hexadecimal digit of either case."""
    return is_num(ch) or "a" <= ch <= "f" or "A" <= ch <= "F"


def number_kind(text: str) -> NumberKind:
    """Classify ``text`` as a binary, decimal or hexadecimal integer."""
    body = text.lstrip("0-")
    if not body:
        return NumberKind.DECIMAL

    head, rest = body[0], body[1:]
    if head in "xX":
        kind, check = NumberKind.HEX, is_hex
    elif head in "bB":
        kind, check = NumberKind.BINARY, is_bin
    elif is_num(head):
        kind, check = NumberKind.DECIMAL, is_num
    else:
        return NumberKind.INVALID

    return kind if all(check(ch) for ch in rest) else NumberKind.INVALID


def parse_int(text: str) -> int:
    """Parse an integer in binary, decimal or hex notation.

    The result is the 32-bit two's-complement pattern of the number, so
    negative decimals come back as large unsigned values.
    Raises ValueError when ``text`` is not a valid number.
    """
    kind = number_kind(text)
    value = 0

    if kind is NumberKind.INVALID:
        raise ValueError(f"invalid number: {text!r}")

    if kind is NumberKind.BINARY:
        for ch in text[2:]:
            value = ((value << 1) | (ord(ch) - ord("0"))) & _MASK32
    elif kind is NumberKind.DECIMAL:
        negative = text.startswith("-")
        digits = text[1:] if negative else text
        for ch in digits:
            value = (value * 10 + ord(ch) - ord("0")) & _MASK32
        if negative:
            value = -value & _MASK32
    else:
        for ch in text[2:]:
            if not is_hex(ch):
                raise ValueError(f"invalid hex number: {text!r}")
            value = ((value << 4) + int(ch, 16)) & _MASK32

    return value


def parse_float(text: str) -> float:
    """Parse a plain decimal fraction such as ``-32.75``.

    Leading spaces and zeros are skipped; only digits and dots may follow
    the optional sign, and every dot must be followed by a digit.
    Raises ValueError otherwise.
    """
    body = text.lstrip(" ").lstrip("0")
    sign = 1
    if body.startswith("-"):
        sign = -1
        body = body[1:]

    if any(not (is_num(ch) or ch == ".") for ch in body):
        raise ValueError(f"invalid number: {text!r}")

    value = 0
    divisor = 1
    scale = 1
    chars = iter(body)
    for ch in chars:
        if ch == ".":
            scale = 10
            ch = next(chars, "")
            if not is_num(ch):
                raise ValueError(f"invalid number: {text!r}")
        divisor *= scale
        value = (value * 10 + int(ch)) & _MASK64

    return value / (sign * divisor)