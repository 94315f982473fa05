import pytest

from tinykit.strarg import (
    NumberKind,
    is_bin,
    is_hex,
    is_num,
    number_kind,
    parse_float,
    parse_int,
)


@pytest.mark.parametrize(
    "text, kind",
    [
        ("0b101", NumberKind.BINARY),
        ("0x1F", NumberKind.HEX),
        ("123", NumberKind.DECIMAL),
        ("-15", NumberKind.DECIMAL),
        ("000", NumberKind.DECIMAL),
        ("hello", NumberKind.INVALID),
        ("12z", NumberKind.INVALID),
        ("0b102", NumberKind.INVALID),
    ],
)
def test_number_kind(text, kind):
    assert number_kind(text) is kind


def test_character_classes():
    assert is_num("7") and not is_num("a")
    assert is_bin("1") and not is_bin("2")
    assert is_hex("F") and is_hex("c") and is_hex("9")
    assert not is_hex("g")


def test_parse_int_notations():
    assert parse_int("0b101") == 0b101
    assert parse_int("0x1F") == 0x1F
    assert parse_int("31") == 31
    assert parse_int("0") == 0


def test_parse_negative_decimal_is_32_bit_pattern():
    assert parse_int("-15") == 2**32 - 15


@pytest.mark.parametrize("n", [0, 1, 7, 255, 4096, 123456789, 2**32 - 1])
def test_parse_int_round_trips(n):
    assert parse_int(str(n)) == n
    assert parse_int(hex(n)) == n
    assert parse_int(bin(n)) == n


@pytest.mark.parametrize("text", ["hello", "12z", "0xG1", "asds"])
def test_parse_int_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_int(text)


def test_parse_float_values():
    assert parse_float("32.7232") == pytest.approx(32.7232)
    assert parse_float("-32.7232") == pytest.approx(-32.7232)
    assert parse_float("  0.5") == 0.5
    assert parse_float("15") == 15.0
    assert parse_float("0") == 0.0


@pytest.mark.parametrize("text", ["abc", "1e5", "5.", "-.", "1 2"])
def test_parse_float_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_float(text)