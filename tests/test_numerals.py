import pytest

from hscpy.lexer import (
    is_base10,
    is_base36,
    is_lowercase,
    is_newline,
    is_operator,
    is_uppercase,
    is_whitespace,
)
from hscpy.numerals import (
    PRESSURE_SCALE,
    check_width,
    decode_base10_float,
    decode_base10_int,
    decode_base36,
    encode_base36,
    is_base10_numeral,
)


def test_character_classifiers() -> None:
    assert all(is_whitespace(ch) for ch in " \t\n\r")
    assert not is_whitespace("a")
    assert is_newline("\n") and is_newline("\r")
    assert not is_newline(" ")
    assert is_lowercase("q") and not is_lowercase("Q")
    assert is_uppercase("Q") and not is_uppercase("q")
    assert is_base10("7") and not is_base10("a")
    assert all(is_base36(ch) for ch in "09azAZ")
    assert not is_base36("_")
    assert not is_base36("'")
    assert all(is_operator(ch) for ch in ":[],;")
    assert not is_operator("(")
    assert not is_operator("")


def test_base36_decodes_case_insensitively() -> None:
    assert decode_base36("5f", 2, signed=False) == 195
    assert decode_base36("5F", 2, signed=False) == 195
    assert decode_base36("000", 3) == 0
    assert decode_base36("001", 3) == 1
    assert decode_base36("100", 3) == 1296


def test_base36_signed_wraparound_at_half_range() -> None:
    assert decode_base36("hzz", 3) == 23327
    assert decode_base36("i00", 3) == -23328
    assert decode_base36("zzz", 3) == -1
    assert decode_base36("hz", 2) == 647
    assert decode_base36("i0", 2) == -648


def test_base36_unsigned_does_not_wrap() -> None:
    assert decode_base36("zz", 2, signed=False) == 36**2 - 1 == PRESSURE_SCALE
    assert decode_base36("i0", 2, signed=False) == 648


def test_base36_is_deterministic() -> None:
    assert decode_base36("a1b", 3) == decode_base36("a1b", 3)


def test_base36_rejects_wrong_width_and_digits() -> None:
    with pytest.raises(ValueError):
        decode_base36("00", 3)
    with pytest.raises(ValueError):
        decode_base36("0-0", 3)


def test_width_must_fit_target_bits() -> None:
    check_width(3, 16)
    with pytest.raises(ValueError):
        check_width(4, 16)
    with pytest.raises(ValueError):
        decode_base36("0000", 4)
    assert decode_base36("0010", 4, bits=32) == 36


def test_encode_base36_round_trips_coordinates() -> None:
    for value in (-23328, -1295, -1, 0, 1, 1234, 23327):
        assert decode_base36(encode_base36(value, 3), 3) == value

    assert encode_base36(-1, 3) == "zzz"
    assert encode_base36(195, 2, signed=False) == "5f"
    with pytest.raises(ValueError):
        encode_base36(23328, 3)
    with pytest.raises(ValueError):
        encode_base36(-1, 2, signed=False)


def test_pressure_round_trips_within_quantization() -> None:
    for pressure in (0.0, 0.25, 0.4, 0.999, 1.0):
        digits = encode_base36(round(pressure * PRESSURE_SCALE), 2, signed=False)
        decoded = decode_base36(digits, 2, signed=False) / PRESSURE_SCALE
        assert abs(decoded - pressure) <= 0.5 / PRESSURE_SCALE


def test_base10_integers() -> None:
    assert decode_base10_int("42") == 42
    assert decode_base10_int("+42") == 42
    assert decode_base10_int("-17") == -17
    assert decode_base10_int("007") == 7
    with pytest.raises(ValueError):
        decode_base10_int("-")


def test_base10_floats() -> None:
    assert decode_base10_float("1") == 1.0
    assert decode_base10_float("-3") == -3.0
    assert decode_base10_float("-0.5") == pytest.approx(-0.5)
    assert decode_base10_float("+2.25") == pytest.approx(2.25)
    assert decode_base10_float("3.") == 3.0
    assert decode_base10_float(".5") == pytest.approx(0.5)
    assert decode_base10_float("-.125") == pytest.approx(-0.125)
    assert decode_base10_float("10.05") == pytest.approx(10.05)


def test_base10_numeral_validation() -> None:
    for text in ("1", "-1.5", "+0", ".5", "3."):
        assert is_base10_numeral(text), text
    for text in ("", "+", ".", "1e5", "1.2.3", "abc", "--1"):
        assert not is_base10_numeral(text), text
