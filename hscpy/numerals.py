"""Positional numeral decoding for sketch digit groups and Affine coefficients."""

from __future__ import annotations

import math
import re
from typing import Final

from hscpy.lexer.chars import is_base10, is_base36, is_lowercase, is_uppercase

COORDINATE_WIDTH: Final[int] = 3
PRESSURE_WIDTH: Final[int] = 2
DIAMETER_WIDTH: Final[int] = 2
RAW_COORDINATE_WIDTH: Final[int] = 2

PRESSURE_SCALE: Final[int] = 36**PRESSURE_WIDTH - 1
"""Largest 2-digit base-36 value; pressure digits are divided by this."""

_BASE36_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"
_BASE10_NUMERAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)$")


def base36_digit_value(ch: str) -> int:
    if is_base10(ch):
        return ord(ch) - ord("0")
    if is_lowercase(ch):
        return ord(ch) - ord("a") + 10
    if is_uppercase(ch):
        return ord(ch) - ord("A") + 10
    raise ValueError(f"Not a base-36 digit: {ch!r}")


def check_width(width: int, bits: int) -> None:
    """Reject widths whose full digit range cannot fit into `bits` bits."""
    if width <= 0:
        raise ValueError(f"Digit width must be positive, got {width}")
    if width * math.log2(36) > bits:
        raise ValueError(f"{width} base-36 digits do not fit into {bits} bits")


def decode_base36(text: str, width: int, *, signed: bool = True, bits: int = 16) -> int:
    """Decode exactly `width` base-36 digits.

    Signed values wrap like two's complement over base 36: anything at or
    above half the digit range maps to the negative side, so `"i00"` (half
    of 36**3) decodes to -23328.
    """
    check_width(width, bits)
    if len(text) != width:
        raise ValueError(f"Expected {width} base-36 digits, got {text!r}")

    span = 36**width
    result = 0
    for ch in text:
        result = 36 * result + base36_digit_value(ch)
    if signed and result >= span // 2:
        result -= span
    return result


def encode_base36(value: int, width: int, *, signed: bool = True) -> str:
    """Inverse of `decode_base36`, zero padded to `width` lower-case digits."""
    span = 36**width
    low = -(span // 2) if signed else 0
    high = span // 2 - 1 if signed else span - 1
    if not low <= value <= high:
        raise ValueError(f"{value} is out of range for {width} base-36 digits")

    if value < 0:
        value += span
    digits: list[str] = []
    for _ in range(width):
        value, digit = divmod(value, 36)
        digits.append(_BASE36_DIGITS[digit])
    return "".join(reversed(digits))


def is_base36_numeral(text: str) -> bool:
    return bool(text) and all(is_base36(ch) for ch in text)


def is_base10_numeral(text: str) -> bool:
    return _BASE10_NUMERAL_RE.fullmatch(text) is not None


def decode_base10_int(text: str) -> int:
    sign = 1
    if text[:1] == "+":
        text = text[1:]
    elif text[:1] == "-":
        text = text[1:]
        sign = -1

    if not text:
        raise ValueError("Expected at least one decimal digit")

    result = 0
    for ch in text:
        if not is_base10(ch):
            raise ValueError(f"Not a decimal digit: {ch!r}")
        result = 10 * result + (ord(ch) - ord("0"))
    return sign * result


def decode_base10_float(text: str) -> float:
    """Decode `[+-]digits[.digits]` without exponent notation.

    Integer and fractional parts are decoded separately and summed, the sign
    is applied once to the total.
    """
    dot = text.find(".")
    if dot == -1:
        return float(decode_base10_int(text))

    sign = 1.0
    if text[:1] == "+":
        text = text[1:]
    elif text[:1] == "-":
        text = text[1:]
        sign = -1.0
    dot = text.find(".")

    int_part = text[:dot]
    frac_part = text[dot + 1 :]
    result = 0.0
    if int_part:
        result += decode_base10_int(int_part)
    if frac_part:
        result += decode_base10_int(frac_part) * 10.0 ** -len(frac_part)
    return sign * result


__all__ = [
    "COORDINATE_WIDTH",
    "DIAMETER_WIDTH",
    "PRESSURE_SCALE",
    "PRESSURE_WIDTH",
    "RAW_COORDINATE_WIDTH",
    "base36_digit_value",
    "check_width",
    "decode_base10_float",
    "decode_base10_int",
    "decode_base36",
    "encode_base36",
    "is_base10_numeral",
    "is_base36_numeral",
]
