"""Character classes shared by the sketch lexer, numerals and raw format."""

from typing import Final

OPERATOR_CHARS: Final[str] = ":[],;"


def is_whitespace(ch: str) -> bool:
    return ch == " " or ch == "\t" or ch == "\n" or ch == "\r"


def is_newline(ch: str) -> bool:
    return ch == "\n" or ch == "\r"


def is_lowercase(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_uppercase(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_base10(ch: str) -> bool:
    # ASCII only; str.isdigit() also matches other scripts.
    return "0" <= ch <= "9"


def is_base36(ch: str) -> bool:
    return is_base10(ch) or is_lowercase(ch) or is_uppercase(ch)


def is_operator(ch: str) -> bool:
    return ch != "" and ch in OPERATOR_CHARS
