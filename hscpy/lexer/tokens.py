"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from hscpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Runs of ordinary characters (type names, numerals, digit strings)
    # -------------------------
    WORD = 20
    STRING = 21  # parenthesized, delimiters included

    # -------------------------
    # Single-character operators
    # -------------------------
    COLON = 40  # :
    SEMICOLON = 41  # ;
    COMMA = 42  # ,
    LBRACKET = 62  # [
    RBRACKET = 63  # ]

    @property
    def is_operator(self) -> bool:
        return self in OPERATOR_KINDS.values()


OPERATOR_KINDS: Final[dict[str, TokenKind]] = {
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    UNTERMINATED = 1 << 0  # STRING cut off by end of input


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token: a kind plus a range into the source buffer."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)
