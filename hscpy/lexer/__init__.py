"""Lexer."""

from hscpy.lexer.chars import (
    is_base10,
    is_base36,
    is_lowercase,
    is_newline,
    is_operator,
    is_uppercase,
    is_whitespace,
)
from hscpy.lexer.lexer import LexState, Lexer, dump_tokens, token_text, tokenize
from hscpy.lexer.tokens import OPERATOR_KINDS, Token, TokenFlags, TokenKind

__all__ = [
    "OPERATOR_KINDS",
    "LexState",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "is_base10",
    "is_base36",
    "is_lowercase",
    "is_newline",
    "is_operator",
    "is_uppercase",
    "is_whitespace",
    "token_text",
    "tokenize",
]
