"""Lexer."""

from enum import IntEnum

from hscpy.lexer.chars import is_newline, is_operator, is_whitespace
from hscpy.lexer.tokens import OPERATOR_KINDS, Token, TokenFlags, TokenKind
from hscpy.text import TextRange


class LexState(IntEnum):
    LINE_START = 0
    COMMENT = 1
    SPACE = 2
    TOKEN = 3
    STRING = 4
    STRING_END = 5
    OP = 6
    END = 7


class Lexer:
    """State-machine lexer for sketch source.

    Comments and whitespace are dropped. Scanning stops right after the first
    `;` token, so anything behind the document terminator is never looked at.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._paren_depth = 0

    def lex(self) -> list[Token]:
        source = self._source
        tokens: list[Token] = []
        token_start = 0
        previous = LexState.LINE_START
        self._paren_depth = 0

        # One extra step past the end flushes whatever run is still open.
        for index in range(len(source) + 1):
            if index == len(source):
                state = LexState.END
            else:
                state = self._next_state(previous, source[index])

            if previous != state:
                if previous == LexState.TOKEN:
                    tokens.append(Token(TokenKind.WORD, TextRange(token_start, index)))
                if state == LexState.TOKEN:
                    token_start = index
                if state == LexState.STRING:
                    token_start = index
                if state == LexState.STRING_END:
                    tokens.append(Token(TokenKind.STRING, TextRange(token_start, index + 1)))
                # Unbalanced parentheses run the string to the end of input.
                if previous == LexState.STRING and state == LexState.END:
                    tokens.append(
                        Token(TokenKind.STRING, TextRange(token_start, index), TokenFlags.UNTERMINATED)
                    )

            if state == LexState.OP:
                kind = OPERATOR_KINDS[source[index]]
                tokens.append(Token(kind, TextRange(index, index + 1)))
                if kind == TokenKind.SEMICOLON:
                    return tokens

            previous = state

        return tokens

    def _next_state(self, state: LexState, ch: str) -> LexState:
        if state == LexState.LINE_START and ch == "%":
            return LexState.COMMENT
        if state == LexState.COMMENT:
            return LexState.LINE_START if is_newline(ch) else LexState.COMMENT
        if state == LexState.STRING:
            if ch == "(":
                self._paren_depth += 1
            elif ch == ")":
                self._paren_depth -= 1
                if self._paren_depth <= 0:
                    return LexState.STRING_END
            return LexState.STRING

        if is_newline(ch):
            return LexState.LINE_START
        if is_whitespace(ch):
            return LexState.SPACE
        if is_operator(ch):
            return LexState.OP
        if ch == "(":
            self._paren_depth = 1
            return LexState.STRING
        return LexState.TOKEN


def tokenize(source: str) -> list[Token]:
    return Lexer(source).lex()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    return token.range.slice(source)


def dump_tokens(tokens: list[Token], source: str) -> list[str]:
    """Render one line per token with kind, range, flags and text, for debugging."""
    lines: list[str] = []
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        lines.append(f"{i:03d} {tok.kind.name:<10} range={tok.range.as_tuple()} flags={int(tok.flags)} text={text!r}")
    return lines
