"""Token cursor shared by the element and document parsers."""

from collections.abc import Sequence

from hscpy.diagnostics import Diagnostic, DiagnosticSpec
from hscpy.lexer import Token, TokenKind, token_text
from hscpy.text import TextRange


class TokenCursor:
    """Forward-only view over one parse call's tokens.

    Tokens still point into `source`; text is only sliced out when a parser
    asks for it.
    """

    def __init__(self, source: str, tokens: Sequence[Token]) -> None:
        self._source = source
        self._tokens = tokens
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def position(self) -> int:
        return self._position

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def at_end(self) -> bool:
        return self._position >= len(self._tokens)

    def at(self, kind: TokenKind) -> bool:
        return not self.at_end() and self._tokens[self._position].kind == kind

    def at_set(self, kinds: frozenset[TokenKind]) -> bool:
        return not self.at_end() and self._tokens[self._position].kind in kinds

    def current(self) -> Token | None:
        if self.at_end():
            return None
        return self._tokens[self._position]

    def previous(self) -> Token:
        return self._tokens[self._position - 1]

    def bump(self) -> Token:
        token = self._tokens[self._position]
        self._position += 1
        return token

    def text(self, token: Token) -> str:
        return token_text(self._source, token)

    def current_range(self) -> TextRange:
        """Range of the current token, or an empty range at end of input."""
        token = self.current()
        if token is not None:
            return token.range
        if self._tokens:
            return TextRange.empty(self._tokens[-1].range.end)
        return TextRange.empty(len(self._source))

    def error(self, spec: DiagnosticSpec, range: TextRange, *, detail: str | None = None) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, range, detail=detail))
