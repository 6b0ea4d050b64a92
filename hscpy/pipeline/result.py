"""Parse carriers that keep source, tokens and documents together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hscpy.diagnostics import has_errors
from hscpy.lexer import Token, token_text
from hscpy.sketch.options import ParserOptions
from hscpy.sketch.parser import ParsedSketch

if TYPE_CHECKING:
    from hscpy.diagnostics import Diagnostic
    from hscpy.raw import RawSketch
    from hscpy.sketch import Sketch


@dataclass(slots=True)
class SketchParseResult:
    """Sketch-format parse result for one source buffer."""

    source_text: str
    tokens: list[Token]
    parsed: ParsedSketch
    options: ParserOptions
    source_path: str = "<memory>"
    _token_texts: list[str] | None = field(default=None, init=False, repr=False)

    @property
    def sketch(self) -> Sketch | None:
        return self.parsed.sketch

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def ok(self) -> bool:
        return self.parsed.ok

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def token_texts(self) -> list[str]:
        if self._token_texts is None:
            self._token_texts = [token_text(self.source_text, token) for token in self.tokens]
        return self._token_texts


@dataclass(frozen=True, slots=True)
class RawParseResult:
    """Raw-format parse result; `sketch` is None when verification fails."""

    source_text: str
    sketch: RawSketch | None
    diagnostics: list[Diagnostic]
    source_path: str = "<memory>"

    @property
    def ok(self) -> bool:
        return self.sketch is not None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
