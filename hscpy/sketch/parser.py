"""Sketch document parser: statements of elements into a `Sketch`."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final

from hscpy.diagnostics import Diagnostic, has_errors
from hscpy.diagnostics.codes import (
    SKETCH_EMPTY_DOCUMENT,
    SKETCH_EMPTY_STATEMENT,
    SKETCH_IGNORED_MODIFIER,
    SKETCH_MALFORMED_DIGIT_GROUP,
    SKETCH_MALFORMED_MARKER,
    SKETCH_MALFORMED_NUMBER,
)
from hscpy.lexer import Lexer, Token, TokenKind, is_base36
from hscpy.numerals import (
    COORDINATE_WIDTH,
    DIAMETER_WIDTH,
    PRESSURE_SCALE,
    PRESSURE_WIDTH,
    decode_base10_float,
    decode_base36,
    is_base10_numeral,
    is_base36_numeral,
)
from hscpy.sketch.cursor import TokenCursor
from hscpy.sketch.grammar import ElementData, parse_element
from hscpy.sketch.model import Affine, Atom, Element, Marker, Modifier, Point, Sketch, Stroke
from hscpy.sketch.options import ParseMode, ParserOptions, resolve_options

STATEMENT_END: Final[frozenset[TokenKind]] = frozenset({TokenKind.COMMA, TokenKind.SEMICOLON})
STROKE_TYPES: Final[frozenset[str]] = frozenset({"Data", "Pencil", "Brush"})

DEFAULT_DIAMETER: Final[int] = 3
DIGIT_SEPARATOR: Final[str] = "'"
PENCIL_GROUP_SIZE: Final[int] = 2 * COORDINATE_WIDTH
BRUSH_GROUP_SIZE: Final[int] = 2 * COORDINATE_WIDTH + PRESSURE_WIDTH


@dataclass(slots=True)
class ParsedSketch:
    """Outcome of one sketch parse: a document, or None plus the error."""

    sketch: Sketch | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.sketch is not None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(frozen=True, slots=True)
class _Statement:
    atoms: tuple[Atom, ...]
    group: Element | None


def parse_tokens(
    source: str,
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
) -> ParsedSketch:
    """Assemble a `Sketch` from lexed tokens.

    One malformed statement fails the whole document: the result then has no
    sketch and carries the error diagnostic.
    """
    parser = _DocumentParser(TokenCursor(source, tokens), options or ParserOptions())
    sketch = parser.parse()
    return ParsedSketch(sketch=sketch, diagnostics=parser.cursor.diagnostics)


def parse_sketch(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedSketch:
    resolved_options = resolve_options(options=options, mode=mode)
    tokens = Lexer(text).lex()
    return parse_tokens(text, tokens, resolved_options)


class _DocumentParser:
    def __init__(self, cursor: TokenCursor, options: ParserOptions) -> None:
        self.cursor = cursor
        self._options = options
        self._elements: list[Element] = []
        self._atoms: list[Atom] = []

    def parse(self) -> Sketch | None:
        cursor = self.cursor
        if cursor.at_end():
            cursor.error(SKETCH_EMPTY_DOCUMENT, cursor.current_range())
            return None
        if cursor.at(TokenKind.SEMICOLON):
            return Sketch()

        while not cursor.at_end():
            statement = self._parse_statement()
            if statement is None:
                return None

            if statement.group is not None:
                self._elements.append(statement.group)
            # Later statements go in front of earlier ones.
            self._atoms[0:0] = statement.atoms

            if cursor.at(TokenKind.SEMICOLON):
                break
            if cursor.at(TokenKind.COMMA):
                cursor.bump()

        return Sketch(elements=tuple(self._elements), atoms=tuple(self._atoms))

    def _parse_statement(self) -> _Statement | None:
        cursor = self.cursor
        elements: list[ElementData] = []
        while not cursor.at_end() and not cursor.at_set(STATEMENT_END):
            element = parse_element(cursor)
            if element is None:
                return None
            elements.append(element)

        if not elements:
            cursor.error(SKETCH_EMPTY_STATEMENT, cursor.current_range())
            return None

        head, *modifier_elements = elements
        atoms = self._parse_payload(head)
        if atoms is None:
            return None

        modifiers: list[Modifier] = []
        for element in modifier_elements:
            if element.type_name == "Affine":
                affine = self._parse_affine(element)
                if affine is None:
                    return None
                modifiers.append(affine)
            elif self._options.report_ignored_modifiers:
                cursor.error(
                    SKETCH_IGNORED_MODIFIER,
                    element.range,
                    detail=f"`{element.type_name}` after `{head.type_name}`.",
                )

        group: Element | None = None
        group_kind = self._options.group_kinds.get(head.type_name)
        if group_kind is not None:
            group = Element(kind=group_kind, atoms=tuple(atoms), modifiers=tuple(modifiers))

        return _Statement(atoms=tuple(atoms), group=group)

    def _parse_payload(self, element: ElementData) -> list[Atom] | None:
        if element.type_name in STROKE_TYPES:
            return self._parse_strokes(element)
        if element.type_name == "Marker":
            marker = self._parse_marker(element)
            return None if marker is None else [marker]
        return []

    def _parse_strokes(self, element: ElementData) -> list[Atom] | None:
        is_brush = element.type_name == "Brush"
        step = 2 if is_brush else 1
        arguments = element.arguments

        strokes: list[Atom] = []
        for index in range(0, len(arguments), step):
            diameter = DEFAULT_DIAMETER
            if is_brush:
                diameter_token = arguments[index]
                diameter_text = self.cursor.text(diameter_token)
                if len(diameter_text) != DIAMETER_WIDTH or not is_base36_numeral(diameter_text):
                    self.cursor.error(
                        SKETCH_MALFORMED_DIGIT_GROUP,
                        diameter_token.range,
                        detail=f"Brush diameter must be {DIAMETER_WIDTH} base-36 digits, got `{diameter_text}`.",
                    )
                    return None
                diameter = decode_base36(diameter_text, DIAMETER_WIDTH, signed=False)

            points = self._parse_points(arguments[index + step - 1], is_brush=is_brush)
            if points is None:
                return None
            strokes.append(Stroke(diameter=diameter, points=tuple(points)))
        return strokes

    def _parse_points(self, token: Token, *, is_brush: bool) -> list[Point] | None:
        group_size = BRUSH_GROUP_SIZE if is_brush else PENCIL_GROUP_SIZE
        text = self.cursor.text(token)

        points: list[Point] = []
        digits: list[str] = []
        for ch in text:
            if ch == DIGIT_SEPARATOR:
                continue
            if not is_base36(ch):
                self.cursor.error(
                    SKETCH_MALFORMED_DIGIT_GROUP,
                    token.range,
                    detail=f"`{ch}` is not a base-36 digit.",
                )
                return None
            digits.append(ch)
            if len(digits) < group_size:
                continue
            points.append(_decode_point("".join(digits), is_brush=is_brush))
            digits.clear()

        if digits:
            self.cursor.error(
                SKETCH_MALFORMED_DIGIT_GROUP,
                token.range,
                detail=f"{len(digits)} digits left over, points take {group_size}.",
            )
            return None
        return points

    def _parse_marker(self, element: ElementData) -> Marker | None:
        token = element.arguments[0]
        if token.is_unterminated():
            self.cursor.error(SKETCH_MALFORMED_MARKER, token.range, detail="The `(` is never closed.")
            return None
        return Marker(message=self.cursor.text(token)[1:-1])

    def _parse_affine(self, element: ElementData) -> Affine | None:
        coefficients: list[float] = []
        for token in element.arguments:
            text = self.cursor.text(token)
            if not is_base10_numeral(text):
                self.cursor.error(SKETCH_MALFORMED_NUMBER, token.range, detail=f"Got `{text}`.")
                return None
            coefficients.append(decode_base10_float(text))
        return Affine(tuple(coefficients))


def _decode_point(digits: str, *, is_brush: bool) -> Point:
    x = decode_base36(digits[0:3], COORDINATE_WIDTH)
    y = decode_base36(digits[3:6], COORDINATE_WIDTH)
    pressure = 1.0
    if is_brush:
        pressure = decode_base36(digits[6:8], PRESSURE_WIDTH, signed=False) / PRESSURE_SCALE
    return Point(x=x, y=y, pressure=pressure)
