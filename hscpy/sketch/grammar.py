"""Element grammar table and the positional element parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping, assert_never

from hscpy.diagnostics.codes import (
    SKETCH_ARGUMENT_COUNT_MISMATCH,
    SKETCH_UNKNOWN_ELEMENT_TYPE,
    SKETCH_UNTERMINATED_LIST,
)
from hscpy.lexer import Token, TokenKind
from hscpy.sketch.cursor import TokenCursor
from hscpy.text import TextRange


class ArgumentKind(StrEnum):
    BASE36 = "base36"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class NoArgs:
    pass


@dataclass(frozen=True, slots=True)
class SingleArg:
    kind: ArgumentKind


@dataclass(frozen=True, slots=True)
class FixedList:
    kind: ArgumentKind
    count: int


@dataclass(frozen=True, slots=True)
class VarList:
    """Bracketed list of any length.

    `multiplier` is how many arguments make up one logical item; Brush
    arguments come in (diameter, digits) pairs.
    """

    kind: ArgumentKind
    multiplier: int = 1


type ElementShape = NoArgs | SingleArg | FixedList | VarList


ELEMENT_SHAPES: Final[Mapping[str, ElementShape]] = MappingProxyType(
    {
        "Data": VarList(ArgumentKind.BASE36, 1),
        "Pencil": VarList(ArgumentKind.BASE36, 1),
        "Brush": VarList(ArgumentKind.BASE36, 2),
        "Affine": FixedList(ArgumentKind.NUMBER, 9),
        "Marker": SingleArg(ArgumentKind.STRING),
    }
)


_LIST_END: Final[frozenset[TokenKind]] = frozenset({TokenKind.RBRACKET, TokenKind.SEMICOLON})


def lookup_shape(type_name: str) -> ElementShape | None:
    return ELEMENT_SHAPES.get(type_name)


@dataclass(frozen=True, slots=True)
class ElementData:
    """Type name plus the raw argument tokens of one parsed element."""

    type_name: str
    range: TextRange
    arguments: tuple[Token, ...]


def parse_element(
    cursor: TokenCursor,
    shapes: Mapping[str, ElementShape] = ELEMENT_SHAPES,
) -> ElementData | None:
    """Consume one element at the cursor.

    Returns None after recording a diagnostic; the cursor position is then
    meaningless and the caller must abort the parse.
    """
    if cursor.at_end():
        cursor.error(SKETCH_UNKNOWN_ELEMENT_TYPE, cursor.current_range(), detail="Expected an element type name.")
        return None

    name_token = cursor.bump()
    type_name = cursor.text(name_token)
    shape = shapes.get(type_name)
    if shape is None:
        cursor.error(SKETCH_UNKNOWN_ELEMENT_TYPE, name_token.range, detail=f"`{type_name}` is not an element type.")
        return None

    match shape:
        case NoArgs():
            return ElementData(type_name, name_token.range, ())
        case SingleArg(kind=kind):
            return _parse_single_argument(cursor, type_name, name_token, kind)
        case FixedList(kind=kind, count=count):
            arguments = _parse_bracket_list(cursor, type_name, name_token, kind)
            if arguments is None:
                return None
            if len(arguments) != count:
                cursor.error(
                    SKETCH_ARGUMENT_COUNT_MISMATCH,
                    _element_range(name_token, cursor),
                    detail=f"`{type_name}` takes exactly {count} arguments, got {len(arguments)}.",
                )
                return None
            return ElementData(type_name, _element_range(name_token, cursor), arguments)
        case VarList(kind=kind, multiplier=multiplier):
            arguments = _parse_bracket_list(cursor, type_name, name_token, kind)
            if arguments is None:
                return None
            if len(arguments) % multiplier != 0:
                cursor.error(
                    SKETCH_ARGUMENT_COUNT_MISMATCH,
                    _element_range(name_token, cursor),
                    detail=(
                        f"`{type_name}` arguments come in groups of {multiplier}, "
                        f"got {len(arguments)}."
                    ),
                )
                return None
            return ElementData(type_name, _element_range(name_token, cursor), arguments)
        case _:
            assert_never(shape)


def _parse_single_argument(
    cursor: TokenCursor,
    type_name: str,
    name_token: Token,
    kind: ArgumentKind,
) -> ElementData | None:
    if not cursor.at(TokenKind.COLON):
        cursor.error(
            SKETCH_ARGUMENT_COUNT_MISMATCH,
            cursor.current_range(),
            detail=f"Expected `:` after `{type_name}`.",
        )
        return None
    cursor.bump()

    argument = cursor.current()
    if argument is None or argument.kind.is_operator:
        cursor.error(
            SKETCH_ARGUMENT_COUNT_MISMATCH,
            cursor.current_range(),
            detail=f"`{type_name}` takes exactly 1 argument.",
        )
        return None
    if not _matches_kind(kind, argument):
        cursor.error(
            SKETCH_ARGUMENT_COUNT_MISMATCH,
            argument.range,
            detail=f"`{type_name}` takes a {kind} argument, got `{cursor.text(argument)}`.",
        )
        return None
    cursor.bump()
    return ElementData(type_name, name_token.range.cover(argument.range), (argument,))


def _parse_bracket_list(
    cursor: TokenCursor,
    type_name: str,
    name_token: Token,
    kind: ArgumentKind,
) -> tuple[Token, ...] | None:
    if not cursor.at(TokenKind.COLON):
        cursor.error(
            SKETCH_ARGUMENT_COUNT_MISMATCH,
            cursor.current_range(),
            detail=f"Expected `:` after `{type_name}`.",
        )
        return None
    cursor.bump()

    if not cursor.at(TokenKind.LBRACKET):
        cursor.error(
            SKETCH_ARGUMENT_COUNT_MISMATCH,
            cursor.current_range(),
            detail=f"Expected `[` to open the `{type_name}` argument list.",
        )
        return None
    open_bracket = cursor.bump()

    # Commas inside a list only separate arguments; whitespace does the same.
    arguments: list[Token] = []
    while not cursor.at_end() and not cursor.at_set(_LIST_END):
        token = cursor.bump()
        if token.kind == TokenKind.COMMA:
            continue
        if not _matches_kind(kind, token):
            cursor.error(
                SKETCH_ARGUMENT_COUNT_MISMATCH,
                token.range,
                detail=f"`{type_name}` takes {kind} arguments, got `{cursor.text(token)}`.",
            )
            return None
        arguments.append(token)

    if not cursor.at(TokenKind.RBRACKET):
        cursor.error(
            SKETCH_UNTERMINATED_LIST,
            open_bracket.range.cover(cursor.current_range()),
            detail=f"`{type_name}` list opened here has no `]`.",
        )
        return None
    cursor.bump()
    return tuple(arguments)


def _matches_kind(kind: ArgumentKind, token: Token) -> bool:
    match kind:
        case ArgumentKind.STRING:
            return token.kind == TokenKind.STRING
        case ArgumentKind.BASE36 | ArgumentKind.NUMBER:
            return token.kind == TokenKind.WORD
        case _:
            assert_never(kind)


def _element_range(name_token: Token, cursor: TokenCursor) -> TextRange:
    # The closing bracket is the token just consumed.
    return name_token.range.cover(cursor.previous().range)
