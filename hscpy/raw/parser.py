"""Validator and parser for the raw point-list format.

A raw sketch is whitespace-separated words of base-36 digits. Every 4 digits
are one point (2 for x, 2 for y) and every word is one stroke.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final, TextIO

from hscpy.lexer.chars import is_base36, is_whitespace
from hscpy.numerals import RAW_COORDINATE_WIDTH, decode_base36
from hscpy.raw.model import RawPoint, RawSketch, RawStroke

RAW_GROUP_SIZE: Final[int] = 2 * RAW_COORDINATE_WIDTH


class RawState(IntEnum):
    S0 = 0  # between groups
    X1 = 1
    X2 = 2
    Y1 = 3
    Y2 = 4  # group complete


_NEXT_DIGIT_STATE: Final[dict[RawState, RawState]] = {
    RawState.S0: RawState.X1,
    RawState.X1: RawState.X2,
    RawState.X2: RawState.Y1,
    RawState.Y1: RawState.Y2,
    RawState.Y2: RawState.X1,
}

_GROUP_BOUNDARY: Final[frozenset[RawState]] = frozenset({RawState.S0, RawState.Y2})


def verify_raw(stream: str | TextIO) -> bool:
    """Check that the stream holds only complete 4-digit groups.

    Whitespace may only appear between groups.
    """
    state = RawState.S0
    for ch in _read_text(stream):
        if is_base36(ch):
            state = _NEXT_DIGIT_STATE[state]
        elif is_whitespace(ch) and state in _GROUP_BOUNDARY:
            state = RawState.S0
        else:
            return False
    return state in _GROUP_BOUNDARY


def parse_raw(stream: str | TextIO) -> RawSketch:
    """Decode a raw sketch. Expects input that passed `verify_raw`.

    A trailing chunk shorter than 4 digits is dropped.
    """
    strokes: list[RawStroke] = []
    for word in _read_text(stream).split():
        points: list[RawPoint] = []
        for i in range(0, len(word) - RAW_GROUP_SIZE + 1, RAW_GROUP_SIZE):
            points.append(
                RawPoint(
                    x=decode_base36(word[i : i + 2], RAW_COORDINATE_WIDTH),
                    y=decode_base36(word[i + 2 : i + 4], RAW_COORDINATE_WIDTH),
                )
            )
        strokes.append(RawStroke(points=tuple(points)))
    return RawSketch(strokes=tuple(strokes))


def _read_text(stream: str | TextIO) -> str:
    if isinstance(stream, str):
        return stream
    return stream.read()
