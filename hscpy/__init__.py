"""Compiler for the hand-drawn sketch (`.hsc`) format and the raw point-list format."""

from hscpy.diagnostics import Diagnostic, has_errors
from hscpy.lexer import Lexer, Token, TokenKind, token_text, tokenize
from hscpy.pipeline import (
    RawParseResult,
    SketchParseResult,
    parse_raw_file,
    parse_raw_text,
    parse_sketch_file,
    parse_sketch_text,
)
from hscpy.raw import RawPoint, RawSketch, RawStroke, parse_raw, verify_raw
from hscpy.sketch import (
    Affine,
    Element,
    GroupKind,
    Marker,
    ParseMode,
    ParsedSketch,
    ParserOptions,
    Point,
    Sketch,
    Stroke,
    parse_sketch,
    parse_tokens,
)

__all__ = [
    "Affine",
    "Diagnostic",
    "Element",
    "GroupKind",
    "Lexer",
    "Marker",
    "ParseMode",
    "ParsedSketch",
    "ParserOptions",
    "Point",
    "RawParseResult",
    "RawPoint",
    "RawSketch",
    "RawStroke",
    "Sketch",
    "SketchParseResult",
    "Stroke",
    "Token",
    "TokenKind",
    "has_errors",
    "parse_raw",
    "parse_raw_file",
    "parse_raw_text",
    "parse_sketch",
    "parse_sketch_file",
    "parse_sketch_text",
    "parse_tokens",
    "token_text",
    "tokenize",
    "verify_raw",
]
