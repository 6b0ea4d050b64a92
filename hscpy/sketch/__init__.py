"""Sketch format: grammar table, element parser and document parser."""

from hscpy.sketch.cursor import TokenCursor
from hscpy.sketch.dump import dump_sketch
from hscpy.sketch.grammar import (
    ELEMENT_SHAPES,
    ArgumentKind,
    ElementData,
    ElementShape,
    FixedList,
    NoArgs,
    SingleArg,
    VarList,
    lookup_shape,
    parse_element,
)
from hscpy.sketch.model import (
    DEFAULT_GROUP_KINDS,
    Affine,
    Atom,
    Element,
    GroupKind,
    Marker,
    Modifier,
    Point,
    Sketch,
    Stroke,
)
from hscpy.sketch.options import ParseMode, ParserOptions, resolve_options
from hscpy.sketch.parser import ParsedSketch, parse_sketch, parse_tokens

__all__ = [
    "DEFAULT_GROUP_KINDS",
    "ELEMENT_SHAPES",
    "Affine",
    "ArgumentKind",
    "Atom",
    "Element",
    "ElementData",
    "ElementShape",
    "FixedList",
    "GroupKind",
    "Marker",
    "Modifier",
    "NoArgs",
    "ParseMode",
    "ParsedSketch",
    "ParserOptions",
    "Point",
    "SingleArg",
    "Sketch",
    "Stroke",
    "TokenCursor",
    "VarList",
    "dump_sketch",
    "lookup_shape",
    "parse_element",
    "parse_sketch",
    "parse_tokens",
    "resolve_options",
]
