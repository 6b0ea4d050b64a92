"""Parse carriers and text/file entrypoints."""

from hscpy.pipeline.entrypoints import (
    parse_raw_file,
    parse_raw_text,
    parse_sketch_file,
    parse_sketch_text,
    read_source,
)
from hscpy.pipeline.result import RawParseResult, SketchParseResult

__all__ = [
    "RawParseResult",
    "SketchParseResult",
    "parse_raw_file",
    "parse_raw_text",
    "parse_sketch_file",
    "parse_sketch_text",
    "read_source",
]
