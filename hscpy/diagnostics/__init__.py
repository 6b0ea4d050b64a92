"""Diagnostics."""

from hscpy.diagnostics.codes import (
    RAW_INVALID_STREAM,
    SKETCH_ARGUMENT_COUNT_MISMATCH,
    SKETCH_EMPTY_DOCUMENT,
    SKETCH_EMPTY_STATEMENT,
    SKETCH_IGNORED_MODIFIER,
    SKETCH_MALFORMED_DIGIT_GROUP,
    SKETCH_MALFORMED_MARKER,
    SKETCH_MALFORMED_NUMBER,
    SKETCH_UNKNOWN_ELEMENT_TYPE,
    SKETCH_UNTERMINATED_LIST,
    DiagnosticSpec,
    Severity,
)
from hscpy.diagnostics.diagnostic import Diagnostic
from hscpy.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "RAW_INVALID_STREAM",
    "SKETCH_ARGUMENT_COUNT_MISMATCH",
    "SKETCH_EMPTY_DOCUMENT",
    "SKETCH_EMPTY_STATEMENT",
    "SKETCH_IGNORED_MODIFIER",
    "SKETCH_MALFORMED_DIGIT_GROUP",
    "SKETCH_MALFORMED_MARKER",
    "SKETCH_MALFORMED_NUMBER",
    "SKETCH_UNKNOWN_ELEMENT_TYPE",
    "SKETCH_UNTERMINATED_LIST",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
