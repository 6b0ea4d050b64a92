"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SKETCH_EMPTY_DOCUMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_EMPTY_DOCUMENT",
    message="Sketch source contains no tokens.",
    hint="Terminate an empty sketch with a single `;`.",
    severity="error",
    category="parser",
)

SKETCH_UNKNOWN_ELEMENT_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_UNKNOWN_ELEMENT_TYPE",
    message="Unknown element type.",
    hint="Known element types are `Data`, `Pencil`, `Brush`, `Affine` and `Marker`.",
    severity="error",
    category="parser",
)

SKETCH_ARGUMENT_COUNT_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_ARGUMENT_COUNT_MISMATCH",
    message="Element arguments do not match the element's argument shape.",
    severity="error",
    category="parser",
)

SKETCH_UNTERMINATED_LIST: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_UNTERMINATED_LIST",
    message="Argument list is never closed.",
    hint="Close the argument list with `]`.",
    severity="error",
    category="parser",
)

SKETCH_EMPTY_STATEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_EMPTY_STATEMENT",
    message="Statement contains no elements.",
    hint="Remove the stray `,` or add an element before it.",
    severity="error",
    category="parser",
)

SKETCH_MALFORMED_DIGIT_GROUP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_MALFORMED_DIGIT_GROUP",
    message="Stroke digits do not form complete base-36 point groups.",
    hint="Pencil/Data points take 6 digits, Brush points take 8 digits.",
    severity="error",
    category="parser",
)

SKETCH_MALFORMED_MARKER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_MALFORMED_MARKER",
    message="Marker message must be wrapped in balanced parentheses.",
    hint="Write markers like `Marker: (my note)`.",
    severity="error",
    category="parser",
)

SKETCH_MALFORMED_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_MALFORMED_NUMBER",
    message="Expected a base-10 number.",
    hint="Numbers take an optional sign, digits and at most one `.`.",
    severity="error",
    category="parser",
)

SKETCH_IGNORED_MODIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SKETCH_IGNORED_MODIFIER",
    message="Element has no effect as a modifier and is ignored.",
    hint="Only `Affine` modifies a statement.",
    severity="warning",
    category="parser",
)

RAW_INVALID_STREAM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RAW_INVALID_STREAM",
    message="Raw sketch must consist of whitespace-separated groups of 4 base-36 digits.",
    severity="error",
    category="raw",
)
