"""Diagnostics core types."""

from dataclasses import dataclass

from hscpy.diagnostics.codes import DiagnosticSpec, Severity
from hscpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the sketch and raw parsers."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, *, detail: str | None = None) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
