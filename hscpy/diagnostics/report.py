"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from hscpy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    start, end = diagnostic.range.as_tuple()
    line = f"{diagnostic.severity.upper()} {diagnostic.code} range=({start}, {end}) message={diagnostic.message}"
    if diagnostic.hint:
        line += f" hint={diagnostic.hint}"
    return line
