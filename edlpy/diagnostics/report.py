"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from edlpy.diagnostics.diagnostic import Diagnostic, Severity


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def count_by_severity(diagnostics: Iterable[Diagnostic]) -> dict[Severity, int]:
    counts = Counter(d.severity for d in diagnostics)
    return {
        "error": counts["error"],
        "warning": counts["warning"],
        "information": counts["information"],
    }


def format_diagnostic(diagnostic: Diagnostic, *, path: str | None = None) -> str:
    """Render a diagnostic as `path:line:col: severity: message [code]` with 1-based coordinates."""
    start = diagnostic.range.start
    location = f"{start.line + 1}:{start.character + 1}"
    if path is not None:
        location = f"{path}:{location}"
    return f"{location}: {diagnostic.severity}: {diagnostic.message} [{diagnostic.code}]"
