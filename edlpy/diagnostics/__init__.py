"""Diagnostics."""

from edlpy.diagnostics.codes import (
    SEMANTIC_SELF_TRANSITION,
    SEMANTIC_UNDEFINED_EVENT,
    STYLE_LINE_TOO_LONG,
    STYLE_MIXED_INDENTATION,
    STYLE_TRAILING_WHITESPACE,
    SYNTAX_INVALID_EVENT_NAME,
    SYNTAX_MISSING_BRACKET,
    SYNTAX_MISSING_SEMICOLON,
    DiagnosticSpec,
)
from edlpy.diagnostics.diagnostic import Diagnostic, Severity
from edlpy.diagnostics.report import (
    count_by_severity,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "SEMANTIC_SELF_TRANSITION",
    "SEMANTIC_UNDEFINED_EVENT",
    "STYLE_LINE_TOO_LONG",
    "STYLE_MIXED_INDENTATION",
    "STYLE_TRAILING_WHITESPACE",
    "SYNTAX_INVALID_EVENT_NAME",
    "SYNTAX_MISSING_BRACKET",
    "SYNTAX_MISSING_SEMICOLON",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "count_by_severity",
    "format_diagnostic",
    "has_errors",
]
