"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from edlpy.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


SYNTAX_MISSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missing-bracket",
    message="Missing closing bracket",
    hint="Close every `{` opened on this line with a matching `}`.",
    severity="error",
    category="syntax",
)

SYNTAX_INVALID_EVENT_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="invalid-event-name",
    message="Event names should be lowercase with underscores",
    hint="Rename the event to match `[a-z][a-z0-9_]*`, e.g. `user_login`.",
    severity="error",
    category="syntax",
)

SYNTAX_MISSING_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missing-semicolon",
    message="Missing semicolon",
    hint="Terminate the call with `;`.",
    severity="warning",
    category="syntax",
)

SEMANTIC_UNDEFINED_EVENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="undefined-event",
    message="Undefined event",
    hint="Emit a declared event instead of a null or undefined placeholder.",
    severity="error",
    category="semantic",
)

SEMANTIC_SELF_TRANSITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="self-transition",
    message="Self-transitions should be explicit",
    hint="Declare the self-transition with an explicit trigger or remove it.",
    severity="warning",
    category="semantic",
)

STYLE_LINE_TOO_LONG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="line-too-long",
    message="Line too long (>120 characters)",
    hint="Split the line so it fits in 120 characters.",
    severity="information",
    category="style",
)

STYLE_MIXED_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="mixed-indentation",
    message="Mixed tabs and spaces for indentation",
    hint="Indent with either tabs or spaces, not both.",
    severity="warning",
    category="style",
)

STYLE_TRAILING_WHITESPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="trailing-whitespace",
    message="Trailing whitespace",
    hint="Remove whitespace at the end of the line.",
    severity="information",
    category="style",
)
