"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from edlpy.text import TextRange

Severity = Literal["error", "warning", "information"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by lint rules."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
