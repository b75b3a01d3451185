"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from edlpy.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of scanning one document text with the lint rules."""

    source_text: str
    diagnostics: list[Diagnostic]
    line_count: int
    enabled: bool = True

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
