"""Lint runner: scans a document line by line against the rule set."""

from __future__ import annotations

from collections.abc import Sequence

from edlpy.diagnostics import Diagnostic
from edlpy.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from edlpy.pipeline.results import LintRunResult
from edlpy.settings import EdlSettings
from edlpy.text import split_lines


def run_lint(
    text: str,
    settings: EdlSettings | None = None,
    *,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run every rule over every line of `text`.

    Output order is line order, then rule-registration order within a line.
    """
    resolved_settings = settings if settings is not None else EdlSettings()
    if not resolved_settings.linting_enabled:
        return LintRunResult(source_text=text, diagnostics=[], line_count=0, enabled=False)

    resolved_rules = tuple(rules) if rules is not None else default_lint_rules()
    validate_lint_rules(resolved_rules)

    lines = split_lines(text)
    diagnostics: list[Diagnostic] = []
    for line_number, line in enumerate(lines):
        for rule in resolved_rules:
            diagnostics.extend(rule.run(line, line_number))

    return LintRunResult(
        source_text=text,
        diagnostics=diagnostics,
        line_count=len(lines),
        enabled=True,
    )
