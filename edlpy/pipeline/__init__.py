"""Lint result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from edlpy.pipeline.results import LintRunResult

if TYPE_CHECKING:
    from edlpy.diagnostics import Diagnostic
    from edlpy.lint.rules import LintRule
    from edlpy.settings import EdlSettings


def run_lint(
    text: str,
    settings: EdlSettings | None = None,
    *,
    rules: tuple[LintRule, ...] | None = None,
) -> LintRunResult:
    from edlpy.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, settings, rules=rules)


def validate_document(
    uri: str,
    text: str,
    settings: EdlSettings | None = None,
    *,
    rules: tuple[LintRule, ...] | None = None,
) -> list[Diagnostic]:
    from edlpy.pipeline.entrypoints import validate_document as _validate_document

    return _validate_document(uri, text, settings, rules=rules)


__all__ = [
    "LintRunResult",
    "run_lint",
    "validate_document",
]
