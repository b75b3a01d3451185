"""Host-facing entrypoints over the lint runner."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from edlpy.lint import run_lint as _run_lint
from edlpy.pipeline.results import LintRunResult
from edlpy.settings import EdlSettings

if TYPE_CHECKING:
    from edlpy.diagnostics import Diagnostic
    from edlpy.lint.rules import LintRule

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    settings: EdlSettings | None = None,
    *,
    rules: tuple[LintRule, ...] | None = None,
) -> LintRunResult:
    """Run linting over one document text."""
    return _run_lint(text, settings, rules=rules)


def validate_document(
    uri: str,
    text: str,
    settings: EdlSettings | None = None,
    *,
    rules: tuple[LintRule, ...] | None = None,
) -> list[Diagnostic]:
    """Validate one document and return its full diagnostic list.

    The result depends only on `text` and `settings`; `uri` is used for logging.
    """
    result = _run_lint(text, settings, rules=rules)
    if not result.enabled:
        logger.debug("Linting disabled; skipped %s", uri)
    else:
        logger.debug("Validated %s: %d lines, %d diagnostics", uri, result.line_count, len(result.diagnostics))
    return result.diagnostics
