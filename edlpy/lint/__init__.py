"""Line-oriented lint engine for EDL sources."""

from edlpy.lint.rules import (
    MAX_LINE_LENGTH,
    InvalidEventNameRule,
    LineTooLongRule,
    LintConfidence,
    LintDomain,
    LintRule,
    MissingClosingBracketRule,
    MissingSemicolonRule,
    MixedIndentationRule,
    SelfTransitionRule,
    TrailingWhitespaceRule,
    UndefinedEventRule,
    default_lint_rules,
    validate_lint_rules,
)
from edlpy.lint.runner import run_lint

__all__ = [
    "MAX_LINE_LENGTH",
    "InvalidEventNameRule",
    "LineTooLongRule",
    "LintConfidence",
    "LintDomain",
    "LintRule",
    "MissingClosingBracketRule",
    "MissingSemicolonRule",
    "MixedIndentationRule",
    "SelfTransitionRule",
    "TrailingWhitespaceRule",
    "UndefinedEventRule",
    "default_lint_rules",
    "run_lint",
    "validate_lint_rules",
]
