"""Lint rules and rule contracts.

Every rule looks at one line at a time and shares no state with other rules.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final, Literal, Protocol, TypeAlias

from edlpy.diagnostics import (
    SEMANTIC_SELF_TRANSITION,
    SEMANTIC_UNDEFINED_EVENT,
    STYLE_LINE_TOO_LONG,
    STYLE_MIXED_INDENTATION,
    STYLE_TRAILING_WHITESPACE,
    SYNTAX_INVALID_EVENT_NAME,
    SYNTAX_MISSING_BRACKET,
    SYNTAX_MISSING_SEMICOLON,
    Diagnostic,
    DiagnosticSpec,
)
from edlpy.text import TextRange

LintDomain: TypeAlias = Literal["syntax", "semantic", "style"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]

MAX_LINE_LENGTH: Final[int] = 120
STATEMENT_FUNCTIONS: Final[tuple[str, ...]] = ("emit", "listen", "schedule", "delay", "cancel")

_IDENTIFIER = r"[A-Za-z0-9_]+"
_CODE_PATTERN = re.compile(r"[a-z]+(?:-[a-z]+)*")


class LintRule(Protocol):
    """Line-local lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, line: str, line_number: int) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class MissingClosingBracketRule:
    """Flags lines that open more `{` than they close.

    This is a per-line count, not document-wide brace balancing, so a line that
    opens a block continued below is reported too.
    """

    code: str = SYNTAX_MISSING_BRACKET.code
    name: str = "syntaxMissingClosingBracket"
    domain: LintDomain = "syntax"
    confidence: LintConfidence = "heuristic"

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        if line.count("{") <= line.count("}"):
            return []
        end = len(line)
        return [_diagnostic(SYNTAX_MISSING_BRACKET, TextRange.on_line(line_number, end - 1, end))]


@dataclass(frozen=True, slots=True)
class InvalidEventNameRule:
    """Requires `event <name>` declarations to use lowercase snake_case names."""

    code: str = SYNTAX_INVALID_EVENT_NAME.code
    name: str = "syntaxInvalidEventName"
    domain: LintDomain = "syntax"
    confidence: LintConfidence = "policy"

    _pattern: re.Pattern[str] = re.compile(rf"event\s+({_IDENTIFIER})")
    _valid_name: re.Pattern[str] = re.compile(r"[a-z][a-z0-9_]*")

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None:
            return []
        event_name = match.group(1)
        if self._valid_name.fullmatch(event_name):
            return []
        return [_diagnostic(SYNTAX_INVALID_EVENT_NAME, _first_occurrence(line, line_number, event_name))]


@dataclass(frozen=True, slots=True)
class MissingSemicolonRule:
    """Flags bare `emit(...)`-style statements that lack a terminating `;`."""

    code: str = SYNTAX_MISSING_SEMICOLON.code
    name: str = "syntaxMissingSemicolon"
    domain: LintDomain = "syntax"
    confidence: LintConfidence = "policy"

    _pattern: re.Pattern[str] = re.compile(rf"(?:{'|'.join(STATEMENT_FUNCTIONS)})\s*\([^)]*\)\s*")

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        if ";" in line or self._pattern.fullmatch(line.strip()) is None:
            return []
        end = len(line)
        return [_diagnostic(SYNTAX_MISSING_SEMICOLON, TextRange.on_line(line_number, end - 1, end))]


@dataclass(frozen=True, slots=True)
class UndefinedEventRule:
    """Flags `emit(...)` of placeholder names such as `null` or `undefined_*`.

    Only the literal name is inspected; there is no symbol table behind it.
    """

    code: str = SEMANTIC_UNDEFINED_EVENT.code
    name: str = "semanticUndefinedEvent"
    domain: LintDomain = "semantic"
    confidence: LintConfidence = "heuristic"

    _pattern: re.Pattern[str] = re.compile(rf"emit\s*\(\s*({_IDENTIFIER})")

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None:
            return []
        event_name = match.group(1)
        if "undefined" not in event_name and event_name != "null":
            return []
        return [
            _diagnostic(
                SEMANTIC_UNDEFINED_EVENT,
                _first_occurrence(line, line_number, event_name),
                message=f"{SEMANTIC_UNDEFINED_EVENT.message}: {event_name}",
            )
        ]


@dataclass(frozen=True, slots=True)
class SelfTransitionRule:
    """Flags `state -> state` transitions written without an explicit trigger."""

    code: str = SEMANTIC_SELF_TRANSITION.code
    name: str = "semanticSelfTransition"
    domain: LintDomain = "semantic"
    confidence: LintConfidence = "policy"

    _pattern: re.Pattern[str] = re.compile(rf"({_IDENTIFIER})\s*->\s*({_IDENTIFIER})")

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        match = self._pattern.search(line)
        if match is None or match.group(1) != match.group(2):
            return []
        return [_diagnostic(SEMANTIC_SELF_TRANSITION, TextRange.on_line(line_number, 0, len(line)))]


@dataclass(frozen=True, slots=True)
class LineTooLongRule:
    code: str = STYLE_LINE_TOO_LONG.code
    name: str = "styleLineTooLong"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"
    max_length: int = MAX_LINE_LENGTH

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        if len(line) <= self.max_length:
            return []
        return [_diagnostic(STYLE_LINE_TOO_LONG, TextRange.on_line(line_number, self.max_length, len(line)))]


@dataclass(frozen=True, slots=True)
class MixedIndentationRule:
    code: str = STYLE_MIXED_INDENTATION.code
    name: str = "styleMixedIndentation"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    _pattern: re.Pattern[str] = re.compile(r"\s*")

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        leading = self._pattern.match(line)
        indentation = leading.group() if leading is not None else ""
        if "\t" not in indentation or " " not in indentation:
            return []
        return [_diagnostic(STYLE_MIXED_INDENTATION, TextRange.on_line(line_number, 0, len(indentation)))]


@dataclass(frozen=True, slots=True)
class TrailingWhitespaceRule:
    code: str = STYLE_TRAILING_WHITESPACE.code
    name: str = "styleTrailingWhitespace"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    # Python Unicode whitespace: U+FEFF does not count, \x1c-\x1f do.
    _pattern: re.Pattern[str] = re.compile(r"\s+$")

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        if self._pattern.search(line) is None:
            return []
        trimmed_length = len(line.rstrip())
        return [_diagnostic(STYLE_TRAILING_WHITESPACE, TextRange.on_line(line_number, trimmed_length, len(line)))]


def default_lint_rules() -> tuple[LintRule, ...]:
    """Default rules in registration order: syntax, then semantic, then style."""
    return (
        MissingClosingBracketRule(),
        InvalidEventNameRule(),
        MissingSemicolonRule(),
        UndefinedEventRule(),
        SelfTransitionRule(),
        LineTooLongRule(),
        MixedIndentationRule(),
        TrailingWhitespaceRule(),
    )


def validate_lint_rules(rules: tuple[LintRule, ...]) -> None:
    allowed_domains = {"syntax", "semantic", "style"}
    allowed_confidence = {"policy", "heuristic"}
    seen_names: set[str] = set()
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected syntax/semantic/style."
            )
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if _CODE_PATTERN.fullmatch(rule.code) is None:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected lowercase kebab-case."
            )
        if rule.name in seen_names:
            raise ValueError(f"Lint rule `{rule.name}` is registered more than once.")
        seen_names.add(rule.name)


def _diagnostic(spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def _first_occurrence(line: str, line_number: int, needle: str) -> TextRange:
    # The first occurrence may precede the match that produced the needle.
    return TextRange.at(line_number, line.index(needle), len(needle))
