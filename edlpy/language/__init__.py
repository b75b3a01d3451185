"""Completion and hover lookups."""

from edlpy.language.completion import CompletionItem, CompletionItemKind, provide_completions
from edlpy.language.hover import Hover, provide_hover, word_range_at

__all__ = [
    "CompletionItem",
    "CompletionItemKind",
    "Hover",
    "provide_completions",
    "provide_hover",
    "word_range_at",
]
