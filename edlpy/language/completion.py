"""Completion items for EDL documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from edlpy.language.vocabulary import (
    BUILTIN_FUNCTIONS,
    DEFAULT_FUNCTION_DOC,
    DEFAULT_KEYWORD_DOC,
    DEFAULT_TYPE_DOC,
    FUNCTION_DOCS,
    KEYWORD_DOCS,
    KEYWORDS,
    TYPE_DOCS,
    TYPES,
)
from edlpy.settings import EdlSettings
from edlpy.text import TextPosition
from edlpy.workspace.document import TextDocument

CompletionItemKind: TypeAlias = Literal["keyword", "function", "type", "snippet"]


@dataclass(frozen=True, slots=True)
class CompletionItem:
    label: str
    kind: CompletionItemKind
    detail: str
    documentation: str | None = None
    insert_text: str | None = None
    is_snippet: bool = False


def provide_completions(
    document: TextDocument,
    position: TextPosition,
    settings: EdlSettings | None = None,
) -> list[CompletionItem]:
    """Static keyword/function/type items plus snippets keyed off the text before the cursor."""
    resolved_settings = settings if settings is not None else EdlSettings()
    if not resolved_settings.intellisense_enabled:
        return []

    items: list[CompletionItem] = []
    for keyword in KEYWORDS:
        items.append(
            CompletionItem(
                label=keyword,
                kind="keyword",
                detail="EDL Keyword",
                documentation=KEYWORD_DOCS.get(keyword, DEFAULT_KEYWORD_DOC),
            )
        )
    for function in BUILTIN_FUNCTIONS:
        items.append(
            CompletionItem(
                label=function,
                kind="function",
                detail="EDL Built-in Function",
                documentation=FUNCTION_DOCS.get(function, DEFAULT_FUNCTION_DOC),
                insert_text=f"{function}($1)",
                is_snippet=True,
            )
        )
    for type_name in TYPES:
        items.append(
            CompletionItem(
                label=type_name,
                kind="type",
                detail="EDL Type",
                documentation=TYPE_DOCS.get(type_name, DEFAULT_TYPE_DOC),
            )
        )

    before_cursor = _text_before(document, position)
    if "event" in before_cursor:
        items.append(
            CompletionItem(
                label="on_trigger",
                kind="snippet",
                detail="Event Handler Template",
                insert_text="on_trigger(${1:condition}) {\n\t$2\n}",
                is_snippet=True,
            )
        )
    if "state" in before_cursor:
        items.append(
            CompletionItem(
                label="transition_to",
                kind="snippet",
                detail="State Transition",
                insert_text="transition_to(${1:target_state})",
                is_snippet=True,
            )
        )
    return items


def _text_before(document: TextDocument, position: TextPosition) -> str:
    if position.line >= document.line_count:
        return ""
    return document.line_at(position.line)[: position.character]
