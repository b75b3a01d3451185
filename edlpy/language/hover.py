"""Hover documentation for EDL documents."""

from __future__ import annotations

from dataclasses import dataclass
import re

from edlpy.language.vocabulary import HOVER_DOCS
from edlpy.text import TextPosition, TextRange
from edlpy.workspace.document import TextDocument

_WORD_PATTERN = re.compile(r"->|=>|<-|\|>|[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class Hover:
    contents: str
    range: TextRange


def word_range_at(line: str, position: TextPosition) -> TextRange | None:
    """Range of the identifier or flow operator touching `position`, if any."""
    for match in _WORD_PATTERN.finditer(line):
        candidate = TextRange.on_line(position.line, match.start(), match.end())
        if candidate.contains_inclusive(position):
            return candidate
        if match.start() > position.character:
            break
    return None


def provide_hover(document: TextDocument, position: TextPosition) -> Hover | None:
    if position.line >= document.line_count:
        return None
    line = document.line_at(position.line)
    word_range = word_range_at(line, position)
    if word_range is None:
        return None
    word = line[word_range.start.character : word_range.end.character]
    contents = HOVER_DOCS.get(word)
    if contents is None:
        return None
    return Hover(contents=contents, range=word_range)
