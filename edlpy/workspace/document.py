"""Documents and workspace events."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from edlpy.text import split_lines

EDL_LANGUAGE_ID: Final[str] = "edl"


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Snapshot of an open document. The linter only reads it."""

    uri: str
    text: str
    language_id: str = EDL_LANGUAGE_ID
    version: int = 0

    @property
    def is_edl(self) -> bool:
        return self.language_id == EDL_LANGUAGE_ID

    @property
    def line_count(self) -> int:
        return len(split_lines(self.text))

    def line_at(self, line: int) -> str:
        lines = split_lines(self.text)
        if line < 0 or line >= len(lines):
            raise ValueError(f"Line {line} is outside document `{self.uri}` ({len(lines)} lines)")
        return lines[line]

    def with_text(self, text: str) -> TextDocument:
        return replace(self, text=text, version=self.version + 1)


@dataclass(frozen=True, slots=True)
class DocumentChangeEvent:
    document: TextDocument
    previous_version: int


@dataclass(frozen=True, slots=True)
class ConfigurationChangeEvent:
    """Carries the dotted keys that changed, e.g. `edl.linting.enabled`."""

    changed_keys: frozenset[str]

    def affects_configuration(self, section: str) -> bool:
        prefix = f"{section}."
        return any(key == section or key.startswith(prefix) for key in self.changed_keys)
