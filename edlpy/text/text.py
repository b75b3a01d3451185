from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """Zero-based (line, character) position in a document."""

    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError("TextPosition cannot be negative")

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.character})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in a document, in line/character coordinates.

    Invariant:
    - start <= end
    """

    start: TextPosition
    end: TextPosition

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def on_line(line: int, start: int, end: int) -> "TextRange":
        """Create a TextRange covering characters [start, end) of a single line."""
        return TextRange(TextPosition(line, start), TextPosition(line, end))

    @staticmethod
    def at(line: int, offset: int, length: int) -> "TextRange":
        # offset...offset+length
        """Create a TextRange on one line at offset with given length."""
        return TextRange.on_line(line, offset, offset + length)

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get the range as (start_line, start_character, end_line, end_character)."""
        return (self.start.line, self.start.character, self.end.line, self.end.character)

    def contains_inclusive(self, position: TextPosition) -> bool:
        """Check if the range contains the given position, inclusive of end."""
        return self.start <= position <= self.end

    def __repr__(self) -> str:
        return f"TextRange({self.start.line}:{self.start.character}, {self.end.line}:{self.end.character})"


def split_lines(source: str) -> list[str]:
    """Split source text into lines on `\\n` only.

    A `\\r` before the newline stays part of the line.
    """
    return source.split("\n")
