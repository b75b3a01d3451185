"""Text positions and ranges."""

from edlpy.text.text import TextPosition, TextRange, split_lines

__all__ = [
    "TextPosition",
    "TextRange",
    "split_lines",
]
