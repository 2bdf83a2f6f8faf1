"""
Source positions for error reporting.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int

    @classmethod
    def from_offset(cls, text: str, offset: int) -> "Position":
        """Convert a character offset into a line/column position."""
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return cls(line, offset - line_start + 1)

    def to_offset(self, text: str) -> int:
        """Convert back into a character offset, clamped to the text."""
        lines = text.split("\n")
        if self.line > len(lines):
            return len(text)
        line_start = sum(len(line) + 1 for line in lines[: self.line - 1])
        column = min(self.column - 1, len(lines[self.line - 1]))
        return line_start + max(column, 0)
