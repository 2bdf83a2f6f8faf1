"""
Exceptions and error reporting for jsoncomb.

Parsers never raise for ordinary failure; these exceptions only appear at the
boundary, when a caller forces a failed outcome or a configured limit is hit.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.position import Position


@dataclass
class ErrorContext:
    """Excerpt of the source text around an error."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class JsonCombError(Exception):
    """Base exception for jsoncomb."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.position is not None:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context is not None:
            parts.append("Context:")
            parts.append(self.context.line_text)
            parts.append(self.context.column_indicator)

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class ParseError(JsonCombError):
    """Raised when a failed parse outcome is forced into a value."""


class SecurityError(JsonCombError):
    """Raised when input or a value tree exceeds a configured limit."""


class ErrorReporter:
    """Builds positioned errors with context for one source text."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def position_at(self, offset: int) -> Position:
        """Line/column position of a character offset in the text."""
        return Position.from_offset(self.text, offset)

    def create_parse_error(
        self,
        message: str,
        position: Position,
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        """Create a ParseError with context around the position."""
        return ParseError(
            message,
            position=position,
            context=self._build_context(position),
            suggestions=suggestions,
        )

    def _build_context(self, position: Position) -> ErrorContext:
        offset = position.to_offset(self.text)
        half = self.max_context // 2

        if 1 <= position.line <= len(self.lines):
            line_text = self.lines[position.line - 1]
        else:
            line_text = ""
        column = max(0, min(position.column - 1, len(line_text)))

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=self.text[max(0, offset - half):offset],
            context_after=self.text[offset:offset + half],
            error_char=self.text[offset] if offset < len(self.text) else "",
            line_text=line_text,
            column_indicator=" " * column + "^",
        )


class ErrorSuggestionEngine:
    """Suggests fixes for input the grammar does not accept."""

    @staticmethod
    def suggest_for_unexpected_token(char: str) -> list[str]:
        """Suggestions for an unexpected character at the failure point."""
        if char == "":
            return ["Input ended before a complete value was read"]
        if char in "[{":
            return [
                "Arrays and objects are not supported by the value grammar",
                "Parse the scalar members individually",
            ]
        if char == "'":
            return ["Use double quotes for strings"]
        if char == '"':
            return [
                "Check for a missing closing quote",
                "Strings may not contain an unescaped quote",
            ]
        if char == "\\":
            return ["Escape sequences inside strings are not supported"]
        if char in "-+.eE":
            return [
                "Only unsigned integer numbers are supported",
                "Remove the sign, decimal point or exponent",
            ]
        if char.isspace():
            return ["Remove whitespace or enable skip_whitespace"]
        return ErrorSuggestionEngine.suggest_for_invalid_value(char)

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggestions for a literal that looks like a misspelled keyword."""
        lowered = value.lower()
        if lowered in ("true", "false") and value != lowered:
            return [f"Use lowercase '{lowered}' for booleans"]
        if lowered in ("none", "nil", "undefined") or (
            lowered == "null" and value != lowered
        ):
            return ["Use lowercase 'null' for null values"]
        return []
