"""
Test cases for exceptions and error reporting.

Tests focus on error context creation, message formatting and suggestions.
"""

import unittest

from jsoncomb.security.exceptions import (
    ErrorContext,
    ErrorReporter,
    ErrorSuggestionEngine,
    JsonCombError,
    ParseError,
    SecurityError,
)
from jsoncomb.utils.position import Position


class TestErrorContext(unittest.TestCase):
    """Test ErrorContext dataclass functionality."""

    def test_error_context_creation(self):
        """Test ErrorContext creation with all fields."""
        position = Position(line=1, column=6)
        context = ErrorContext(
            text="true [1]",
            position=position,
            context_before="true ",
            context_after="[1]",
            error_char="[",
            line_text="true [1]",
            column_indicator="     ^",
        )

        self.assertEqual(context.text, "true [1]")
        self.assertEqual(context.position, position)
        self.assertEqual(context.error_char, "[")
        self.assertEqual(context.column_indicator, "     ^")


class TestJsonCombError(unittest.TestCase):
    """Test base JsonCombError exception class."""

    def test_basic_error_creation(self):
        """Test basic error creation with message only."""
        error = JsonCombError("Test error message")

        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertIsNone(error.context)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Test error message")

    def test_error_with_position(self):
        """Test error creation with position information."""
        error = JsonCombError("Parse error", position=Position(line=3, column=15))
        self.assertIn("Parse error at line 3, column 15", str(error))

    def test_error_with_suggestions(self):
        """Test error creation with suggestions."""
        suggestions = ["Check for missing quotes", "Use lowercase 'null'"]
        error = JsonCombError("Syntax error", suggestions=suggestions)

        error_str = str(error)
        self.assertIn("Suggestions:", error_str)
        self.assertIn("  - Check for missing quotes", error_str)
        self.assertIn("  - Use lowercase 'null'", error_str)

    def test_error_with_context(self):
        """Test error creation with full context."""
        position = Position(line=1, column=3)
        context = ErrorContext(
            text="'a'",
            position=position,
            context_before="",
            context_after="'a'",
            error_char="'",
            line_text="'a'",
            column_indicator="^",
        )
        error = JsonCombError("Bad quote", position=position, context=context)

        self.assertEqual(
            str(error), "Bad quote at line 1, column 3\nContext:\n'a'\n^"
        )

    def test_subclasses(self):
        self.assertIsInstance(ParseError("x"), JsonCombError)
        self.assertIsInstance(SecurityError("x"), JsonCombError)
        self.assertNotIsInstance(ParseError("x"), SecurityError)


class TestErrorReporter(unittest.TestCase):
    """Test ErrorReporter functionality."""

    def setUp(self):
        self.text = 'null\n  [1, 2]'
        self.reporter = ErrorReporter(self.text)

    def test_reporter_creation(self):
        self.assertEqual(self.reporter.text, self.text)
        self.assertEqual(self.reporter.lines, ["null", "  [1, 2]"])

    def test_position_at(self):
        self.assertEqual(self.reporter.position_at(0), Position(1, 1))
        self.assertEqual(self.reporter.position_at(7), Position(2, 3))

    def test_create_parse_error(self):
        position = Position(line=2, column=3)
        error = self.reporter.create_parse_error("Unexpected '['", position, ["hint"])

        self.assertIsInstance(error, ParseError)
        self.assertEqual(error.position, position)
        self.assertEqual(error.suggestions, ["hint"])
        self.assertEqual(error.context.error_char, "[")
        self.assertEqual(error.context.line_text, "  [1, 2]")
        self.assertEqual(error.context.column_indicator, "  ^")
        self.assertEqual(error.context.context_after, "[1, 2]")

    def test_context_window(self):
        reporter = ErrorReporter("abcdefghij", max_context=4)
        error = reporter.create_parse_error("x", Position(1, 6))
        self.assertEqual(error.context.context_before, "de")
        self.assertEqual(error.context.context_after, "fg")

    def test_edge_positions(self):
        """Positions at or beyond the end are handled gracefully."""
        end = self.reporter.create_parse_error("End", Position(2, 9))
        self.assertEqual(end.context.error_char, "")

        beyond = self.reporter.create_parse_error("Beyond", Position(10, 1000))
        self.assertEqual(beyond.context.line_text, "")
        self.assertEqual(beyond.context.column_indicator, "^")


class TestErrorSuggestionEngine(unittest.TestCase):
    """Test ErrorSuggestionEngine functionality."""

    def test_unsupported_containers(self):
        for char in "[{":
            with self.subTest(char=char):
                suggestions = ErrorSuggestionEngine.suggest_for_unexpected_token(char)
                self.assertTrue(any("not supported" in s for s in suggestions))

    def test_number_forms(self):
        for char in "-.":
            with self.subTest(char=char):
                suggestions = ErrorSuggestionEngine.suggest_for_unexpected_token(char)
                self.assertTrue(any("unsigned integer" in s for s in suggestions))

    def test_quotes_and_escapes(self):
        self.assertTrue(any(
            "double quotes" in s
            for s in ErrorSuggestionEngine.suggest_for_unexpected_token("'")
        ))
        self.assertTrue(any(
            "Escape" in s
            for s in ErrorSuggestionEngine.suggest_for_unexpected_token("\\")
        ))

    def test_end_of_input(self):
        self.assertEqual(len(ErrorSuggestionEngine.suggest_for_unexpected_token("")), 1)

    def test_invalid_values(self):
        cases = {
            "True": "Use lowercase 'true' for booleans",
            "FALSE": "Use lowercase 'false' for booleans",
            "None": "Use lowercase 'null' for null values",
            "NULL": "Use lowercase 'null' for null values",
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(
                    ErrorSuggestionEngine.suggest_for_invalid_value(value), [expected]
                )

    def test_no_suggestion(self):
        self.assertEqual(ErrorSuggestionEngine.suggest_for_invalid_value("@"), [])
        self.assertEqual(ErrorSuggestionEngine.suggest_for_invalid_value("true"), [])
        self.assertEqual(ErrorSuggestionEngine.suggest_for_unexpected_token("@"), [])


if __name__ == "__main__":
    unittest.main()
