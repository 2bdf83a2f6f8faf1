"""
Generic parser combinators.

A parser is a pure function from the remaining input to a ParseOutcome. The
functions here build parsers from single-character predicates upward; none of
them knows anything about JSON. All of them are total: ordinary failure is
returned as a ``Failure``, never raised.
"""

from typing import Callable, Generic, TypeVar

from .result import Failure, ParseOutcome, Success

T = TypeVar("T")
U = TypeVar("U")


class Parser(Generic[T]):
    """A first-class, stateless parser."""

    def __init__(
        self, run: Callable[[str], ParseOutcome[T]], description: str = "parser"
    ) -> None:
        self._run = run
        self.description = description

    def __call__(self, text: str) -> ParseOutcome[T]:
        return self._run(text)

    def parse(self, text: str) -> ParseOutcome[T]:
        """Apply the parser to ``text``."""
        return self._run(text)

    def map(self, mapper: Callable[[T], U]) -> "Parser[U]":
        """Transform the value of a successful parse."""
        return map_parser(self, mapper)

    def or_else(self, other: "Parser[T]") -> "Parser[T]":
        """Try ``other`` on the same input when this parser fails."""
        return alternative(self, other)

    def __or__(self, other: "Parser[T]") -> "Parser[T]":
        return alternative(self, other)

    def __repr__(self) -> str:
        return f"Parser({self.description!r})"


class CharParser(Parser[str]):
    """A parser for exactly one character that satisfies ``test``."""

    def __init__(self, description: str, test: Callable[[str], bool]) -> None:
        super().__init__(self._step, description)
        self.test = test

    def _step(self, text: str) -> ParseOutcome[str]:
        if not text:
            return Failure(
                f"expected {self.description}, reached end of string", text
            )

        char = text[0]
        if self.test(char):
            return Success(char, text[1:])

        return Failure(f"expected {self.description}, but found '{char}'", text)

    def end_of_run(self, text: str, start: int = 0) -> int:
        """Index just past the longest run of matching characters from ``start``."""
        end = start
        while end < len(text) and self.test(text[end]):
            end += 1
        return end


def predicate(description: str, test: Callable[[str], bool]) -> CharParser:
    """Consume exactly one character when ``test`` holds for it.

    This is the only combinator that looks at raw characters.
    """
    return CharParser(description, test)


def many(parser: CharParser) -> Parser[str]:
    """Greedy repetition of a single-character parser.

    Always succeeds; the matched prefix may be empty. The remainder is sliced
    once, after the whole run has been scanned.
    """

    def run(text: str) -> ParseOutcome[str]:
        end = parser.end_of_run(text)
        return Success(text[:end], text[end:])

    return Parser(run, parser.description)


def span(description: str, test: Callable[[str], bool]) -> Parser[str]:
    """Consume the longest prefix whose characters all satisfy ``test``."""
    return many(predicate(description, test))


def non_empty(parser: Parser[str]) -> Parser[str]:
    """Reject a successful parse that matched the empty string."""

    def run(text: str) -> ParseOutcome[str]:
        outcome = parser(text)
        if isinstance(outcome, Success) and outcome.value == "":
            return Failure("parsed value is empty", text)
        return outcome

    return Parser(run, f"non-empty {parser.description}")


def literal_char(expected: str) -> Parser[str]:
    """Match exactly the character ``expected``."""
    if len(expected) != 1:
        raise ValueError(f"literal_char expects a single character, got {expected!r}")
    return predicate(f"'{expected}'", lambda char: char == expected)


def literal_string(expected: str) -> Parser[str]:
    """Match ``expected`` character by character (case-sensitive).

    A mismatch anywhere fails the whole literal; the failure points at the
    start of the literal, not at the partially matched prefix.
    """
    matchers = [literal_char(char) for char in expected]

    def run(text: str) -> ParseOutcome[str]:
        matched = []
        remaining = text

        for matcher in matchers:
            outcome = matcher(remaining)
            if isinstance(outcome, Failure):
                return Failure(
                    f'expected "{expected}", found "{"".join(matched)}"', text
                )
            matched.append(outcome.value)
            remaining = outcome.remaining

        return Success(expected, remaining)

    return Parser(run, f'"{expected}"')


def map_parser(parser: Parser[T], mapper: Callable[[T], U]) -> Parser[U]:
    """Apply ``mapper`` to the value of a successful parse."""

    def run(text: str) -> ParseOutcome[U]:
        return parser(text).map(mapper)

    return Parser(run, parser.description)


def alternative(first: Parser[T], second: Parser[T]) -> Parser[T]:
    """First-match alternation.

    ``second`` runs only when ``first`` fails, and always against the original
    input. When both fail, only the failure of ``second`` is reported.
    """

    def run(text: str) -> ParseOutcome[T]:
        return first(text).or_else(lambda: second(text))

    return Parser(run, f"{first.description} or {second.description}")
