"""
JSON grammar rules built from the generic combinators.

Each rule is a module-level Parser. The value rule recognises null, booleans,
unsigned integer digit runs and unescaped strings. Arrays and objects exist in
the value model but no rule here produces them; input starting with ``[`` or
``{`` is a parse failure.
"""

from ..model.values import NULL, JsonBoolean, JsonNumber, JsonString, JsonValue
from .combinators import (
    CharParser,
    Parser,
    literal_char,
    literal_string,
    non_empty,
    predicate,
    span,
)
from .result import Failure, ParseOutcome, Success


def is_digit(char: str) -> bool:
    """Decimal digit (Unicode category Nd); ``float`` accepts all of them."""
    return char.isdecimal()


def is_whitespace(char: str) -> bool:
    return char.isspace()


json_null: Parser[JsonValue] = literal_string("null").map(lambda _: NULL)

json_true: Parser[JsonValue] = literal_string("true").map(lambda _: JsonBoolean(True))

json_false: Parser[JsonValue] = literal_string("false").map(lambda _: JsonBoolean(False))

json_boolean: Parser[JsonValue] = json_true | json_false

# Unsigned integer digit runs only: no sign, fraction or exponent.
json_number: Parser[JsonValue] = non_empty(span("a number", is_digit)).map(
    lambda digits: JsonNumber(float(digits))
)

# No escape decoding: a backslash ends the string body.
normal_char: CharParser = predicate(
    "a string character", lambda char: char not in ('\\', '"')
)

_quote = literal_char('"')


def _parse_string_literal(text: str) -> ParseOutcome[str]:
    opened = _quote(text)
    if isinstance(opened, Failure):
        return opened

    end = normal_char.end_of_run(text, 1)
    closed = _quote(text[end:])
    if isinstance(closed, Failure):
        return closed

    return Success(text[1:end], closed.remaining)


string_literal: Parser[str] = Parser(_parse_string_literal, "a string")

json_string: Parser[JsonValue] = string_literal.map(JsonString)

ws: Parser[str] = span("whitespace", is_whitespace)

json_value: Parser[JsonValue] = json_null | json_boolean | json_number | json_string

RULES: dict[str, Parser] = {
    "null": json_null,
    "boolean": json_boolean,
    "number": json_number,
    "string": json_string,
    "whitespace": ws,
    "value": json_value,
}
