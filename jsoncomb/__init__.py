"""
jsoncomb - JSON values from composable parser combinators.

jsoncomb builds its grammar out of small, pure parsers. Every parser takes the
remaining input and returns either ``Success(value, remaining)`` or
``Failure(message)``; failure is a value to inspect, not an exception to catch.

Key Features:
- Character-level combinators: predicate, span, many, non_empty, literal_char,
  literal_string, map_parser, alternative (also ``parser | other``)
- Grammar rules for null, booleans, unsigned integers and unescaped strings
- Immutable value tree: JsonNull, JsonBoolean, JsonNumber, JsonString,
  JsonArray, JsonObject
- Compact and pretty rendering, and conversion from Python objects
- Positioned ParseError with context and suggestions at the boundary

Quick Start:
    import jsoncomb

    outcome = jsoncomb.parse("123abc", "number")
    # Success(value=JsonNumber(value=123.0), remaining='abc')

    value = jsoncomb.loads('"hello"')      # JsonString(value='hello')
    jsoncomb.loads("[1, 2]")               # raises ParseError

Arrays and objects can be built (or converted with from_python) and rendered,
but the grammar does not parse them.
"""

from .core.combinators import (
    CharParser,
    Parser,
    alternative,
    literal_char,
    literal_string,
    many,
    map_parser,
    non_empty,
    predicate,
    span,
)
from .core.engine import load, loads, parse
from .core.grammar import RULES, json_value
from .core.result import Failure, ParseOutcome, Success
from .model.adapter import from_python
from .model.rendering import to_compact, to_pretty
from .model.values import (
    NULL,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)
from .security.exceptions import JsonCombError, ParseError, SecurityError
from .utils.config import ParseConfig, ParseLimits

__version__ = "0.1.0"
__author__ = "jsoncomb contributors"

__all__ = [
    # Entry points
    "parse", "loads", "load",
    # Combinators
    "Parser", "CharParser", "predicate", "span", "many", "non_empty", "literal_char",
    "literal_string", "map_parser", "alternative",
    # Outcomes
    "Success", "Failure", "ParseOutcome",
    # Grammar
    "json_value", "RULES",
    # Value tree
    "JsonValue", "JsonNull", "JsonBoolean", "JsonNumber", "JsonString",
    "JsonArray", "JsonObject", "NULL",
    # Adapters
    "to_compact", "to_pretty", "from_python",
    # Configuration classes
    "ParseConfig", "ParseLimits",
    # Exception classes
    "JsonCombError", "ParseError", "SecurityError",
]
