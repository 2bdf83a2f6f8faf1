"""
jsoncomb Core Parsing Engine.

This module provides the combinators, the JSON grammar built on them and the
entry points that run it.
"""

from .combinators import (
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
from .engine import load, loads, parse, resolve_rule
from .grammar import (
    RULES,
    json_boolean,
    json_false,
    json_null,
    json_number,
    json_string,
    json_true,
    json_value,
    normal_char,
    string_literal,
    ws,
)
from .result import Failure, ParseOutcome, Success

__all__ = [
    'Parser', 'CharParser', 'predicate', 'span', 'many', 'non_empty', 'literal_char',
    'literal_string', 'map_parser', 'alternative',
    'Success', 'Failure', 'ParseOutcome',
    'json_null', 'json_true', 'json_false', 'json_boolean', 'json_number',
    'normal_char', 'string_literal', 'json_string', 'ws', 'json_value', 'RULES',
    'parse', 'loads', 'load', 'resolve_rule'
]
