"""
Entry points for jsoncomb - run a grammar rule over text.

``parse`` returns the raw outcome, remainder included, and leaves every
decision to the caller. ``loads`` and ``load`` force the outcome into a value
and raise ParseError when it is a failure or when input is left over.
"""

import logging
import re
from typing import Any, Optional, TextIO, Union

from ..model.values import JsonString
from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine, ParseError
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from ..utils.position import Position
from .combinators import Parser
from .grammar import RULES, ws
from .result import Failure, ParseOutcome, Success

logger = logging.getLogger(__name__)

RuleLike = Union[Parser, str]

_WORD = re.compile(r"[A-Za-z_]+")


def resolve_rule(rule: RuleLike) -> Parser:
    """Return ``rule`` itself, or the grammar rule registered under that name."""
    if isinstance(rule, Parser):
        return rule
    try:
        return RULES[rule]
    except KeyError:
        raise ValueError(
            f"Unknown grammar rule {rule!r}, expected one of: {', '.join(RULES)}"
        ) from None


def parse(
    text: str, rule: RuleLike = "value", config: Optional[ParseConfig] = None
) -> ParseOutcome[Any]:
    """
    Run a grammar rule over ``text``.

    Args:
        text: The input string
        rule: A Parser, or the name of a rule in ``RULES`` (default "value")
        config: Optional ParseConfig; only its limits apply here

    Returns:
        Success with the value and the unconsumed remainder, or Failure

    Raises:
        SecurityError: If the input exceeds the configured size limit
        ValueError: If ``rule`` names no known rule
    """
    config = config or ParseConfig()
    parser = resolve_rule(rule)
    assert config.limits is not None
    LimitValidator(config.limits).validate_input_size(text)
    return _run(parser, text)


def loads(
    s: Union[str, bytes, bytearray],
    rule: RuleLike = "value",
    *,
    config: Optional[ParseConfig] = None,
    strict: bool = False,
) -> Any:
    """
    Parse a complete document and return its value.

    Args:
        s: Text to parse (str, or UTF-8 bytes/bytearray)
        rule: A Parser, or the name of a rule in ``RULES`` (default "value")
        config: ParseConfig controlling whitespace, trailing input, limits
            and error detail
        strict: When no config is given, use ``ParseConfig.strict()``
            instead of the default configuration

    Returns:
        The parsed value, usually a JsonValue

    Raises:
        ParseError: If the rule fails or unconsumed input remains
        SecurityError: If a configured limit is exceeded
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")

    if config is None:
        config = ParseConfig.strict() if strict else ParseConfig()

    parser = resolve_rule(rule)
    assert config.limits is not None
    validator = LimitValidator(config.limits)
    validator.validate_input_size(s)

    body = _skip_whitespace(s) if config.skip_whitespace else s
    outcome = _run(parser, body)

    if isinstance(outcome, Failure):
        raise _failure_to_error(s, outcome.message, outcome.offset_in(s), config)

    remaining = outcome.remaining
    if config.skip_whitespace:
        remaining = _skip_whitespace(remaining)

    if remaining and not config.allow_trailing:
        logger.debug(f"Rejecting {len(remaining)} characters of trailing input")
        raise _failure_to_error(
            s, "unexpected trailing input", len(s) - len(remaining), config
        )

    start = len(s) - len(body)
    position = Position.from_offset(s, start) if config.include_position else None
    _validate_value(outcome.value, validator, position)
    return outcome.value


def load(
    fp: TextIO,
    rule: RuleLike = "value",
    *,
    config: Optional[ParseConfig] = None,
    strict: bool = False,
) -> Any:
    """
    Parse a document read from a file-like object.

    Same as loads() but reads the whole of ``fp`` first.
    """
    return loads(fp.read(), rule, config=config, strict=strict)


def _run(parser: Parser, text: str) -> ParseOutcome[Any]:
    outcome = parser(text)
    if isinstance(outcome, Failure):
        logger.debug(f"Rule {parser.description!r} failed: {outcome.message}")
    return outcome


def _skip_whitespace(text: str) -> str:
    outcome = ws(text)
    return outcome.remaining if isinstance(outcome, Success) else text


def _validate_value(
    value: Any, validator: LimitValidator, position: Optional[Position]
) -> None:
    if isinstance(value, JsonString):
        value = value.value
    if isinstance(value, str):
        validator.validate_string_length(value, position)


def _failure_to_error(
    text: str, message: str, offset: Optional[int], config: ParseConfig
) -> ParseError:
    if offset is None or not config.include_position:
        return ParseError(message)

    reporter = ErrorReporter(text, config.max_error_context)
    position = reporter.position_at(offset)
    suggestions = _suggestions_at(text, offset)

    if config.include_context:
        return reporter.create_parse_error(message, position, suggestions)
    return ParseError(message, position, suggestions=suggestions)


def _suggestions_at(text: str, offset: int) -> list[str]:
    word = _WORD.match(text, offset)
    if word:
        suggestions = ErrorSuggestionEngine.suggest_for_invalid_value(word.group())
        if suggestions:
            return suggestions
    return ErrorSuggestionEngine.suggest_for_unexpected_token(text[offset:offset + 1])
