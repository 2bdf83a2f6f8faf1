"""
Render value trees back to text.

Two forms: a compact single-line form and an indented "pretty" form using
two-space nesting. Strings are written between double quotes as they are,
without escaping, matching what the grammar accepts.
"""

import math
from decimal import Decimal

from .values import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

INDENT = "  "


def format_number(value: float) -> str:
    """Plain decimal notation with trailing zeros stripped (``123.0`` -> ``123``)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    # repr gives the shortest round-tripping digits for the double
    return format(Decimal(repr(value)).normalize(), "f")


def to_compact(value: JsonValue) -> str:
    """Single-line rendering: ``[e,e]``, ``{"k":v}``."""
    if isinstance(value, JsonNull):
        return "null"
    if isinstance(value, JsonBoolean):
        return "true" if value.value else "false"
    if isinstance(value, JsonNumber):
        return format_number(value.value)
    if isinstance(value, JsonString):
        return f'"{value.value}"'
    if isinstance(value, JsonArray):
        return "[" + ",".join(to_compact(item) for item in value.values) + "]"
    if isinstance(value, JsonObject):
        entries = (
            f"{to_compact(key)}:{to_compact(item)}" for key, item in value.values.items()
        )
        return "{" + ",".join(entries) + "}"
    raise TypeError(f"Cannot render {type(value).__name__}")


def to_pretty(value: JsonValue) -> str:
    """Multi-line rendering; nested lines are indented by two spaces per level."""
    if isinstance(value, JsonArray):
        if not value.values:
            return "[]"
        items = [_indent(to_pretty(item)) for item in value.values]
        return "[\n" + INDENT + f",\n{INDENT}".join(items) + "\n]"

    if isinstance(value, JsonObject):
        if not value.values:
            return "{}"
        entries = [
            _indent(f"{to_compact(key)}: {to_pretty(item)}")
            for key, item in value.values.items()
        ]
        return "{\n" + INDENT + f",\n{INDENT}".join(entries) + "\n}"

    return to_compact(value)


def _indent(text: str) -> str:
    return text.replace("\n", "\n" + INDENT)
