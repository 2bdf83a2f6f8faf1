"""
jsoncomb value tree, rendering and Python object adapter.
"""

from .adapter import PythonObjectAdapter, from_python
from .rendering import to_compact, to_pretty
from .values import (
    NULL,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    'JsonValue', 'JsonNull', 'JsonBoolean', 'JsonNumber', 'JsonString',
    'JsonArray', 'JsonObject', 'NULL',
    'to_compact', 'to_pretty',
    'from_python', 'PythonObjectAdapter'
]
