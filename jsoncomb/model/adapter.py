"""
Convert Python objects into value trees.

This is a one-way bridge for building a value tree without parsing text.
Scalars map to their variants, enum members to their values, mappings to
objects, sequences and sets to arrays, and any other object to an object of
its fields.
"""

import array
import dataclasses
import enum
import logging
import numbers
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from typing import Any, Callable, Iterator, Optional

from ..security.limits import LimitValidator
from ..utils.config import ParseLimits
from .values import (
    NULL,
    JsonArray,
    JsonBoolean,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

logger = logging.getLogger(__name__)

_ARRAY_TYPES = (list, tuple, range, bytes, bytearray, array.array, Sequence, Set)


class PythonObjectAdapter:
    """Walks a Python object graph and builds the equivalent value tree."""

    def __init__(self, limits: Optional[ParseLimits] = None):
        self.validator = LimitValidator(limits or ParseLimits())
        self._active: set[int] = set()

    def convert(self, obj: Any) -> JsonValue:
        """Convert ``obj`` and everything reachable from it."""
        if obj is None:
            return NULL
        if isinstance(obj, JsonValue):
            return obj
        if isinstance(obj, enum.Enum):
            return self.convert(obj.value)
        # bool before numbers: bool is an int subclass
        if isinstance(obj, bool):
            return JsonBoolean(obj)
        if isinstance(obj, (numbers.Real, Decimal)):
            return JsonNumber(float(obj))
        if isinstance(obj, numbers.Number):
            raise TypeError(f"Cannot represent {type(obj).__name__} as a number")
        if isinstance(obj, str):
            return JsonString(obj)
        if isinstance(obj, Mapping):
            return self._nested(obj, self._convert_mapping)
        if isinstance(obj, _ARRAY_TYPES):
            return self._nested(obj, self._convert_items)
        return self._nested(obj, self._convert_fields)

    def _nested(self, obj: Any, convert: Callable[[Any], JsonValue]) -> JsonValue:
        if id(obj) in self._active:
            raise ValueError(f"Circular reference detected in {type(obj).__name__}")

        self._active.add(id(obj))
        self.validator.enter_structure()
        try:
            return convert(obj)
        finally:
            self.validator.exit_structure()
            self._active.discard(id(obj))

    def _convert_mapping(self, obj: Mapping) -> JsonObject:
        return JsonObject(
            (JsonString(str(key)), self.convert(value)) for key, value in obj.items()
        )

    def _convert_items(self, obj: Any) -> JsonArray:
        return JsonArray(self.convert(item) for item in obj)

    def _convert_fields(self, obj: Any) -> JsonObject:
        logger.debug(f"Adapting {type(obj).__qualname__} by field enumeration")

        values: dict[str, JsonValue] = {}
        for owner, name, value in _iter_fields(obj):
            key = name if name not in values else f"{owner.__qualname__}.{name}"
            values[key] = self.convert(value)
        return JsonObject(values)


def _iter_fields(obj: Any) -> Iterator[tuple[type, str, Any]]:
    """Yield (owning class, name, value) for every field of ``obj``."""
    cls = type(obj)
    if dataclasses.is_dataclass(obj):
        for field in dataclasses.fields(obj):
            yield cls, field.name, getattr(obj, field.name)
        return

    for name, value in getattr(obj, "__dict__", {}).items():
        yield cls, name, value

    for owner in cls.__mro__:
        for name in _slot_names(owner):
            try:
                value = getattr(obj, name)
            except AttributeError:
                continue
            yield owner, name, value


def _slot_names(owner: type) -> list[str]:
    slots = owner.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)

    names = []
    for name in slots:
        if name in ("__dict__", "__weakref__"):
            continue
        if name.startswith("__") and not name.endswith("__"):
            name = f"_{owner.__name__.lstrip('_')}{name}"
        names.append(name)
    return names


def from_python(obj: Any, limits: Optional[ParseLimits] = None) -> JsonValue:
    """Convert a Python object graph into a value tree."""
    return PythonObjectAdapter(limits).convert(obj)
