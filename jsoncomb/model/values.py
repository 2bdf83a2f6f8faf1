"""
The value tree produced by the grammar.

A closed set of immutable variants: JsonNull, JsonBoolean, JsonNumber,
JsonString, JsonArray and JsonObject. Consumers dispatch on the concrete
class; there are no other subclasses of JsonValue.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Optional, Union


class JsonValue:
    """Base class of the value-tree variants."""

    __slots__ = ()

    def __str__(self) -> str:
        from .rendering import to_compact  # pylint: disable=import-outside-toplevel

        return to_compact(self)

    def to_pretty_string(self) -> str:
        """Indented multi-line rendering."""
        from .rendering import to_pretty  # pylint: disable=import-outside-toplevel

        return to_pretty(self)


@dataclass(frozen=True)
class JsonNull(JsonValue):
    """The null value. There is exactly one instance, ``NULL``."""

    _instance: ClassVar[Optional["JsonNull"]] = None

    def __new__(cls) -> "JsonNull":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        return "NULL"


@dataclass(frozen=True)
class JsonBoolean(JsonValue):
    value: bool


@dataclass(frozen=True)
class JsonNumber(JsonValue):
    """A double-precision number."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class JsonString(JsonValue):
    value: str


@dataclass(frozen=True)
class JsonArray(JsonValue):
    """An ordered sequence of values, stored as a tuple."""

    values: tuple[JsonValue, ...] = ()

    def __post_init__(self) -> None:
        values = tuple(self.values)
        for item in values:
            if not isinstance(item, JsonValue):
                raise TypeError(f"JsonArray items must be JsonValue, got {type(item).__name__}")
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> JsonValue:
        return self.values[index]


ObjectEntries = Union[
    Mapping[Union[JsonString, str], JsonValue],
    Iterable[tuple[Union[JsonString, str], JsonValue]],
]


@dataclass(frozen=True)
class JsonObject(JsonValue):
    """A mapping from string keys to values.

    Accepts a mapping or an iterable of pairs; ``str`` keys are wrapped in
    JsonString. A repeated key keeps the last value.
    """

    values: ObjectEntries = field(default_factory=dict)

    def __post_init__(self) -> None:
        entries = self.values.items() if isinstance(self.values, Mapping) else self.values

        values: dict[JsonString, JsonValue] = {}
        for key, value in entries:
            if isinstance(key, str):
                key = JsonString(key)
            if not isinstance(key, JsonString):
                raise TypeError(f"JsonObject keys must be strings, got {type(key).__name__}")
            if not isinstance(value, JsonValue):
                raise TypeError(f"JsonObject values must be JsonValue, got {type(value).__name__}")
            values[key] = value

        object.__setattr__(self, "values", MappingProxyType(values))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))  # type: ignore[union-attr]

    def __len__(self) -> int:
        return len(self.values)  # type: ignore[arg-type]

    def __getitem__(self, key: Union[JsonString, str]) -> JsonValue:
        if isinstance(key, str):
            key = JsonString(key)
        return self.values[key]  # type: ignore[index]

    def get(self, key: Union[JsonString, str], default: Any = None) -> Any:
        """Value for ``key``, or ``default`` when absent."""
        try:
            return self[key]
        except KeyError:
            return default


NULL = JsonNull()
