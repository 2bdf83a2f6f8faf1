"""
Parse outcomes for the combinator engine.

Every parser returns exactly one of two frozen variants: ``Success`` holding the
parsed value and the unconsumed remainder, or ``Failure`` holding a message.
A failure is an ordinary value, not an exception; callers decide whether to
try an alternative, reject it, or raise it at the boundary.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from ..security.exceptions import ParseError
from ..utils.position import Position

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A parsed value and the input left after it."""

    value: T
    remaining: str

    @property
    def is_success(self) -> bool:
        return True

    def map(self, mapper: Callable[[T], U]) -> "Success[U]":
        return Success(mapper(self.value), self.remaining)

    def or_else(self, supplier: Callable[[], "ParseOutcome[Any]"]) -> "Success[T]":
        return self

    def value_or_raise(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A failed parse.

    ``remaining`` is the input that was left when the failure was detected,
    or None when no location is known. Against the text handed to the entry
    point it gives the failure offset.
    """

    message: str
    remaining: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return False

    def map(self, mapper: Callable[[Any], Any]) -> "Failure":
        # Failure carries no value, so it stands in for any payload type.
        return self

    def or_else(self, supplier: Callable[[], "ParseOutcome[T]"]) -> "ParseOutcome[T]":
        return supplier()

    def value_or_raise(self) -> Any:
        raise ParseError(self.message)

    def offset_in(self, text: str) -> Optional[int]:
        """Character offset of the failure within ``text``."""
        if self.remaining is None or not text.endswith(self.remaining):
            return None
        return len(text) - len(self.remaining)

    def position_in(self, text: str) -> Optional[Position]:
        """Line/column position of the failure within ``text``."""
        offset = self.offset_in(text)
        if offset is None:
            return None
        return Position.from_offset(text, offset)


ParseOutcome = Union[Success[T], Failure]
