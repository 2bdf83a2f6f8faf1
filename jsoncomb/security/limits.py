"""
Limit validation for jsoncomb.

The entry points check input size and string length against ParseLimits; the
object adapter tracks how deep the value tree it builds has become.
"""

from typing import Optional

from ..utils.config import ParseLimits
from ..utils.position import Position
from .exceptions import SecurityError


class LimitValidator:
    """Checks sizes and nesting depth against one set of ParseLimits."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.nesting_depth = 0

    def validate_input_size(self, text: str) -> None:
        """Reject input longer than ``max_input_size`` characters."""
        _check("Input size", len(text), self.limits.max_input_size)

    def validate_string_length(
        self, string: str, position: Optional[Position] = None
    ) -> None:
        """Reject a string value longer than ``max_string_length``.

        ``position`` is where the string starts in the source, when known.
        """
        _check("String length", len(string), self.limits.max_string_length, position)

    def enter_structure(self) -> None:
        """Descend one level into an array or object."""
        self.nesting_depth += 1
        _check("Nesting depth", self.nesting_depth, self.limits.max_nesting_depth)

    def exit_structure(self) -> None:
        if self.nesting_depth > 0:
            self.nesting_depth -= 1


def _check(
    what: str, actual: int, limit: int, position: Optional[Position] = None
) -> None:
    if actual > limit:
        raise SecurityError(f"{what} {actual} exceeds limit {limit}", position)
