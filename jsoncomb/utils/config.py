"""
Configuration and limits for jsoncomb parsing.

This module defines input limits and the options that control how the
entry points treat whitespace, trailing input and error reporting.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024


@dataclass
class StructureLimits:
    """Value tree complexity limits."""
    max_nesting_depth: int = 100


@dataclass
class ParseLimits:
    """Limits applied to parser input and to adapted value trees."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __post_init__(self) -> None:
        if self.size_limits is None:
            self.size_limits = SizeLimits()
        if self.structure_limits is None:
            self.structure_limits = StructureLimits()

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.size_limits.max_string_length <= 0:
            raise ValueError("max_string_length must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for arrays and objects."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth


@dataclass
class ParsingBehavior:
    """How the entry points treat input around the parsed value."""
    skip_whitespace: bool = True
    allow_trailing: bool = False


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_position: bool = True
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for jsoncomb parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None

    def __post_init__(self) -> None:
        if self.limits is None:
            self.limits = ParseLimits()
        if self.behavior is None:
            self.behavior = ParsingBehavior()
        if self.error_reporting is None:
            self.error_reporting = ErrorReporting()

    @classmethod
    def strict(cls) -> "ParseConfig":
        """Exact input only: no whitespace skipping, no trailing input."""
        return cls(
            behavior=ParsingBehavior(skip_whitespace=False, allow_trailing=False)
        )

    @classmethod
    def lenient(cls) -> "ParseConfig":
        """Skip surrounding whitespace and ignore whatever follows the value."""
        return cls(
            behavior=ParsingBehavior(skip_whitespace=True, allow_trailing=True)
        )

    @property
    def skip_whitespace(self) -> bool:
        """Whether whitespace around the value is consumed."""
        assert self.behavior is not None
        return self.behavior.skip_whitespace

    @skip_whitespace.setter
    def skip_whitespace(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.skip_whitespace = value

    @property
    def allow_trailing(self) -> bool:
        """Whether unconsumed input after the value is accepted."""
        assert self.behavior is not None
        return self.behavior.allow_trailing

    @allow_trailing.setter
    def allow_trailing(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.allow_trailing = value

    @property
    def include_position(self) -> bool:
        """Whether to include position information in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_position

    @include_position.setter
    def include_position(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_position = value

    @property
    def include_context(self) -> bool:
        """Whether to include context information in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value
