"""
jsoncomb Limits and Exceptions.

This module provides input limits and exception handling.
"""

from .exceptions import ErrorReporter, JsonCombError, ParseError, SecurityError
from .limits import LimitValidator

__all__ = ['JsonCombError', 'ParseError', 'SecurityError', 'ErrorReporter', 'LimitValidator']
