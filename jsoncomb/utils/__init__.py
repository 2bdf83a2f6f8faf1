"""
jsoncomb configuration and shared helpers.
"""

from .config import (
    ErrorReporting,
    ParseConfig,
    ParseLimits,
    ParsingBehavior,
    SizeLimits,
    StructureLimits,
)
from .position import Position

__all__ = [
    'ErrorReporting', 'ParseConfig', 'ParseLimits', 'ParsingBehavior',
    'SizeLimits', 'StructureLimits', 'Position'
]
