"""Validation of parsed messages and style patterns.

Python 3.13+.
"""

from .patterns import DateTimePatternValidator, NumberPatternValidator
from .semantic import SemanticValidator, is_empty_message, validate

__all__ = [
    "DateTimePatternValidator",
    "NumberPatternValidator",
    "SemanticValidator",
    "is_empty_message",
    "validate",
]
