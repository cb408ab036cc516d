"""Diagnostics: error codes, exceptions, snippets and validation results.

Python 3.13+.
"""

from .codes import DiagnosticCode, Severity
from .errors import DepthLimitExceededError, IcuParserError, LexingError, ParsingError
from .snippet import line_and_column, line_bounds, render_snippet
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult

__all__ = [
    "DepthLimitExceededError",
    "DiagnosticCode",
    "ErrorTemplate",
    "IcuParserError",
    "LexingError",
    "ParsingError",
    "Severity",
    "ValidationError",
    "ValidationResult",
    "line_and_column",
    "line_bounds",
    "render_snippet",
]
