"""icuparser exception hierarchy.

Lexing and parsing failures are fatal to the call: they carry the offset of
the problem and a rendered snippet, and no partial AST is returned.

Python 3.13+. Zero external dependencies.
"""

from typing import ClassVar

from .codes import DiagnosticCode
from .snippet import render_snippet

__all__ = [
    "DepthLimitExceededError",
    "IcuParserError",
    "LexingError",
    "ParsingError",
]


class IcuParserError(Exception):
    """Base exception for all icuparser errors.

    Attributes:
        message: Human-readable description (without snippet)
        position: Offset into source (str index), if known
        source: Source text the position refers to
        snippet: Rendered "Line N: ..." excerpt with caret, or ""
    """

    code: ClassVar[DiagnosticCode] = DiagnosticCode.PARSER_ERROR

    def __init__(
        self,
        message: str,
        position: int | None = None,
        source: str | None = None,
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        if position is not None and source is not None:
            self.snippet = render_snippet(source, position)
        else:
            self.snippet = ""
        super().__init__(message)

    @property
    def offset(self) -> int | None:
        """Alias for position."""
        return self.position

    def format_error(self) -> str:
        """Format as multi-line report.

        Example output:
            error[parser.error]: Expected "}" to close argument.
            Line 1: {name
                         ^
        """
        header = f"error[{self.code}]: {self.message}"
        if not self.snippet:
            return header
        return f"{header}\n{self.snippet}"

    def to_dict(self) -> dict[str, object]:
        """Serialize for machine consumers (same keys as validation findings)."""
        return {
            "message": self.message,
            "position": self.position,
            "snippet": self.snippet,
            "code": str(self.code),
        }


class LexingError(IcuParserError):
    """Input could not be tokenized.

    Raised for invalid UTF-8, unterminated quoted literals and oversized input.
    """

    code = DiagnosticCode.LEXER_ERROR


class ParsingError(IcuParserError):
    """Grammar violation.

    Examples:
    - Unexpected or missing token
    - Explicit =N selector outside plural/selectordinal
    - Choice argument without options or with a malformed operator
    """

    code = DiagnosticCode.PARSER_ERROR


class DepthLimitExceededError(IcuParserError):
    """Raised when maximum traversal depth is exceeded.

    Parsed trees always stay below the limit; this indicates a
    programmatically constructed tree that is too deep.
    """

    code = DiagnosticCode.DEPTH_EXCEEDED
