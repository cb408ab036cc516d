"""Enumerations for icuparser type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "DateTimeStyle",
    "HighlightCategory",
    "NumberStyle",
    "ParameterType",
    "PluralCategory",
    "TokenKind",
]


class TokenKind(StrEnum):
    """Kind of lexical token.

    StrEnum provides automatic string conversion: str(TokenKind.LBRACE) == "lbrace"
    """

    LBRACE = "lbrace"
    """Opening brace: {"""

    RBRACE = "rbrace"
    """Closing brace: }"""

    COMMA = "comma"
    COLON = "colon"

    HASH = "hash"
    """Plural placeholder or inclusive choice operator: #"""

    EQUALS = "equals"
    """Explicit plural selector prefix: =1"""

    PIPE = "pipe"
    """Choice option separator: |"""

    LESS_THAN = "less_than"
    """Exclusive choice operator: 1<"""

    IDENTIFIER = "identifier"
    NUMBER = "number"
    TEXT = "text"
    WHITESPACE = "whitespace"

    EOF = "eof"
    """End of input (zero-length)."""


class ParameterType(StrEnum):
    """Inferred type of a message argument."""

    STRING = "string"
    NUMBER = "number"
    DATETIME = "datetime"

    MIXED = "mixed"
    """Same argument used with conflicting types."""


class HighlightCategory(StrEnum):
    """Lexical category handed to highlight stylers.

    StrEnum provides automatic string conversion: str(HighlightCategory.BRACE) == "brace"
    """

    BRACE = "brace"
    PUNCTUATION = "punctuation"

    ARGUMENT = "argument"
    """Argument name: {name}"""

    TYPE = "type"
    """Format type of a formatted argument: number, date, spellout"""

    KEYWORD = "keyword"
    """Branching type: select, plural, selectordinal, choice, offset"""

    SELECTOR = "selector"
    NUMBER = "number"

    STYLE = "style"
    """Verbatim style string: {n, number, #,##0.00}"""

    TEXT = "text"
    WHITESPACE = "whitespace"


class NumberStyle(StrEnum):
    """Named number styles accepted without pattern validation."""

    DECIMAL = "decimal"
    INTEGER = "integer"
    CURRENCY = "currency"
    PERCENT = "percent"
    SCIENTIFIC = "scientific"
    COMPACT_DECIMAL = "compact-decimal"
    COMPACT_CURRENCY = "compact-currency"
    LONG = "long"
    SHORT = "short"


class DateTimeStyle(StrEnum):
    """Named date and time styles accepted without pattern validation."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    FULL = "full"


class PluralCategory(StrEnum):
    """CLDR plural categories in canonical order."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
