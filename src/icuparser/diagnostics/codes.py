"""Diagnostic codes and severities.

Codes are stable string identifiers intended for machine consumption by
linters and editor integrations.
Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

__all__ = [
    "DiagnosticCode",
    "Severity",
]


class Severity(StrEnum):
    """Severity of a validation finding."""

    ERROR = "error"
    WARNING = "warning"


class DiagnosticCode(StrEnum):
    """Stable error codes.

    Grouped by producer:
        lexer./parser.: fatal errors raised from tokenize()/parse()
        visitor.: traversal failures on programmatic trees
        validator.: non-fatal findings collected by the validators
    """

    # Fatal
    LEXER_ERROR = "lexer.error"
    PARSER_ERROR = "parser.error"
    DEPTH_EXCEEDED = "visitor.depth_exceeded"

    # Semantic validation
    MISSING_OTHER = "validator.missing_other"
    DUPLICATE_OPTION = "validator.duplicate_option"
    EMPTY_OPTION = "validator.empty_option"
    INVALID_KEYWORD_FOR_LOCALE = "validator.invalid_keyword_for_locale"
    EMPTY_CHOICE_OPTION = "validator.empty_choice_option"
    CHOICE_LIMITS_ORDER = "validator.choice_limits_order"

    # Number pattern validation
    TOO_MANY_SUBPATTERNS = "validator.too_many_subpatterns"
    MULTIPLE_DECIMALS = "validator.multiple_decimals"
    MULTIPLE_EXPONENTS = "validator.multiple_exponents"
    NO_DIGIT_PLACEHOLDER = "validator.no_digit_placeholder"
    UNTERMINATED_QUOTE = "validator.unterminated_quote"

    # Date/time pattern validation
    DAY_YEAR_MONTH_CONFLICT = "validator.day_year_month_conflict"
    WEEK_YEAR_CALENDAR_CONFLICT = "validator.week_year_calendar_conflict"
