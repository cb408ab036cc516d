"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Tests assert on these methods rather than on copied literals.
    """

    # ------------------------------------------------------------------
    # Lexer
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_utf8() -> str:
        """Input bytes (or surrogates) that do not form valid UTF-8."""
        return "Input string is not valid UTF-8."

    @staticmethod
    def unterminated_quote() -> str:
        """Quoted literal opened but never closed."""
        return "Unterminated quoted literal."

    @staticmethod
    def source_too_large(size: int, limit: int) -> str:
        """Input exceeds the configured maximum size."""
        return f"Input of {size} characters exceeds maximum of {limit}."

    # ------------------------------------------------------------------
    # Parser
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_closing_brace() -> str:
        return 'Unexpected "}".'

    @staticmethod
    def unexpected_trailing_tokens() -> str:
        return "Unexpected trailing tokens."

    @staticmethod
    def expected_argument_name() -> str:
        return "Expected argument name."

    @staticmethod
    def negative_argument_name() -> str:
        return "Argument name cannot be negative."

    @staticmethod
    def expected_comma_after_name() -> str:
        return 'Expected "," after argument name.'

    @staticmethod
    def expected_argument_type() -> str:
        return "Expected argument type."

    @staticmethod
    def expected_options(argument_type: str) -> str:
        """Branching argument closed before any option."""
        return f'Expected options for "{argument_type}" argument.'

    @staticmethod
    def expected_comma_before_style() -> str:
        return 'Expected "," before argument style.'

    @staticmethod
    def expected_closing_brace() -> str:
        return 'Expected "}" to close argument.'

    @staticmethod
    def brace_in_style() -> str:
        return 'Unexpected "{" inside format style.'

    @staticmethod
    def expected_offset_colon() -> str:
        return 'Expected ":" after offset.'

    @staticmethod
    def expected_offset_number() -> str:
        return "Expected numeric offset."

    @staticmethod
    def explicit_selector_not_allowed() -> str:
        return "Explicit selectors are only valid for plural arguments."

    @staticmethod
    def expected_explicit_number() -> str:
        return 'Expected number after "=".'

    @staticmethod
    def expected_selector() -> str:
        return "Expected selector keyword."

    @staticmethod
    def expected_option_open() -> str:
        return 'Expected "{" to start option message.'

    @staticmethod
    def expected_option_close() -> str:
        return 'Expected "}" to close option message.'

    @staticmethod
    def expected_choice_limit() -> str:
        return "Expected numeric limit for choice option."

    @staticmethod
    def expected_choice_operator() -> str:
        return 'Expected "#" or "<" after choice limit.'

    @staticmethod
    def expected_choice_close() -> str:
        return 'Expected "}" to close choice argument.'

    @staticmethod
    def nesting_too_deep(limit: int) -> str:
        """Argument nesting exceeds parser limit."""
        return f"Maximum nesting depth of {limit} exceeded."

    # ------------------------------------------------------------------
    # Visitors
    # ------------------------------------------------------------------

    @staticmethod
    def depth_exceeded(limit: int) -> str:
        """AST traversal exceeded the depth guard."""
        return f"Maximum traversal depth of {limit} exceeded."

    # ------------------------------------------------------------------
    # Semantic validation
    # ------------------------------------------------------------------

    @staticmethod
    def missing_other(kind: str, name: str) -> str:
        return f'Missing required "other" option in {kind} argument "{name}".'

    @staticmethod
    def duplicate_option(selector: str, kind: str, name: str) -> str:
        return f'Duplicate option "{selector}" in {kind} argument "{name}".'

    @staticmethod
    def empty_option(selector: str, context: tuple[str, str] | None) -> str:
        """Option whose message has no visible content.

        Args:
            selector: Selector of the empty option
            context: (kind, name) of the enclosing argument, if known
        """
        where = f' in {context[0]} argument "{context[1]}"' if context else ""
        return f'Empty option message for selector "{selector}"{where}.'

    @staticmethod
    def invalid_keyword_for_locale(selector: str, locale: str, categories: list[str]) -> str:
        allowed = ", ".join(categories)
        return (
            f'Plural keyword "{selector}" is not used by locale "{locale}" '
            f"(expected one of: {allowed})."
        )

    @staticmethod
    def empty_choice_option(limit: str, name: str) -> str:
        return f'Empty message for choice limit {limit} in argument "{name}".'

    @staticmethod
    def choice_limits_order(limit: str, previous: str, name: str) -> str:
        return (
            f'Choice limit {limit} in argument "{name}" must not be less '
            f"than the previous limit {previous}."
        )

    # ------------------------------------------------------------------
    # Pattern validation
    # ------------------------------------------------------------------

    @staticmethod
    def too_many_subpatterns(count: int) -> str:
        return f"Number pattern has {count} sub-patterns; at most 2 are allowed."

    @staticmethod
    def multiple_decimals() -> str:
        return "Number pattern contains more than one decimal separator."

    @staticmethod
    def multiple_exponents() -> str:
        return "Number pattern contains more than one exponent."

    @staticmethod
    def no_digit_placeholder(subpattern: str) -> str:
        return f'Number sub-pattern "{subpattern}" has no digit placeholder (0, # or @).'

    @staticmethod
    def unterminated_pattern_quote() -> str:
        return "Pattern contains an unterminated quoted literal."

    @staticmethod
    def day_year_month_conflict() -> str:
        return 'Date pattern mixes day-of-year "D" with month "M".'

    @staticmethod
    def week_year_calendar_conflict() -> str:
        return 'Date pattern mixes week-based year "Y" with calendar month or day.'
