"""Checks for number and date/time style strings.

These validators look only at the raw style text of a FormattedArgument;
they do not parse ICU skeletons. Positions in their results are offsets
into the pattern string (rebase them onto the message when needed).

Python 3.13+.
"""

from __future__ import annotations

from icuparser.diagnostics import (
    DiagnosticCode,
    ErrorTemplate,
    Severity,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "DATE_SYMBOLS",
    "DateTimePatternValidator",
    "NumberPatternValidator",
]

_DIGIT_PLACEHOLDERS = frozenset("0123456789#@")

# CLDR date field symbols recognized in date/time patterns.
DATE_SYMBOLS: frozenset[str] = frozenset("GyYQqMLwWdDFEecahHkKmsSAzZOXvV")


def _split_unquoted(pattern: str, separator: str) -> list[tuple[int, str]]:
    """Split on separator outside quotes; returns (offset, piece) pairs."""
    pieces: list[tuple[int, str]] = []
    start = 0
    in_quote = False
    for index, char in enumerate(pattern):
        if char == "'":
            in_quote = not in_quote
        elif char == separator and not in_quote:
            pieces.append((start, pattern[start:index]))
            start = index + 1
    pieces.append((start, pattern[start:]))
    return pieces


class NumberPatternValidator:
    """Validate a decimal format pattern such as "#,##0.00;(#,##0.00)".

    Rules:
    - at most two sub-patterns (positive;negative)
    - each sub-pattern has a digit placeholder (0-9, # or @) outside quotes
    - at most one "." and one exponent ("E"/"e") per sub-pattern
    - quotes are closed ('' is an escaped apostrophe)
    """

    def validate(self, pattern: str) -> ValidationResult:
        if not pattern.strip():
            return ValidationResult()

        findings: list[ValidationError] = []
        subpatterns = _split_unquoted(pattern, ";")
        if len(subpatterns) > 2:
            findings.append(
                ValidationError(
                    ErrorTemplate.too_many_subpatterns(len(subpatterns)),
                    subpatterns[2][0] - 1,
                    pattern,
                    DiagnosticCode.TOO_MANY_SUBPATTERNS,
                )
            )
        for offset, subpattern in subpatterns:
            self._check_subpattern(pattern, offset, subpattern, findings)
        return ValidationResult.from_findings(findings)

    @staticmethod
    def _check_subpattern(
        pattern: str, offset: int, subpattern: str, findings: list[ValidationError]
    ) -> None:
        stripped = subpattern.lstrip()
        offset += len(subpattern) - len(stripped)
        stripped = stripped.rstrip()

        def add(message: str, position: int, code: DiagnosticCode) -> None:
            findings.append(ValidationError(message, offset + position, pattern, code))

        has_digit = False
        decimals = 0
        exponents = 0
        quote_start = -1
        index = 0
        while index < len(stripped):
            char = stripped[index]
            if char == "'":
                if index + 1 < len(stripped) and stripped[index + 1] == "'":
                    index += 2
                    continue
                quote_start = -1 if quote_start >= 0 else index
            elif quote_start < 0:
                if char in _DIGIT_PLACEHOLDERS:
                    has_digit = True
                elif char == ".":
                    decimals += 1
                    if decimals == 2:
                        add(ErrorTemplate.multiple_decimals(), index, DiagnosticCode.MULTIPLE_DECIMALS)
                elif char in "Ee":
                    exponents += 1
                    if exponents == 2:
                        add(
                            ErrorTemplate.multiple_exponents(),
                            index,
                            DiagnosticCode.MULTIPLE_EXPONENTS,
                        )
            index += 1

        if quote_start >= 0:
            add(
                ErrorTemplate.unterminated_pattern_quote(),
                quote_start,
                DiagnosticCode.UNTERMINATED_QUOTE,
            )
        if not has_digit:
            add(
                ErrorTemplate.no_digit_placeholder(stripped),
                0,
                DiagnosticCode.NO_DIGIT_PLACEHOLDER,
            )


class DateTimePatternValidator:
    """Warn about calendar-ambiguous date/time patterns.

    - "D" (day of year) together with "M" (month)
    - "Y" (week-based year) together with "M" or "d"

    Both combinations are legal but almost always a typo for "d"/"y".
    An unterminated quote is an error.
    """

    def validate(self, pattern: str) -> ValidationResult:
        findings: list[ValidationError] = []
        first: dict[str, int] = {}
        quote_start = -1
        index = 0
        while index < len(pattern):
            char = pattern[index]
            if char == "'":
                if index + 1 < len(pattern) and pattern[index + 1] == "'":
                    index += 2
                    continue
                quote_start = -1 if quote_start >= 0 else index
            elif quote_start < 0 and char in DATE_SYMBOLS:
                first.setdefault(char, index)
            index += 1

        if quote_start >= 0:
            findings.append(
                ValidationError(
                    ErrorTemplate.unterminated_pattern_quote(),
                    quote_start,
                    pattern,
                    DiagnosticCode.UNTERMINATED_QUOTE,
                )
            )
        if "D" in first and "M" in first:
            findings.append(
                ValidationError(
                    ErrorTemplate.day_year_month_conflict(),
                    first["D"],
                    pattern,
                    DiagnosticCode.DAY_YEAR_MONTH_CONFLICT,
                    Severity.WARNING,
                )
            )
        if "Y" in first and ("M" in first or "d" in first):
            findings.append(
                ValidationError(
                    ErrorTemplate.week_year_calendar_conflict(),
                    first["Y"],
                    pattern,
                    DiagnosticCode.WEEK_YEAR_CALENDAR_CONFLICT,
                    Severity.WARNING,
                )
            )
        return ValidationResult.from_findings(findings)
