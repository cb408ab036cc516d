"""Tests for the diagnostics package: snippets, exceptions and results."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icuparser.diagnostics import (
    DepthLimitExceededError,
    DiagnosticCode,
    ErrorTemplate,
    IcuParserError,
    LexingError,
    ParsingError,
    Severity,
    ValidationError,
    ValidationResult,
    line_and_column,
    line_bounds,
    render_snippet,
)

LONG_LINE = "".join(chr(ord("a") + i % 26) for i in range(200))


def finding(
    position: int,
    code: DiagnosticCode = DiagnosticCode.MISSING_OTHER,
    severity: Severity = Severity.ERROR,
    source: str = "0123456789",
) -> ValidationError:
    return ValidationError(f"finding at {position}", position, source, code, severity)


# ============================================================================
# Snippets
# ============================================================================


class TestRenderSnippet:
    """Line excerpt with caret."""

    def test_single_line(self) -> None:
        assert render_snippet("Hello {name", 11) == "Line 1: Hello {name\n" + " " * 19 + "^"

    def test_multiline_selects_containing_line(self) -> None:
        assert render_snippet("ab\ncd\nef", 4) == "Line 2: cd\n" + " " * 9 + "^"

    def test_crlf_line_endings(self) -> None:
        source = "ab\r\ncd"
        assert render_snippet(source, 1) == "Line 1: ab\n" + " " * 9 + "^"
        assert render_snippet(source, 5) == "Line 2: cd\n" + " " * 9 + "^"

    def test_position_is_clamped(self) -> None:
        assert render_snippet("abc", 100) == "Line 1: abc\n" + " " * 11 + "^"
        assert render_snippet("abc", -5) == "Line 1: abc\n" + " " * 8 + "^"

    def test_empty_source(self) -> None:
        assert render_snippet("", 0) == "Line 1: \n" + " " * 8 + "^"

    def test_long_line_is_windowed_around_caret(self) -> None:
        first, second = render_snippet(LONG_LINE, 100).split("\n")
        assert first == "Line 1: ..." + LONG_LINE[60:140] + "..."
        assert second == " " * (8 + 3 + 40) + "^"

    def test_long_line_near_start_has_no_leading_marker(self) -> None:
        first, second = render_snippet(LONG_LINE, 5).split("\n")
        assert first == "Line 1: " + LONG_LINE[:80] + "..."
        assert second == " " * (8 + 5) + "^"

    def test_long_line_near_end_has_no_trailing_marker(self) -> None:
        first, second = render_snippet(LONG_LINE, 195).split("\n")
        assert first == "Line 1: ..." + LONG_LINE[120:]
        assert second == " " * (8 + 3 + 75) + "^"

    def test_custom_width(self) -> None:
        first, _ = render_snippet("x" * 30, 0, max_width=10).split("\n")
        assert first == "Line 1: " + "x" * 10 + "..."

    @given(st.text(max_size=300), st.integers(min_value=-10, max_value=400))
    def test_caret_points_at_excerpt(self, source: str, position: int) -> None:
        first, second = render_snippet(source, position).split("\n")[-2:]
        assert second.strip() == "^"
        assert len(second) - 1 <= len(first)


class TestLinePositions:
    """line_and_column() and line_bounds()."""

    @pytest.mark.parametrize(
        ("source", "position", "expected"),
        [
            ("abc", 0, (1, 1)),
            ("a\nbc", 3, (2, 2)),
            ("a\nbc", 2, (2, 1)),
            ("ab", 10, (1, 3)),
            ("a\r\nb", 3, (2, 1)),
        ],
    )
    def test_line_and_column(self, source: str, position: int, expected: tuple[int, int]) -> None:
        assert line_and_column(source, position) == expected

    def test_line_bounds_exclude_line_break(self) -> None:
        assert line_bounds("ab\r\ncd\n", 0) == (0, 2)
        assert line_bounds("ab\r\ncd\n", 5) == (4, 6)


# ============================================================================
# Exceptions
# ============================================================================


class TestExceptions:
    """IcuParserError hierarchy."""

    def test_hierarchy(self) -> None:
        for cls in (LexingError, ParsingError, DepthLimitExceededError):
            assert issubclass(cls, IcuParserError)
        assert issubclass(IcuParserError, Exception)

    def test_codes_per_class(self) -> None:
        assert LexingError.code is DiagnosticCode.LEXER_ERROR
        assert ParsingError.code is DiagnosticCode.PARSER_ERROR
        assert DepthLimitExceededError.code is DiagnosticCode.DEPTH_EXCEEDED

    def test_positioned_error(self) -> None:
        error = ParsingError('Expected "}" to close argument.', 5, "{name")
        assert str(error) == 'Expected "}" to close argument.'
        assert error.offset == 5
        assert error.snippet == "Line 1: {name\n" + " " * 13 + "^"
        assert error.format_error() == (
            'error[parser.error]: Expected "}" to close argument.\n' + error.snippet
        )

    def test_error_without_position(self) -> None:
        error = DepthLimitExceededError(ErrorTemplate.depth_exceeded(7))
        assert error.snippet == ""
        assert error.position is None
        assert error.format_error() == (
            "error[visitor.depth_exceeded]: Maximum traversal depth of 7 exceeded."
        )

    def test_to_dict(self) -> None:
        error = LexingError("Unterminated quoted literal.", 1, "a'{")
        assert error.to_dict() == {
            "message": "Unterminated quoted literal.",
            "position": 1,
            "snippet": "Line 1: a'{\n" + " " * 9 + "^",
            "code": "lexer.error",
        }

    def test_catchable_as_base(self) -> None:
        with pytest.raises(IcuParserError):
            raise LexingError("x")


# ============================================================================
# Validation results
# ============================================================================


class TestValidationError:
    """Individual findings."""

    def test_snippet_is_computed_from_source(self) -> None:
        assert finding(3).snippet == "Line 1: 0123456789\n" + " " * 11 + "^"

    def test_rebase_shifts_into_enclosing_source(self) -> None:
        inner = ValidationError("m", 2, "0.0.0", DiagnosticCode.MULTIPLE_DECIMALS)
        outer = inner.rebase(10, "{n, number, 0.0.0}")
        assert outer.position == 12
        assert outer.source == "{n, number, 0.0.0}"
        assert outer.code is DiagnosticCode.MULTIPLE_DECIMALS
        assert inner.position == 2

    def test_default_severity(self) -> None:
        assert ValidationError("m", 0, "", DiagnosticCode.EMPTY_OPTION).severity is Severity.ERROR

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            finding(0).position = 3  # type: ignore[misc]


class TestValidationResult:
    """Aggregated findings."""

    def test_empty_result(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_errors
        assert not result.has_warnings
        assert len(result) == 0
        assert not result
        assert result.to_dict() == {"errors": [], "warnings": []}

    def test_from_findings_splits_by_severity(self) -> None:
        warning = finding(1, DiagnosticCode.DAY_YEAR_MONTH_CONFLICT, Severity.WARNING)
        error = finding(2)
        result = ValidationResult.from_findings([warning, error])
        assert result.errors == (error,)
        assert result.warnings == (warning,)
        assert result.is_valid is False
        assert result.codes() == [DiagnosticCode.MISSING_OTHER, DiagnosticCode.DAY_YEAR_MONTH_CONFLICT]

    def test_warnings_only_is_valid(self) -> None:
        result = ValidationResult(warnings=(finding(0, severity=Severity.WARNING),))
        assert result.is_valid
        assert result.has_warnings
        assert result.warning_count == 1

    def test_merge(self) -> None:
        left = ValidationResult(errors=(finding(1),))
        right = ValidationResult(errors=(finding(2),), warnings=(finding(3, severity=Severity.WARNING),))
        merged = left.merge(right)
        assert [e.position for e in merged.errors] == [1, 2]
        assert merged.warning_count == 1
        assert left.error_count == 1

    def test_rebase(self) -> None:
        result = ValidationResult(errors=(finding(1),), warnings=(finding(2, severity=Severity.WARNING),))
        rebased = result.rebase(5, "x" * 20)
        assert [e.position for e in rebased.errors] == [6]
        assert [w.position for w in rebased.warnings] == [7]
        assert rebased.errors[0].source == "x" * 20

    def test_getters_return_lists(self) -> None:
        result = ValidationResult(errors=(finding(1),))
        errors = result.get_errors()
        errors.clear()
        assert result.error_count == 1
        assert result.get_warnings() == []


# ============================================================================
# Codes
# ============================================================================


class TestDiagnosticCodes:
    """Stable string identifiers."""

    def test_codes_are_namespaced(self) -> None:
        for code in DiagnosticCode:
            assert code.value.split(".", 1)[0] in {"lexer", "parser", "visitor", "validator"}

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_str_is_value(self) -> None:
        assert str(DiagnosticCode.MISSING_OTHER) == "validator.missing_other"
        assert str(Severity.WARNING) == "warning"

    def test_templates(self) -> None:
        assert ErrorTemplate.expected_options("plural") == 'Expected options for "plural" argument.'
        assert ErrorTemplate.empty_option("a", None) == 'Empty option message for selector "a".'
        assert ErrorTemplate.nesting_too_deep(50) == "Maximum nesting depth of 50 exceeded."
