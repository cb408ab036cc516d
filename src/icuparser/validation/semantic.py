"""Semantic validation for ICU message ASTs.

The parser accepts anything grammatical; this module flags messages that
are well-formed but wrong:

- select/plural/selectordinal without an "other" option
- duplicate selectors
- options whose message is empty or whitespace only
- plural keywords the locale never selects (warning, needs a locale)
- choice limits that decrease, and empty choice messages
- malformed number/date patterns in argument styles

Validation never raises; findings are collected into a ValidationResult.
Only hand it messages that parsed successfully.

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
from icuparser.enums import DateTimeStyle, NumberStyle
from icuparser.runtime.plural_rules import PluralRules, get_categories
from icuparser.syntax.ast import (
    ASTNode,
    Choice,
    FormattedArgument,
    Message,
    Number,
    Option,
    Plural,
    Select,
    SelectOrdinal,
    Text,
)
from icuparser.syntax.serializer import format_number
from icuparser.syntax.visitor import ASTVisitor

from .patterns import DateTimePatternValidator, NumberPatternValidator

__all__ = ["SemanticValidator", "is_empty_message", "validate"]

_NAMED_NUMBER_STYLES: frozenset[str] = frozenset(NumberStyle)
_NAMED_DATETIME_STYLES: frozenset[str] = frozenset(DateTimeStyle)
_SKELETON_PREFIX = "::"


def is_empty_message(message: Message) -> bool:
    """True when message has no parts or only whitespace text.

    A lone # counts as content.
    """
    return all(isinstance(part, Text) and not part.value.strip() for part in message.parts)


class SemanticValidator:
    """Semantic validator for ICU messages.

    Thread-safe validator with no mutable instance state.
    All validation state is local to the validate() call.

    Args:
        locale: Enables plural keyword checks against this locale's categories
        plural_rules: Engine used for keyword checks (default: shared instance)

    Usage:
        validator = SemanticValidator(locale="en")
        result = validator.validate(message, source)
        for error in result.errors:
            print(f"{error.code}: {error.message}")
    """

    __slots__ = ("_date_validator", "_locale", "_number_validator", "_plural_rules")

    def __init__(
        self,
        *,
        locale: str | None = None,
        plural_rules: PluralRules | None = None,
    ) -> None:
        self._locale = locale
        self._plural_rules = plural_rules
        self._number_validator = NumberPatternValidator()
        self._date_validator = DateTimePatternValidator()

    @property
    def locale(self) -> str | None:
        return self._locale

    def validate(self, message: Message, source: str = "") -> ValidationResult:
        """Validate a parsed message.

        Args:
            message: Parsed message
            source: Text the message was parsed from (for positions/snippets)
        """
        visitor = _ValidationVisitor(self, source)
        visitor.visit(message)
        return ValidationResult.from_findings(visitor.findings)

    def plural_categories(self, *, ordinal: bool) -> list[str] | None:
        """Categories of the configured locale, or None without a locale."""
        if self._locale is None:
            return None
        if self._plural_rules is None:
            return get_categories(self._locale, ordinal)
        return self._plural_rules.get_categories(self._locale, ordinal)

    def validate_style(self, argument_format: str, style: str) -> ValidationResult:
        """Run the pattern validator matching a format type on a style string.

        Named styles ("short", "percent") and "::" skeletons are not checked.
        """
        if style.startswith(_SKELETON_PREFIX):
            return ValidationResult()
        match argument_format:
            case "number" if style.lower() not in _NAMED_NUMBER_STYLES:
                return self._number_validator.validate(style)
            case "date" | "time" if style.lower() not in _NAMED_DATETIME_STYLES:
                return self._date_validator.validate(style)
            case _:
                return ValidationResult()


class _ValidationVisitor(ASTVisitor):
    """Per-call traversal state: findings and the enclosing argument stack."""

    def __init__(self, validator: SemanticValidator, source: str) -> None:
        super().__init__()
        self._validator = validator
        self._source = source
        self._context: list[tuple[str, str]] = []
        self.findings: list[ValidationError] = []

    def _add(
        self,
        node: ASTNode,
        message: str,
        code: DiagnosticCode,
        severity: Severity = Severity.ERROR,
    ) -> None:
        position = node.span.start if node.span is not None else 0
        self.findings.append(ValidationError(message, position, self._source, code, severity))

    # ------------------------------------------------------------------
    # Branching arguments
    # ------------------------------------------------------------------

    def visit_Select(self, node: Select) -> None:
        self._check_branching(node)

    def visit_Plural(self, node: Plural) -> None:
        self._check_branching(node)

    def visit_SelectOrdinal(self, node: SelectOrdinal) -> None:
        self._check_branching(node)

    def _check_branching(self, node: Select | Plural | SelectOrdinal) -> None:
        kind = node.keyword
        if not any(option.selector == "other" for option in node.options):
            self._add(
                node,
                ErrorTemplate.missing_other(kind, node.name),
                DiagnosticCode.MISSING_OTHER,
            )

        seen: set[str] = set()
        for option in node.options:
            if option.selector in seen:
                self._add(
                    option,
                    ErrorTemplate.duplicate_option(option.selector, kind, node.name),
                    DiagnosticCode.DUPLICATE_OPTION,
                )
            seen.add(option.selector)

        if not isinstance(node, Select):
            self._check_keywords(node)

        self._context.append((kind, node.name))
        self.generic_visit(node)
        self._context.pop()

    def _check_keywords(self, node: Plural | SelectOrdinal) -> None:
        categories = self._validator.plural_categories(ordinal=isinstance(node, SelectOrdinal))
        if categories is None:
            return
        locale = self._validator.locale or ""
        for option in node.options:
            if not option.explicit and option.selector not in categories:
                self._add(
                    option,
                    ErrorTemplate.invalid_keyword_for_locale(option.selector, locale, categories),
                    DiagnosticCode.INVALID_KEYWORD_FOR_LOCALE,
                    Severity.WARNING,
                )

    def visit_Option(self, node: Option) -> None:
        if is_empty_message(node.message):
            context = self._context[-1] if self._context else None
            self._add(
                node,
                ErrorTemplate.empty_option(node.selector, context),
                DiagnosticCode.EMPTY_OPTION,
            )
        self.generic_visit(node)

    # ------------------------------------------------------------------
    # Choice
    # ------------------------------------------------------------------

    def visit_Choice(self, node: Choice) -> None:
        previous: Number | None = None
        for option in node.options:
            if previous is not None and option.limit < previous:
                self._add(
                    option,
                    ErrorTemplate.choice_limits_order(
                        format_number(option.limit), format_number(previous), node.name
                    ),
                    DiagnosticCode.CHOICE_LIMITS_ORDER,
                )
            previous = option.limit
            if is_empty_message(option.message):
                self._add(
                    option,
                    ErrorTemplate.empty_choice_option(format_number(option.limit), node.name),
                    DiagnosticCode.EMPTY_CHOICE_OPTION,
                )
        self._context.append((node.keyword, node.name))
        self.generic_visit(node)
        self._context.pop()

    # ------------------------------------------------------------------
    # Styles
    # ------------------------------------------------------------------

    def visit_FormattedArgument(self, node: FormattedArgument) -> None:
        if node.style is None:
            return
        result = self._validator.validate_style(node.format, node.style)
        if not result:
            return
        offset = 0
        if node.span is not None:
            found = self._source.rfind(node.style, node.span.start, node.span.end)
            offset = found if found >= 0 else node.span.start
        rebased = result.rebase(offset, self._source)
        self.findings.extend(rebased.errors)
        self.findings.extend(rebased.warnings)


def validate(message: Message, source: str = "", *, locale: str | None = None) -> ValidationResult:
    """Validate a parsed message (see SemanticValidator).

    Example:
        >>> validate(parse("{n, plural, one {#}}")).codes()
        [<DiagnosticCode.MISSING_OTHER: 'validator.missing_other'>]
    """
    return SemanticValidator(locale=locale).validate(message, source)
