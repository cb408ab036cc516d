"""Validation findings and results.

Semantic and pattern validators never raise. They accumulate findings,
split into errors and warnings, into an immutable ValidationResult.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .codes import DiagnosticCode, Severity
from .snippet import render_snippet

__all__ = [
    "ValidationError",
    "ValidationResult",
]


# ============================================================================
# FINDINGS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One validation finding.

    Despite the name, warnings use this type too; severity tells them apart.

    Attributes:
        message: Human-readable message
        position: Offset into source (str index)
        source: The text the finding refers to
        code: Stable diagnostic code
        severity: ERROR or WARNING
    """

    message: str
    position: int
    source: str
    code: DiagnosticCode
    severity: Severity = Severity.ERROR

    @property
    def snippet(self) -> str:
        """Rendered excerpt of source with a caret at position.

        Computed on access; most findings are never displayed.
        """
        return render_snippet(self.source, self.position)

    def rebase(self, offset: int, source: str) -> ValidationError:
        """Return a copy whose position is shifted into an enclosing source."""
        return replace(self, position=self.position + offset, source=source)

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "position": self.position,
            "snippet": self.snippet,
            "code": str(self.code),
        }


# ============================================================================
# RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Ordered validation findings, separated into errors and warnings.

    Immutable: merge() and rebase() return new results.

    Attributes:
        errors: Findings that make the message invalid
        warnings: Non-fatal findings
    """

    errors: tuple[ValidationError, ...] = ()
    warnings: tuple[ValidationError, ...] = ()

    @staticmethod
    def from_findings(findings: list[ValidationError]) -> ValidationResult:
        """Split findings by severity, preserving order."""
        return ValidationResult(
            errors=tuple(f for f in findings if f.severity is Severity.ERROR),
            warnings=tuple(f for f in findings if f.severity is Severity.WARNING),
        )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_valid(self) -> bool:
        """True when there are no errors (warnings allowed)."""
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def get_errors(self) -> list[ValidationError]:
        return list(self.errors)

    def get_warnings(self) -> list[ValidationError]:
        return list(self.warnings)

    def codes(self) -> list[DiagnosticCode]:
        """Codes of all findings, errors first."""
        return [f.code for f in (*self.errors, *self.warnings)]

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Concatenate two results, self first."""
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def rebase(self, offset: int, source: str) -> ValidationResult:
        """Re-anchor findings from a sub-string validator onto source."""
        return ValidationResult(
            errors=tuple(e.rebase(offset, source) for e in self.errors),
            warnings=tuple(w.rebase(offset, source) for w in self.warnings),
        )

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        return {
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }

    def __len__(self) -> int:
        return len(self.errors) + len(self.warnings)
