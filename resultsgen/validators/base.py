"""Issue and result types shared by the plan checks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    ERROR = "error"  # Generation must not proceed
    WARNING = "warning"  # Output is valid but probably not what was intended


@dataclass
class ValidationIssue:
    """One finding about a planned suite, located by arity and slot where it applies."""

    code: str
    message: str
    severity: Severity
    arity: int | None = None
    slot: int | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """Bracketed arity/slot label, or an empty string for suite-wide issues."""
        if self.arity is None:
            return ""
        parts = [f"arity {self.arity}"]
        if self.slot is not None:
            parts.append(f"slot {self.slot}")
        return f"[{', '.join(parts)}]"

    def __str__(self) -> str:
        label = f"{self.severity.value.upper()}: {self.code}"
        if self.location:
            label = f"{label} {self.location}"
        return f"{label} - {self.message}"


@dataclass
class ValidationResult:
    """Issues collected by one or more checks."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def _of(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._of(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._of(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_valid(self) -> bool:
        """A plan with warnings only is still valid."""
        return not self.has_errors

    def _record(
        self,
        severity: Severity,
        code: str,
        message: str,
        arity: int | None,
        slot: int | None,
        details: dict[str, Any],
    ) -> None:
        self.issues.append(
            ValidationIssue(code, message, severity, arity=arity, slot=slot, details=details)
        )

    def add_error(
        self, code: str, message: str, arity: int | None = None, slot: int | None = None, **details: Any
    ) -> None:
        self._record(Severity.ERROR, code, message, arity, slot, details)

    def add_warning(
        self, code: str, message: str, arity: int | None = None, slot: int | None = None, **details: Any
    ) -> None:
        self._record(Severity.WARNING, code, message, arity, slot, details)

    def merge(self, other: "ValidationResult") -> None:
        self.issues.extend(other.issues)
