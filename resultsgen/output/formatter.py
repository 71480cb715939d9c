"""Text and JSON rendering of plan checks and generation reports."""

import json
from typing import Literal

from ..validators.base import Severity, ValidationIssue, ValidationResult
from .writer import GenerationReport

OutputFormat = Literal["text", "json"]

SYMBOLS = {
    Severity.ERROR: "✘",
    Severity.WARNING: "⚠",
}


def format_validation_result(result: ValidationResult, format: OutputFormat = "text") -> str:
    """Format the outcome of the plan checks.

    Args:
        result: Issues collected by the checks.
        format: "text" for a sectioned listing, "json" for a machine-readable dump.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(
            {
                "valid": result.is_valid,
                "error_count": len(result.errors),
                "warning_count": len(result.warnings),
                "issues": [_issue_to_dict(issue) for issue in result.issues],
            },
            indent=2,
        )

    lines: list[str] = []
    for title, issues in (("ERRORS", result.errors), ("WARNINGS", result.warnings)):
        if lines:
            lines.append("")
        lines.append(f"{title}:")
        lines.extend(f"  {_issue_line(issue)}" for issue in issues)
        if not issues:
            lines.append("  (none)")

    lines.append("")
    lines.append(_summary(result))
    return "\n".join(lines)


def _issue_line(issue: ValidationIssue) -> str:
    location = f"{issue.location} " if issue.location else ""
    return f"{SYMBOLS[issue.severity]} {issue.code}: {location}{issue.message}"


def _issue_to_dict(issue: ValidationIssue) -> dict:
    return {
        "code": issue.code,
        "message": issue.message,
        "severity": issue.severity.value,
        "arity": issue.arity,
        "slot": issue.slot,
        "details": issue.details,
    }


def _summary(result: ValidationResult) -> str:
    error_count = len(result.errors)
    warning_count = len(result.warnings)

    if error_count:
        return f"Plan check failed: {error_count} error(s), {warning_count} warning(s)"
    if warning_count:
        return f"Plan check passed with {warning_count} warning(s)"
    return "Plan check passed"


def format_generation_report(report: GenerationReport, format: OutputFormat = "text") -> str:
    """Format what a generate run wrote, one line per file plus a totals line."""
    if format == "json":
        return json.dumps(
            {
                "max_arity": report.max_arity,
                "wrapper_count": report.wrapper_count,
                "test_count": report.test_count,
                "files": [{"path": str(f.path), "bytes": f.size} for f in report.files],
            },
            indent=2,
        )

    lines = [f"{f.size:,} bytes written to {f.path} successfully!" for f in report.files]
    lines.append("")
    lines.append(
        f"Generated {report.wrapper_count} wrapper types and {report.test_count} tests "
        f"(max arity {report.max_arity})"
    )
    return "\n".join(lines)
