"""Consistency checks over planned test suites."""

from .base import Severity, ValidationIssue, ValidationResult
from .coverage import check_slot_coverage
from .fixtures import check_fixture_references
from .names import check_unique_names
from .runner import run_validators, validate_suite

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_slot_coverage",
    "check_fixture_references",
    "check_unique_names",
    "run_validators",
    "validate_suite",
]
