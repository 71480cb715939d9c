"""Validation runner that orchestrates all plan checks."""

from ..test_generator.generator import plan_test_suite
from ..test_generator.models import SuitePlan
from .base import ValidationResult
from .coverage import check_slot_coverage
from .fixtures import check_fixture_references
from .names import check_unique_names


def run_validators(plan: SuitePlan) -> ValidationResult:
    """Run all validators on a suite plan.

    Args:
        plan: The planned test suite.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    result.merge(check_slot_coverage(plan))
    result.merge(check_unique_names(plan))
    result.merge(check_fixture_references(plan))

    return result


def validate_suite(max_arity: int) -> ValidationResult:
    """Plan the test suite for max_arity and validate it.

    Raises:
        UnsupportedValueError: If planning needs a word outside the lookup table.
    """
    return run_validators(plan_test_suite(max_arity))
