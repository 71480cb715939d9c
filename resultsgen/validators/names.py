"""Detect duplicate names in a planned test file."""

from collections import Counter

from ..test_generator.models import SuitePlan
from .base import ValidationResult


def check_unique_names(plan: SuitePlan) -> ValidationResult:
    """Check that method and fixture type names are unique within the file.

    Args:
        plan: The suite plan to check.

    Returns:
        ValidationResult with a DUPLICATE_NAME error per repeated name.
    """
    result = ValidationResult()

    counts = Counter(s.name for s in plan.scenarios)
    counts.update(plan.fixture_names)

    for name, count in counts.items():
        if count > 1:
            result.add_error(
                code="DUPLICATE_NAME",
                message=f"'{name}' is declared {count} times",
                name=name,
                count=count,
            )

    return result
