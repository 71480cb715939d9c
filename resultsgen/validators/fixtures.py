"""Check fixture indices referenced by planned scenarios."""

from ..test_generator.models import SuitePlan
from .base import ValidationResult


def check_fixture_references(plan: SuitePlan) -> ValidationResult:
    """Check every referenced fixture index is declared and in range.

    A scenario for arity k may reference fixtures 1..k+1; no reference may
    exceed the declared family size of max arity + 1.

    Args:
        plan: The suite plan to check.

    Returns:
        ValidationResult with FIXTURE_OUT_OF_RANGE errors.
    """
    result = ValidationResult()

    for scenario in plan.scenarios:
        upper = min(scenario.arity + 1, plan.fixture_count)
        references = [
            ("recording", i) for i in scenario.recording_fixtures
        ] + [("metadata", i) for i in scenario.metadata_fixtures]

        for family, index in references:
            if not 1 <= index <= upper:
                result.add_error(
                    code="FIXTURE_OUT_OF_RANGE",
                    message=(
                        f"{scenario.name} references {family} fixture {index}, "
                        f"expected 1..{upper}"
                    ),
                    arity=scenario.arity,
                    slot=scenario.slot,
                    family=family,
                    index=index,
                )

    return result
