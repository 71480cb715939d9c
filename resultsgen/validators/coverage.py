"""Check that every arity has its full set of scenarios."""

from collections import Counter

from ..test_generator.models import SCENARIO_ORDER, SuitePlan
from .base import ValidationResult


def check_slot_coverage(plan: SuitePlan) -> ValidationResult:
    """Check per-arity scenario counts.

    Per-slot kinds must cover slots 1..k exactly once each; every other kind
    must appear exactly once per arity. A plan without wrappers is reported as
    a warning.

    Args:
        plan: The suite plan to check.

    Returns:
        ValidationResult with SLOT_COVERAGE, SCENARIO_COUNT and NO_WRAPPERS issues.
    """
    result = ValidationResult()

    if plan.max_arity < 2:
        result.add_warning(
            code="NO_WRAPPERS",
            message=f"Max arity {plan.max_arity} produces no wrapper types or tests",
        )

    for arity in range(2, plan.max_arity + 1):
        scenarios = plan.scenarios_for(arity)

        for kind in SCENARIO_ORDER:
            of_kind = [s for s in scenarios if s.kind == kind]

            if kind.per_slot:
                slots = Counter(s.slot for s in of_kind)
                expected = set(range(1, arity + 1))
                missing = sorted(expected - set(slots))
                repeated = sorted((slot for slot, count in slots.items() if count > 1), key=str)
                unexpected = sorted(set(slots) - expected, key=str)

                if missing or repeated or unexpected:
                    result.add_error(
                        code="SLOT_COVERAGE",
                        message=(
                            f"{kind.value} must cover slots 1..{arity} once each "
                            f"(missing {missing}, repeated {repeated}, unexpected {unexpected})"
                        ),
                        arity=arity,
                        kind=kind.value,
                    )
            elif len(of_kind) != 1:
                result.add_error(
                    code="SCENARIO_COUNT",
                    message=f"{kind.value} expected once, found {len(of_kind)}",
                    arity=arity,
                    kind=kind.value,
                )

    return result
