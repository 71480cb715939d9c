"""Tests for validators.coverage."""

from resultsgen.test_generator import plan_test_suite
from resultsgen.test_generator.models import ScenarioKind
from resultsgen.validators.coverage import check_slot_coverage


class TestCheckSlotCoverage:
    def test_generated_plan_is_clean(self):
        result = check_slot_coverage(plan_test_suite(6))

        assert result.is_valid
        assert not result.has_warnings

    def test_no_wrappers_warning(self):
        result = check_slot_coverage(plan_test_suite(1))

        assert result.is_valid
        assert [w.code for w in result.warnings] == ["NO_WRAPPERS"]

    def test_missing_slot(self):
        plan = plan_test_suite(3)
        plan.scenarios = [
            s
            for s in plan.scenarios
            if not (s.kind == ScenarioKind.ACCEPTS_NESTED and s.arity == 3 and s.slot == 2)
        ]

        result = check_slot_coverage(plan)

        assert len(result.errors) == 1
        issue = result.errors[0]
        assert issue.code == "SLOT_COVERAGE"
        assert issue.arity == 3
        assert issue.details["kind"] == "accepts_nested"
        assert "missing [2]" in issue.message

    def test_repeated_slot(self):
        plan = plan_test_suite(2)
        duplicate = next(s for s in plan.scenarios if s.kind == ScenarioKind.ACCEPTS_CAPABILITY)
        plan.scenarios.append(duplicate)

        result = check_slot_coverage(plan)

        assert result.errors[0].code == "SLOT_COVERAGE"
        assert "repeated [1]" in result.errors[0].message

    def test_missing_single_case(self):
        plan = plan_test_suite(2)
        plan.scenarios = [s for s in plan.scenarios if s.kind != ScenarioKind.NULL_RESULT]

        result = check_slot_coverage(plan)

        assert [e.code for e in result.errors] == ["SCENARIO_COUNT"]
        assert result.errors[0].details["kind"] == "null_result"
