"""Tests for validators.names."""

from resultsgen.test_generator import plan_test_suite
from resultsgen.test_generator.models import Scenario, ScenarioKind, SuitePlan
from resultsgen.validators.names import check_unique_names


class TestCheckUniqueNames:
    def test_generated_plan_is_clean(self):
        assert check_unique_names(plan_test_suite(6)).is_valid

    def test_duplicate_method_name(self):
        plan = plan_test_suite(2)
        plan.scenarios.append(plan.scenarios[0])

        result = check_unique_names(plan)

        assert len(result.errors) == 1
        assert result.errors[0].code == "DUPLICATE_NAME"
        assert result.errors[0].details["count"] == 2

    def test_method_clashing_with_fixture(self):
        plan = SuitePlan(
            max_arity=1,
            scenarios=[Scenario(name="RecordingFixture1", kind=ScenarioKind.NULL_RESULT, arity=2)],
        )

        result = check_unique_names(plan)

        assert [e.details["name"] for e in result.errors] == ["RecordingFixture1"]
