"""Tests for validators.fixtures."""

from resultsgen.test_generator import plan_test_suite
from resultsgen.test_generator.models import Scenario, ScenarioKind, SuitePlan
from resultsgen.validators.fixtures import check_fixture_references


class TestCheckFixtureReferences:
    def test_generated_plan_is_clean(self):
        assert check_fixture_references(plan_test_suite(6)).is_valid

    def test_reference_beyond_arity_plus_one(self):
        plan = SuitePlan(
            max_arity=6,
            scenarios=[
                Scenario(
                    name="X",
                    kind=ScenarioKind.ASSIGNED_RESULT,
                    arity=2,
                    recording_fixtures=[1, 2, 4],
                )
            ],
        )

        result = check_fixture_references(plan)

        assert len(result.errors) == 1
        issue = result.errors[0]
        assert issue.code == "FIXTURE_OUT_OF_RANGE"
        assert issue.arity == 2
        assert issue.details == {"family": "recording", "index": 4}

    def test_reference_beyond_declared_family(self):
        plan = SuitePlan(
            max_arity=2,
            scenarios=[
                Scenario(
                    name="X",
                    kind=ScenarioKind.POPULATES_METADATA,
                    arity=3,
                    metadata_fixtures=[4],
                )
            ],
        )

        result = check_fixture_references(plan)

        assert result.errors[0].details["family"] == "metadata"
        assert "expected 1..3" in result.errors[0].message

    def test_zero_index(self):
        plan = SuitePlan(
            max_arity=2,
            scenarios=[
                Scenario(name="X", kind=ScenarioKind.NULL_RESULT, arity=2, recording_fixtures=[0])
            ],
        )
        assert check_fixture_references(plan).has_errors
