"""Test generation for the wrapper type family."""

from .generator import emit_tests, plan_test_suite, write_test_file
from .models import DataRow, Scenario, ScenarioKind, SuitePlan
from .scenarios import plan_scenarios

__all__ = [
    "emit_tests",
    "plan_test_suite",
    "plan_scenarios",
    "write_test_file",
    "DataRow",
    "Scenario",
    "ScenarioKind",
    "SuitePlan",
]
