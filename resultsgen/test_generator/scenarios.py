"""Plan the test scenarios for one wrapper arity."""

from ..naming import generic_type, method_prefix, recording_fixture, recording_fixtures
from ..text.numbers import title_case, to_ordinal_word
from .models import DataRow, Scenario, ScenarioKind


def _slot_word(slot: int) -> str:
    """Title-cased ordinal used in per-slot method names, e.g. ``Second``."""
    return title_case(to_ordinal_word(slot))


def _indices(arity: int) -> list[int]:
    return list(range(1, arity + 1))


def nested_type_name(arity: int) -> str:
    """The arity-k wrapper over recording fixtures, used as a nested alternative."""
    return generic_type(recording_fixtures(arity))


def plan_assigned_result(arity: int) -> Scenario:
    """Theory: the exposed Result is the concrete fixture that was returned."""
    return Scenario(
        name=f"{method_prefix(arity)}_Result_IsAssignedResult",
        kind=ScenarioKind.ASSIGNED_RESULT,
        arity=arity,
        data_rows=[DataRow(j, recording_fixture(j)) for j in _indices(arity)],
        recording_fixtures=_indices(arity),
    )


def plan_executes_assigned_result(arity: int) -> Scenario:
    """Theory: executing the wrapper records the selected fixture's checksum."""
    return Scenario(
        name=f"{method_prefix(arity)}_ExecuteResult_ExecutesAssignedResult",
        kind=ScenarioKind.EXECUTES_ASSIGNED_RESULT,
        arity=arity,
        is_async=True,
        data_rows=[DataRow(j) for j in _indices(arity)],
        recording_fixtures=_indices(arity),
    )


def plan_null_context(arity: int) -> Scenario:
    return Scenario(
        name=f"{method_prefix(arity)}_Throws_ArgumentNullException_WhenHttpContextIsNull",
        kind=ScenarioKind.NULL_CONTEXT,
        arity=arity,
        is_async=True,
        recording_fixtures=_indices(arity),
    )


def plan_null_result(arity: int) -> Scenario:
    return Scenario(
        name=f"{method_prefix(arity)}_Throws_InvalidOperationException_WhenResultIsNull",
        kind=ScenarioKind.NULL_RESULT,
        arity=arity,
        is_async=True,
        recording_fixtures=_indices(arity),
    )


def plan_accepts_capability(arity: int, slot: int) -> Scenario:
    """Theory: slot ``slot`` declared as IResult still accepts every fixture."""
    return Scenario(
        name=f"{method_prefix(arity)}_AcceptsIResult_As{_slot_word(slot)}TypeArg",
        kind=ScenarioKind.ACCEPTS_CAPABILITY,
        arity=arity,
        slot=slot,
        is_async=True,
        data_rows=[DataRow(j, recording_fixture(j)) for j in _indices(arity)],
        recording_fixtures=_indices(arity),
    )


def plan_accepts_nested(arity: int, slot: int) -> Scenario:
    """Theory: an arity-k wrapper nested inside an outer wrapper keeps its identity.

    Selectors 1..k go through the nested wrapper; selector k+1 picks the plain
    fixture in the outer wrapper's last slot.
    """
    nested = nested_type_name(arity)
    rows = [DataRow(j, nested) for j in _indices(arity)]
    rows.append(DataRow(arity + 1, recording_fixture(arity + 1)))

    return Scenario(
        name=f"{method_prefix(arity)}_AcceptsNestedResultsOfT_As{_slot_word(slot)}TypeArg",
        kind=ScenarioKind.ACCEPTS_NESTED,
        arity=arity,
        slot=slot,
        is_async=True,
        data_rows=rows,
        recording_fixtures=_indices(arity + 1),
    )


def plan_populates_metadata(arity: int) -> Scenario:
    return Scenario(
        name=(
            f"{method_prefix(arity)}_PopulateMetadata_"
            "PopulatesMetadataFromTypeArgsThatImplementIEndpointMetadataProvider"
        ),
        kind=ScenarioKind.POPULATES_METADATA,
        arity=arity,
        metadata_fixtures=_indices(arity),
    )


def plan_metadata_null_context(arity: int) -> Scenario:
    return Scenario(
        name=f"{method_prefix(arity)}_PopulateMetadata_Throws_ArgumentNullException_WhenContextIsNull",
        kind=ScenarioKind.METADATA_NULL_CONTEXT,
        arity=arity,
        metadata_fixtures=_indices(arity),
    )


def plan_scenarios(arity: int) -> list[Scenario]:
    """Plan every test method for one arity, in emission order.

    Args:
        arity: Number of alternatives of the wrapper under test.

    Returns:
        Scenarios for the eight kinds; per-slot kinds contribute one scenario
        per slot, in slot order.

    Raises:
        UnsupportedValueError: If a slot has no ordinal word form.
    """
    scenarios = [
        plan_assigned_result(arity),
        plan_executes_assigned_result(arity),
        plan_null_context(arity),
        plan_null_result(arity),
    ]
    scenarios.extend(plan_accepts_capability(arity, slot) for slot in _indices(arity))
    scenarios.extend(plan_accepts_nested(arity, slot) for slot in _indices(arity))
    scenarios.append(plan_populates_metadata(arity))
    scenarios.append(plan_metadata_null_context(arity))
    return scenarios
