"""Data models for test generation."""

from dataclasses import dataclass, field
from enum import Enum

from ..naming import RECORDING_FIXTURE_BASE, metadata_fixture, recording_fixture


class ScenarioKind(Enum):
    """Kind of generated test method, in per-arity emission order."""

    ASSIGNED_RESULT = "assigned_result"  # Result exposes the converted alternative
    EXECUTES_ASSIGNED_RESULT = "executes_assigned_result"  # Execution is forwarded
    NULL_CONTEXT = "null_context"  # ExecuteAsync(null) fails
    NULL_RESULT = "null_result"  # Wrapper over a null alternative fails
    ACCEPTS_CAPABILITY = "accepts_capability"  # IResult in slot j, one per slot
    ACCEPTS_NESTED = "accepts_nested"  # Nested wrapper composes, one per slot
    POPULATES_METADATA = "populates_metadata"  # Metadata collected from every slot
    METADATA_NULL_CONTEXT = "metadata_null_context"  # PopulateMetadata(null) fails

    @property
    def per_slot(self) -> bool:
        """Whether one method is emitted per slot rather than once per arity."""
        return self in (ScenarioKind.ACCEPTS_CAPABILITY, ScenarioKind.ACCEPTS_NESTED)


SCENARIO_ORDER: list[ScenarioKind] = list(ScenarioKind)


@dataclass(frozen=True)
class DataRow:
    """One [InlineData] row of a theory."""

    selector: int
    expected_type: str | None = None

    def render(self) -> str:
        if self.expected_type is None:
            return f"[InlineData({self.selector})]"
        return f"[InlineData({self.selector}, typeof({self.expected_type}))]"


@dataclass
class Scenario:
    """A single test method to be generated."""

    name: str  # e.g. ResultsOfTResult1TResult2_Result_IsAssignedResult
    kind: ScenarioKind
    arity: int
    slot: int | None = None
    is_async: bool = False
    data_rows: list[DataRow] = field(default_factory=list)
    recording_fixtures: list[int] = field(default_factory=list)
    metadata_fixtures: list[int] = field(default_factory=list)

    @property
    def attribute(self) -> str:
        """xUnit attribute: a Theory when the method takes data rows, else a Fact."""
        return "[Theory]" if self.data_rows else "[Fact]"

    @property
    def return_type(self) -> str:
        return "async Task" if self.is_async else "void"


@dataclass
class SuitePlan:
    """Every scenario of one test file, plus the fixture families it needs."""

    max_arity: int
    scenarios: list[Scenario] = field(default_factory=list)

    @property
    def fixture_count(self) -> int:
        """Members per fixture family; one more than the largest arity for nesting."""
        return self.max_arity + 1

    @property
    def arities(self) -> list[int]:
        seen: list[int] = []
        for scenario in self.scenarios:
            if scenario.arity not in seen:
                seen.append(scenario.arity)
        return seen

    @property
    def fixture_names(self) -> list[str]:
        """Declared fixture type names, in emission order."""
        names = [RECORDING_FIXTURE_BASE]
        for i in range(1, self.fixture_count + 1):
            names.append(recording_fixture(i))
            names.append(metadata_fixture(i))
        return names

    @property
    def total_tests(self) -> int:
        return len(self.scenarios)

    def scenarios_for(self, arity: int) -> list[Scenario]:
        return [s for s in self.scenarios if s.arity == arity]
