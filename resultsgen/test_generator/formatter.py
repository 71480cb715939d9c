"""Render planned scenarios as xUnit test methods."""

from ..naming import (
    RECORDING_FIXTURE_BASE,
    RESULT_INTERFACE,
    generic_type,
    metadata_fixture,
    recording_fixture,
)
from ..text.emitter import IndentedWriter
from .models import Scenario, ScenarioKind
from .scenarios import nested_type_name

CHECKSUM_ITEM = f"httpContext.Items[nameof({RECORDING_FIXTURE_BASE}.Checksum)]"


def format_scenario(writer: IndentedWriter, scenario: Scenario) -> None:
    """Emit one test method, followed by a blank line.

    Args:
        writer: Writer positioned inside the test class body.
        scenario: The planned scenario to render.
    """
    writer.write_line(1, scenario.attribute)
    for row in scenario.data_rows:
        writer.write_line(1, row.render())

    writer.write_line(1, f"public {scenario.return_type} {scenario.name}({_parameters(scenario)})")
    writer.write_line(1, "{")
    _RENDERERS[scenario.kind](writer, scenario)
    writer.write_line(1, "}")
    writer.write_line()


def _parameters(scenario: Scenario) -> str:
    if not scenario.data_rows:
        return ""
    if scenario.data_rows[0].expected_type is None:
        return "int input"
    return "int input, Type expectedResultType"


def _recording_types(scenario: Scenario) -> list[str]:
    return [recording_fixture(i) for i in scenario.recording_fixtures]


def _metadata_wrapper(scenario: Scenario) -> str:
    return generic_type([metadata_fixture(i) for i in scenario.metadata_fixtures])


def _write_switch(writer: IndentedWriter, selector: str, arms: list[str]) -> None:
    """Emit a switch expression whose last arm is the discard fallback."""
    writer.write_line(3, f"return {selector} switch")
    writer.write_line(3, "{")
    for index, expression in enumerate(arms, start=1):
        if index < len(arms):
            writer.write_line(4, f"{index} => {expression},")
        else:
            writer.write_line(4, f"_ => {expression}")
    writer.write_line(3, "};")


def _write_local_api(
    writer: IndentedWriter, return_type: str, parameter: str, selector: str, arms: list[str]
) -> None:
    writer.write_line(2, f"{return_type} MyApi({parameter})")
    writer.write_line(2, "{")
    _write_switch(writer, selector, arms)
    writer.write_line(2, "}")


def _write_act_and_execute(writer: IndentedWriter) -> None:
    writer.write_line(2, "// Act")
    writer.write_line(2, "var result = MyApi(input);")
    writer.write_line(2, "await result.ExecuteAsync(httpContext);")
    writer.write_line()


def _write_throws_async(writer: IndentedWriter, exception: str) -> None:
    writer.write_line(2, f"await Assert.ThrowsAsync<{exception}>(async () =>")
    writer.write_line(2, "{")
    writer.write_line(3, "await result.ExecuteAsync(httpContext);")
    writer.write_line(2, "});")


def _render_assigned_result(writer: IndentedWriter, scenario: Scenario) -> None:
    fixtures = _recording_types(scenario)

    writer.write_line(2, "// Arrange")
    _write_local_api(
        writer,
        generic_type(fixtures),
        "int id",
        "id",
        [f"new {fixture}()" for fixture in fixtures],
    )
    writer.write_line()

    writer.write_line(2, "// Act")
    writer.write_line(2, "var result = MyApi(input);")
    writer.write_line()

    writer.write_line(2, "// Assert")
    writer.write_line(2, "Assert.IsType(expectedResultType, result.Result);")


def _render_executes_assigned_result(writer: IndentedWriter, scenario: Scenario) -> None:
    fixtures = _recording_types(scenario)

    writer.write_line(2, "// Arrange")
    _write_local_api(
        writer,
        generic_type(fixtures),
        "int checksum",
        "checksum",
        [f"new {fixture}(checksum)" for fixture in fixtures],
    )
    writer.write_line(2, "var httpContext = GetHttpContext();")
    writer.write_line()

    _write_act_and_execute(writer)

    writer.write_line(2, "// Assert")
    writer.write_line(2, f"Assert.Equal(input, {CHECKSUM_ITEM});")


def _render_null_context(writer: IndentedWriter, scenario: Scenario) -> None:
    writer.write_line(2, "// Arrange")
    writer.write_line(2, f"{generic_type(_recording_types(scenario))} MyApi()")
    writer.write_line(2, "{")
    writer.write_line(3, f"return new {recording_fixture(1)}(1);")
    writer.write_line(2, "}")
    writer.write_line(2, "HttpContext httpContext = null;")
    writer.write_line()

    writer.write_line(2, "// Act & Assert")
    writer.write_line(2, "var result = MyApi();")
    writer.write_line()
    _write_throws_async(writer, "ArgumentNullException")


def _render_null_result(writer: IndentedWriter, scenario: Scenario) -> None:
    # The wrapper is converted from a null alternative, leaving Result unset.
    writer.write_line(2, "// Arrange")
    writer.write_line(2, f"{generic_type(_recording_types(scenario))} MyApi()")
    writer.write_line(2, "{")
    writer.write_line(3, f"return ({recording_fixture(1)})null;")
    writer.write_line(2, "}")
    writer.write_line(2, "var httpContext = GetHttpContext();")
    writer.write_line()

    writer.write_line(2, "// Act & Assert")
    writer.write_line(2, "var result = MyApi();")
    writer.write_line()
    _write_throws_async(writer, "InvalidOperationException")


def _render_accepts_capability(writer: IndentedWriter, scenario: Scenario) -> None:
    fixtures = _recording_types(scenario)
    type_args = [
        RESULT_INTERFACE if index == scenario.slot else fixture
        for index, fixture in enumerate(fixtures, start=1)
    ]

    writer.write_line(2, "// Arrange")
    _write_local_api(
        writer,
        generic_type(type_args),
        "int id",
        "id",
        [f"new {fixture}({index})" for index, fixture in enumerate(fixtures, start=1)],
    )
    writer.write_line(2, "var httpContext = GetHttpContext();")
    writer.write_line()

    _write_act_and_execute(writer)

    writer.write_line(2, "// Assert")
    writer.write_line(2, "Assert.IsType(expectedResultType, result.Result);")
    writer.write_line(2, f"Assert.Equal(input, {CHECKSUM_ITEM});")


def _render_accepts_nested(writer: IndentedWriter, scenario: Scenario) -> None:
    nested = nested_type_name(scenario.arity)
    outer_index = scenario.arity + 1
    outer_fixture = recording_fixture(outer_index)

    arms = [
        f"({nested})new {recording_fixture(index)}({index})"
        for index in range(1, scenario.arity + 1)
    ]
    arms.append(f"new {outer_fixture}({outer_index})")

    writer.write_line(2, "// Arrange")
    _write_local_api(writer, generic_type([nested, outer_fixture]), "int id", "id", arms)
    writer.write_line(2, "var httpContext = GetHttpContext();")
    writer.write_line()

    _write_act_and_execute(writer)

    writer.write_line(2, "// Assert")
    writer.write_line(2, "Assert.IsType(expectedResultType, result.Result);")
    writer.write_line(2, f"Assert.Equal(input, {CHECKSUM_ITEM});")


def _render_populates_metadata(writer: IndentedWriter, scenario: Scenario) -> None:
    wrapper = _metadata_wrapper(scenario)

    writer.write_line(2, "// Arrange")
    writer.write_line(2, f"{wrapper} MyApi() {{ throw new NotImplementedException(); }}")
    writer.write_line(2, "var metadata = new List<object>();")
    writer.write_line(
        2,
        "var context = new EndpointMetadataContext(((Delegate)MyApi).GetMethodInfo(), metadata, null);",
    )
    writer.write_line()

    writer.write_line(2, "// Act")
    writer.write_line(2, f"PopulateMetadata<{wrapper}>(context);")
    writer.write_line()

    writer.write_line(2, "// Assert")
    for index in scenario.metadata_fixtures:
        writer.write_line(
            2,
            "Assert.Contains(context.EndpointMetadata, m => m is ResultTypeProvidedMetadata "
            f"{{ SourceTypeName: nameof({metadata_fixture(index)}) }});",
        )


def _render_metadata_null_context(writer: IndentedWriter, scenario: Scenario) -> None:
    writer.write_line(2, "// Act & Assert")
    writer.write_line(
        2,
        'Assert.Throws<ArgumentNullException>("context", () => '
        f"PopulateMetadata<{_metadata_wrapper(scenario)}>(null));",
    )


_RENDERERS = {
    ScenarioKind.ASSIGNED_RESULT: _render_assigned_result,
    ScenarioKind.EXECUTES_ASSIGNED_RESULT: _render_executes_assigned_result,
    ScenarioKind.NULL_CONTEXT: _render_null_context,
    ScenarioKind.NULL_RESULT: _render_null_result,
    ScenarioKind.ACCEPTS_CAPABILITY: _render_accepts_capability,
    ScenarioKind.ACCEPTS_NESTED: _render_accepts_nested,
    ScenarioKind.POPULATES_METADATA: _render_populates_metadata,
    ScenarioKind.METADATA_NULL_CONTEXT: _render_metadata_null_context,
}
