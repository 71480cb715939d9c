"""Main test generation orchestrator."""

from typing import TextIO

from ..config.models import GeneratorConfig
from ..text.emitter import IndentedWriter
from .fixtures import write_fixtures
from .formatter import format_scenario
from .models import SuitePlan
from .scenarios import plan_scenarios

TEST_FILE_USINGS = [
    "System.Reflection",
    "System.Threading.Tasks",
    "Microsoft.AspNetCore.Http.Metadata",
    "Microsoft.AspNetCore.Http.HttpResults",
    "Microsoft.Extensions.DependencyInjection",
    "Microsoft.Extensions.Logging",
    "Microsoft.Extensions.Logging.Abstractions",
]


def plan_test_suite(max_arity: int) -> SuitePlan:
    """Plan every test method for arities 1 to max_arity.

    Arity 1 is skipped since no single-alternative wrapper exists.

    Args:
        max_arity: Largest wrapper arity under test.

    Returns:
        SuitePlan with scenarios in emission order.
    """
    plan = SuitePlan(max_arity=max_arity)

    for arity in range(1, max_arity + 1):
        if arity == 1:
            continue
        plan.scenarios.extend(plan_scenarios(arity))

    return plan


def emit_tests(sink: TextIO, max_arity: int) -> SuitePlan:
    """Emit all test methods followed by the fixture families.

    Output is indented as members of an enclosing test class.

    Args:
        sink: Text sink receiving the generated source.
        max_arity: Largest wrapper arity under test.

    Returns:
        The plan that was rendered.
    """
    writer = IndentedWriter(sink)
    plan = plan_test_suite(max_arity)

    for scenario in plan.scenarios:
        format_scenario(writer, scenario)

    write_fixtures(writer, plan.fixture_count)
    return plan


def write_test_file(sink: TextIO, config: GeneratorConfig) -> SuitePlan:
    """Emit the full test file: header, usings, namespace and the partial test class."""
    writer = IndentedWriter(sink)

    for line in config.header:
        writer.write_line(0, line)
    if config.header:
        writer.write_line()
    writer.write_line(0, config.generated_notice)
    writer.write_line()

    for using in TEST_FILE_USINGS:
        writer.write_line(0, f"using {using};")
    writer.write_line()

    writer.write_line(0, f"namespace {config.test_namespace};")
    writer.write_line()

    writer.write_line(0, f"public partial class {config.test_class_name}")
    writer.write_line(0, "{")
    plan = emit_tests(sink, config.max_arity)
    writer.write_line(0, "}")
    return plan
