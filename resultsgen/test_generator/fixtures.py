"""Emit the fixture types referenced by generated tests."""

from ..naming import (
    METADATA_PROVIDER_INTERFACE,
    RECORDING_FIXTURE_BASE,
    RESULT_INTERFACE,
    metadata_fixture,
    recording_fixture,
)
from ..text.emitter import IndentedWriter


def write_recording_base(writer: IndentedWriter) -> None:
    """Abstract base that records its checksum into the request items on execution."""
    writer.write_line(1, f"abstract class {RECORDING_FIXTURE_BASE} : {RESULT_INTERFACE}")
    writer.write_line(1, "{")
    writer.write_line(2, f"public {RECORDING_FIXTURE_BASE}(int checksum = 0)")
    writer.write_line(2, "{")
    writer.write_line(3, "Checksum = checksum;")
    writer.write_line(2, "}")
    writer.write_line()
    writer.write_line(2, "public int Checksum { get; }")
    writer.write_line()
    writer.write_line(2, "public Task ExecuteAsync(HttpContext httpContext)")
    writer.write_line(2, "{")
    writer.write_line(3, f"httpContext.Items[nameof({RECORDING_FIXTURE_BASE}.Checksum)] = Checksum;")
    writer.write_line(3, "return Task.CompletedTask;")
    writer.write_line(2, "}")
    writer.write_line(1, "}")


def write_recording_fixture(writer: IndentedWriter, index: int) -> None:
    name = recording_fixture(index)
    writer.write_line(1, f"class {name} : {RECORDING_FIXTURE_BASE}")
    writer.write_line(1, "{")
    writer.write_line(2, f"public {name}(int checksum = 0) : base(checksum) {{ }}")
    writer.write_line(1, "}")


def write_metadata_fixture(writer: IndentedWriter, index: int) -> None:
    """Fixture that contributes one descriptor tagged with its own type name."""
    name = metadata_fixture(index)
    writer.write_line(1, f"class {name} : {RESULT_INTERFACE}, {METADATA_PROVIDER_INTERFACE}")
    writer.write_line(1, "{")
    writer.write_line(2, "public Task ExecuteAsync(HttpContext httpContext) => Task.CompletedTask;")
    writer.write_line()
    writer.write_line(2, "public static void PopulateMetadata(EndpointMetadataContext context)")
    writer.write_line(2, "{")
    writer.write_line(
        3,
        "context.EndpointMetadata.Add(new ResultTypeProvidedMetadata "
        f"{{ SourceTypeName = nameof({name}) }});",
    )
    writer.write_line(2, "}")
    writer.write_line(1, "}")


def write_fixtures(writer: IndentedWriter, fixture_count: int) -> None:
    """Emit the recording base and both fixture families, 1..fixture_count.

    Blocks are separated by one blank line with none after the last.

    Args:
        writer: Writer positioned inside the test class body.
        fixture_count: Members per family, normally max arity + 1.
    """
    write_recording_base(writer)

    for index in range(1, fixture_count + 1):
        writer.write_line()
        write_recording_fixture(writer, index)
        writer.write_line()
        write_metadata_fixture(writer, index)
