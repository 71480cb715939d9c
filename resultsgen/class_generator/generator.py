"""Generate the Results<TResult1, ..., TResultN> union type family."""

from typing import TextIO

from ..config.models import GeneratorConfig
from ..naming import (
    METADATA_PROVIDER_INTERFACE,
    RESULT_INTERFACE,
    WRAPPER_TYPE,
    doc_cref_type,
    generic_type,
    type_param,
    type_params,
)
from ..text.emitter import IndentedWriter
from ..text.numbers import to_cardinal_word, to_ordinal_word

CLASS_FILE_USINGS = ["Microsoft.AspNetCore.Http.Metadata"]

METADATA_HELPER = "ResultsOfTHelper.PopulateMetadataIfTargetIsIEndpointMetadataProvider"


def emit_classes(sink: TextIO, max_arity: int) -> None:
    """Emit one wrapper type per arity from 2 to max_arity.

    Consecutive types are separated by exactly one blank line. A max_arity below
    2 emits nothing since there is no single-alternative wrapper.

    Args:
        sink: Text sink receiving the generated source.
        max_arity: Largest arity to generate.

    Raises:
        UnsupportedValueError: If an arity has no English word form.
    """
    writer = IndentedWriter(sink)

    for arity in range(2, max_arity + 1):
        write_results_class(writer, arity)

        if arity != max_arity:
            writer.write_line()


def write_results_class(writer: IndentedWriter, arity: int) -> None:
    """Emit the complete type definition for a single arity."""
    params = type_params(arity)
    closed_type = generic_type(params)

    # Summary and remarks
    writer.write_line(0, "/// <summary>")
    writer.write_line(
        0,
        f'/// An <see cref="{RESULT_INTERFACE}"/> that could be one of {to_cardinal_word(arity)} '
        f'different <see cref="{RESULT_INTERFACE}"/> types. On execution will',
    )
    writer.write_line(
        0,
        f'/// execute the underlying <see cref="{RESULT_INTERFACE}"/> instance that was actually '
        "returned by the HTTP endpoint.",
    )
    writer.write_line(0, "/// </summary>")
    writer.write_line(0, "/// <remarks>")
    writer.write_line(
        0,
        "/// An instance of this type cannot be created explicitly. Use the implicit cast "
        "operators to create an instance",
    )
    writer.write_line(0, "/// from an instance of one of the declared type arguments, e.g.")
    writer.write_line(
        0, f"/// <code>{WRAPPER_TYPE}&lt;Ok, BadRequest&gt; result = TypedResults.Ok();</code>"
    )
    writer.write_line(0, "/// </remarks>")

    for slot, param in enumerate(params, start=1):
        writer.write_line(
            0,
            f'/// <typeparam name="{param}">The {to_ordinal_word(slot)} result type.</typeparam>',
        )

    # Declaration and constraints
    writer.write_line(
        0,
        f"public sealed class {closed_type} : {RESULT_INTERFACE}, {METADATA_PROVIDER_INTERFACE}",
    )
    for param in params:
        writer.write_line(1, f"where {param} : {RESULT_INTERFACE}")
    writer.write_line(0, "{")

    _write_constructor(writer)
    _write_result_property(writer)
    _write_execute(writer)
    _write_conversions(writer, arity)
    _write_populate_metadata(writer, arity)

    writer.write_line(0, "}")


def _write_constructor(writer: IndentedWriter) -> None:
    writer.write_line(1, "// Use implicit cast operators to create an instance")
    writer.write_line(1, f"private {WRAPPER_TYPE}({RESULT_INTERFACE} activeResult)")
    writer.write_line(1, "{")
    writer.write_line(2, "Result = activeResult;")
    writer.write_line(1, "}")
    writer.write_line()


def _write_result_property(writer: IndentedWriter) -> None:
    writer.write_line(1, "/// <summary>")
    writer.write_line(
        1,
        f'/// Gets the actual <see cref="{RESULT_INTERFACE}"/> returned by the '
        '<see cref="Endpoint"/> route handler delegate.',
    )
    writer.write_line(1, "/// </summary>")
    writer.write_line(1, f"public {RESULT_INTERFACE} Result {{ get; }}")
    writer.write_line()


def _write_execute(writer: IndentedWriter) -> None:
    writer.write_line(1, "/// <inheritdoc/>")
    writer.write_line(1, "public Task ExecuteAsync(HttpContext httpContext)")
    writer.write_line(1, "{")
    writer.write_line(2, "ArgumentNullException.ThrowIfNull(httpContext, nameof(httpContext));")
    writer.write_line()
    writer.write_line(2, "if (Result is null)")
    writer.write_line(2, "{")
    writer.write_line(
        3,
        "throw new InvalidOperationException("
        f'"The {RESULT_INTERFACE} assigned to the Result property must not be null.");',
    )
    writer.write_line(2, "}")
    writer.write_line()
    writer.write_line(2, "return Result.ExecuteAsync(httpContext);")
    writer.write_line(1, "}")
    writer.write_line()


def _write_conversions(writer: IndentedWriter, arity: int) -> None:
    """One implicit conversion per slot, in slot order."""
    closed_type = generic_type(type_params(arity))
    cref = doc_cref_type(arity)

    for slot in range(1, arity + 1):
        writer.write_line(1, "/// <summary>")
        writer.write_line(
            1,
            f'/// Converts the <typeparamref name="{type_param(slot)}"/> to a <see cref="{cref}" />.',
        )
        writer.write_line(1, "/// </summary>")
        writer.write_line(1, '/// <param name="result">The result.</param>')
        writer.write_line(
            1,
            f"public static implicit operator {closed_type}({type_param(slot)} result) => new(result);",
        )

        if slot != arity:
            writer.write_line()
    writer.write_line()


def _write_populate_metadata(writer: IndentedWriter, arity: int) -> None:
    writer.write_line(1, "/// <inheritdoc/>")
    writer.write_line(
        1,
        f"static void {METADATA_PROVIDER_INTERFACE}.PopulateMetadata(EndpointMetadataContext context)",
    )
    writer.write_line(1, "{")
    writer.write_line(2, "ArgumentNullException.ThrowIfNull(context);")
    writer.write_line()
    for param in type_params(arity):
        writer.write_line(2, f"{METADATA_HELPER}<{param}>(context);")
    writer.write_line(1, "}")


def write_class_file(sink: TextIO, config: GeneratorConfig) -> None:
    """Emit the full class file: header, usings, namespace and the type family."""
    writer = IndentedWriter(sink)

    for line in config.header:
        writer.write_line(0, line)
    if config.header:
        writer.write_line()
    writer.write_line(0, config.generated_notice)
    writer.write_line()

    for using in CLASS_FILE_USINGS:
        writer.write_line(0, f"using {using};")
    writer.write_line()

    writer.write_line(0, f"namespace {config.class_namespace};")
    writer.write_line()

    emit_classes(sink, config.max_arity)
