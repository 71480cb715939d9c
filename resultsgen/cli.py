"""Command-line interface for resultsgen."""

import sys

import click

from .config.errors import ConfigLoadError, ConfigValidationError, ConfigurationError
from .config.loader import load_config
from .output.errors import InvalidPlanError, OutputNotWrittenError
from .output.formatter import format_generation_report, format_validation_result
from .text.errors import UnsupportedValueError


def _load_config_or_exit(config_file: str | None, max_arity: int | None):
    try:
        return load_config(config_file, max_arity)
    except ConfigLoadError as e:
        click.echo(f"Error loading config: {e}", err=True)
        sys.exit(2)
    except ConfigValidationError as e:
        click.echo(f"Config validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option()
def main():
    """resultsgen: generates the Results<TResult1, ...> type family and its tests."""
    pass


@main.command()
@click.argument("paths", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML config file",
)
@click.option(
    "--max-arity",
    type=click.IntRange(min=1),
    default=None,
    help="Largest arity to generate (overrides the config file)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["files", "text"]),
    default="files",
    help="Output format: 'files' writes both targets, 'text' prints them to stdout",
)
def generate(
    paths: tuple[str, ...],
    config_file: str | None,
    max_arity: int | None,
    output_format: str,
):
    """Generate the wrapper class file and its test file.

    PATHS is either empty, to use the configured file names relative to the
    current directory, or exactly CLASS_FILE TESTS_FILE.

    Exit codes:
      0 - Success
      1 - Planned tests failed consistency checks
      2 - Invocation, config, arity or file error
    """
    from .output.writer import (
        generate_files,
        render_class_file,
        render_test_file,
        resolve_targets,
    )

    config = _load_config_or_exit(config_file, max_arity)

    try:
        class_path, tests_path = resolve_targets(paths, config)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if output_format == "text":
        labels = paths or (config.class_file, config.tests_file)
        try:
            sources = [
                (labels[0], render_class_file(config)),
                (labels[1], render_test_file(config)),
            ]
        except UnsupportedValueError as e:
            click.echo(f"Unsupported arity: {e}", err=True)
            sys.exit(2)

        for filename, source in sources:
            click.echo(f"// {'=' * 70}")
            click.echo(f"// {filename}")
            click.echo(f"// {'=' * 70}")
            click.echo()
            click.echo(source, nl=False)
            click.echo()
        sys.exit(0)

    click.echo(f"Will generate class file at {class_path}")
    click.echo(f"Will generate tests file at {tests_path}")

    try:
        report = generate_files(class_path, tests_path, config)
    except UnsupportedValueError as e:
        click.echo(f"Unsupported arity: {e}", err=True)
        sys.exit(2)
    except InvalidPlanError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(format_validation_result(e.result), err=True)
        sys.exit(1)
    except OutputNotWrittenError as e:
        click.echo(f"Output error: {e}", err=True)
        sys.exit(2)
    except OSError as e:
        click.echo(f"Cannot write file: {e}", err=True)
        sys.exit(2)

    click.echo()
    click.echo(format_generation_report(report))
    sys.exit(0)


@main.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML config file",
)
@click.option(
    "--max-arity",
    type=click.IntRange(min=1),
    default=None,
    help="Largest arity to check (overrides the config file)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def check(
    config_file: str | None, max_arity: int | None, output_format: str, strict: bool
):
    """Check the planned test suite for naming and coverage consistency.

    Exit codes:
      0 - Checks passed
      1 - Checks failed (errors found)
      2 - Config or arity error
    """
    from .validators.runner import validate_suite

    config = _load_config_or_exit(config_file, max_arity)

    try:
        result = validate_suite(config.max_arity)
    except UnsupportedValueError as e:
        click.echo(f"Unsupported arity: {e}", err=True)
        sys.exit(2)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


if __name__ == "__main__":
    main()
