"""Writing, verification and reporting of generated files."""

from .errors import GenerationError, InvalidPlanError, OutputNotWrittenError
from .formatter import format_generation_report, format_validation_result
from .writer import (
    GenerationReport,
    WrittenFile,
    generate_files,
    render_class_file,
    render_test_file,
    resolve_targets,
    write_target,
)

__all__ = [
    "GenerationError",
    "InvalidPlanError",
    "OutputNotWrittenError",
    "format_generation_report",
    "format_validation_result",
    "GenerationReport",
    "WrittenFile",
    "generate_files",
    "render_class_file",
    "render_test_file",
    "resolve_targets",
    "write_target",
]
