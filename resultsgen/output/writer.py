"""Render generated sources and write them to their target files."""

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ..class_generator.generator import write_class_file
from ..config.errors import ConfigurationError
from ..config.models import GeneratorConfig
from ..test_generator.generator import plan_test_suite, write_test_file
from ..validators.runner import run_validators
from .errors import InvalidPlanError, OutputNotWrittenError


@dataclass
class WrittenFile:
    """A target file that was written and verified."""

    path: Path
    size: int


@dataclass
class GenerationReport:
    """Summary of a completed generation run."""

    max_arity: int
    wrapper_count: int
    test_count: int
    files: list[WrittenFile] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(f.size for f in self.files)


def render_class_file(config: GeneratorConfig) -> str:
    """Return the complete class file for config."""
    buffer = io.StringIO()
    write_class_file(buffer, config)
    return buffer.getvalue()


def render_test_file(config: GeneratorConfig) -> str:
    """Return the complete test file for config."""
    buffer = io.StringIO()
    write_test_file(buffer, config)
    return buffer.getvalue()


def resolve_targets(
    paths: Sequence[str | Path], config: GeneratorConfig, cwd: Path | None = None
) -> tuple[Path, Path]:
    """Resolve the class and test target paths.

    With no paths the config defaults are taken relative to cwd. Otherwise both
    paths must be given.

    Args:
        paths: Zero or two paths from the command line.
        config: Configuration supplying default file names.
        cwd: Base directory for defaults; the process working directory if None.

    Returns:
        Tuple of (class file path, test file path).

    Raises:
        ConfigurationError: If any other number of paths is given.
    """
    if not paths:
        base = cwd if cwd is not None else Path.cwd()
        return base / config.class_file, base / config.tests_file

    if len(paths) != 2:
        raise ConfigurationError(
            f"Invalid number of paths specified ({len(paths)}). Must specify both "
            "class file path and test file path if paths are passed."
        )

    return Path(paths[0]), Path(paths[1])


def write_target(path: str | Path, content: str) -> WrittenFile:
    """Replace a target file with content and verify it landed.

    The file is always closed before verification. If writing fails the partial
    file is removed so it cannot be mistaken for complete output. A target that
    could not be opened is left as it was.

    Args:
        path: Target file path. Parent directories are created.
        content: Full file content.

    Returns:
        WrittenFile with the verified size in bytes.

    Raises:
        OutputNotWrittenError: If the file is missing or empty afterwards.
        OSError: If the file cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    opened = False
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            opened = True
            f.write(content)
    except OSError:
        if opened and path.is_file():
            path.unlink()
        raise

    if not path.is_file():
        raise OutputNotWrittenError(path)

    size = path.stat().st_size
    if size == 0:
        raise OutputNotWrittenError(path)

    return WrittenFile(path=path, size=size)


def generate_files(
    class_path: str | Path, tests_path: str | Path, config: GeneratorConfig
) -> GenerationReport:
    """Generate both target files for config.

    Both sources are rendered in memory before anything is written, so a
    formatter or planning failure leaves existing files untouched.

    Args:
        class_path: Target for the wrapper type family.
        tests_path: Target for the generated test suite.
        config: Generation settings.

    Returns:
        GenerationReport describing the written files.

    Raises:
        UnsupportedValueError: If an arity has no English word form.
        InvalidPlanError: If the planned test suite is inconsistent.
        OutputNotWrittenError: If a target is missing or empty after writing.
    """
    plan = plan_test_suite(config.max_arity)
    result = run_validators(plan)
    if result.has_errors:
        raise InvalidPlanError(result)

    class_source = render_class_file(config)
    test_source = render_test_file(config)

    report = GenerationReport(
        max_arity=config.max_arity,
        wrapper_count=max(config.max_arity - 1, 0),
        test_count=plan.total_tests,
    )
    report.files.append(write_target(class_path, class_source))
    report.files.append(write_target(tests_path, test_source))
    return report
