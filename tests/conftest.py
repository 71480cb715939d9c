"""Shared fixtures for tests."""

import io

import pytest

from resultsgen.class_generator import emit_classes
from resultsgen.config.models import GeneratorConfig
from resultsgen.test_generator import emit_tests


@pytest.fixture
def render_classes():
    """Return a function rendering emit_classes output for a max arity."""

    def _render(max_arity: int) -> str:
        sink = io.StringIO()
        emit_classes(sink, max_arity)
        return sink.getvalue()

    return _render


@pytest.fixture
def render_tests():
    """Return a function rendering emit_tests output for a max arity."""

    def _render(max_arity: int) -> str:
        sink = io.StringIO()
        emit_tests(sink, max_arity)
        return sink.getvalue()

    return _render


@pytest.fixture
def default_config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def small_config_yaml() -> str:
    """Return a config YAML string for a small generation run."""
    return """
max_arity: 3
class_file: out/Results.Generated.cs
tests_file: out/ResultsTests.Generated.cs
class_namespace: Example.Results
test_namespace: Example.Results.Tests
test_class_name: ResultsTests
header: "// Example header"
generated_by: tools/resultsgen
"""


@pytest.fixture
def config_file(tmp_path, small_config_yaml):
    """Write the small config to disk and return its path."""
    path = tmp_path / "resultsgen.yaml"
    path.write_text(small_config_yaml)
    return path
