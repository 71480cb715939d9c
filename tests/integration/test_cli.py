"""Integration tests for the check command."""

import json

import pytest
from click.testing import CliRunner

from resultsgen.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCheckCommand:
    def test_default_plan_passes(self, runner):
        result = runner.invoke(main, ["check"])

        assert result.exit_code == 0
        assert "Plan check passed" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(main, ["check", "--format", "json", "--max-arity", "4"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["issues"] == []

    def test_no_wrappers_warning(self, runner):
        result = runner.invoke(main, ["check", "--max-arity", "1"])

        assert result.exit_code == 0
        assert "NO_WRAPPERS" in result.output

    def test_strict_mode_fails_on_warning(self, runner):
        result = runner.invoke(main, ["check", "--max-arity", "1", "--strict"])
        assert result.exit_code == 1

    def test_arity_beyond_word_table(self, runner):
        result = runner.invoke(main, ["check", "--max-arity", "21"])

        assert result.exit_code == 2
        assert "Unsupported arity" in result.output

    def test_config_file(self, runner, config_file):
        result = runner.invoke(main, ["check", "--config", str(config_file), "--format", "json"])
        assert result.exit_code == 0

    def test_invalid_config(self, runner, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("max_arity: 0\n")

        result = runner.invoke(main, ["check", "--config", str(config)])

        assert result.exit_code == 2
        assert "max_arity" in result.output

    def test_unparseable_config(self, runner, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("max_arity: [\n")

        result = runner.invoke(main, ["check", "--config", str(config)])

        assert result.exit_code == 2
        assert "Error loading config" in result.output

    def test_zero_max_arity_rejected(self, runner):
        result = runner.invoke(main, ["check", "--max-arity", "0"])
        assert result.exit_code == 2
