"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from flownet.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestValidateCommand:
    def test_validate_valid_file(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "pipeline.yaml")]
        )

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_validate_with_warnings(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "invalid" / "loop_and_parallel.yaml")],
        )

        # Warnings don't cause failure by default
        assert result.exit_code == 0
        assert "LOOP_EDGE" in result.output
        assert "SATURATED_EDGE" in result.output

    def test_validate_strict_mode(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "invalid" / "loop_and_parallel.yaml"),
                "--strict",
            ],
        )

        assert result.exit_code == 1

    def test_validate_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "pipeline.yaml"), "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["warning_count"] == 0

    def test_validate_format_from_env(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "pipeline.yaml")],
            env={"FLOWNET_FORMAT": "json"},
        )

        assert json.loads(result.output)["valid"] is True

    def test_validate_schema_error(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "invalid" / "flow_exceeds_capacity.yaml")],
        )

        assert result.exit_code == 2
        assert "edges.0" in result.output

    def test_validate_invalid_yaml(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("edges: [unclosed")

        result = runner.invoke(main, ["validate", str(bad)])

        assert result.exit_code == 2
        assert "Error loading file" in result.output

    def test_validate_missing_file(self, runner):
        result = runner.invoke(main, ["validate", "/nonexistent.yaml"])

        assert result.exit_code == 2


class TestEdgesCommand:
    def test_edges_text(self, runner, examples_dir):
        result = runner.invoke(main, ["edges", str(examples_dir / "pipeline.yaml")])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["EDGE", "WEIGHT", "CAPACITY", "FLOW", "REMAINING"]
        assert "source -> pump" in lines[1]
        assert lines[1].split()[-1] == "6"
        assert "pump -- tank" in result.output
        assert "3 edge(s)" in result.output

    def test_edges_json(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["edges", str(examples_dir / "pipeline.yaml"), "--format", "json"],
        )

        assert result.exit_code == 0
        edges = json.loads(result.output)["edges"]
        assert edges[0] == {
            "edge": "source -> pump",
            "directed": True,
            "weight": 2,
            "capacity": 10,
            "flow": 4,
            "remaining": 6,
        }
        assert edges[2]["directed"] is False
        assert edges[2]["remaining"] is None

    def test_verbose_flag(self, runner, examples_dir):
        result = runner.invoke(
            main, ["-v", "edges", str(examples_dir / "pipeline.yaml")]
        )

        assert result.exit_code == 0
        assert "source -> pump" in result.output
