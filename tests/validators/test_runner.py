"""Tests for check runner."""

import pytest

from flownet.graph.builder import build_graph
from flownet.schema.errors import SchemaValidationError
from flownet.validators.runner import run_checks, validate_network_file


class TestRunChecks:
    def test_clean_network(self, network_model):
        graph = build_graph(network_model)

        result = run_checks(graph)

        assert result.is_valid
        assert not result.has_warnings

    def test_collects_from_all_checks(self, graph, vertices):
        a, b, _ = vertices
        a.create_edge_to(a)
        a.create_edge_to(b).set_capacity(5)
        a.create_edge_to(b).set_capacity(5).set_flow(5)

        result = run_checks(graph)

        codes = {issue.code for issue in result.issues}
        assert codes == {"UNTRACKED_FLOW", "LOOP_EDGE", "PARALLEL_EDGE", "SATURATED_EDGE"}


class TestValidateNetworkFile:
    def test_validate_valid_file(self, examples_dir):
        result = validate_network_file(examples_dir / "pipeline.yaml")

        assert result.is_valid
        assert not result.has_warnings

    def test_validate_warnings_file(self, examples_dir):
        result = validate_network_file(
            examples_dir / "invalid" / "loop_and_parallel.yaml"
        )

        codes = [w.code for w in result.warnings]
        assert sorted(codes) == ["LOOP_EDGE", "PARALLEL_EDGE", "UNTRACKED_FLOW"]

    def test_validate_flow_exceeds_capacity(self, examples_dir):
        with pytest.raises(SchemaValidationError):
            validate_network_file(
                examples_dir / "invalid" / "flow_exceeds_capacity.yaml"
            )
