"""Tests for schema loader."""

import pytest

from flownet.schema.errors import SchemaLoadError, SchemaValidationError
from flownet.schema.loader import load_yaml, parse_network, parse_network_from_string


class TestLoadYaml:
    def test_load_valid_yaml(self, tmp_path):
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text("key: value\nlist:\n  - item1\n  - item2")

        data = load_yaml(yaml_file)
        assert data["key"] == "value"
        assert data["list"] == ["item1", "item2"]

    def test_file_not_found(self):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml("/nonexistent/path.yaml")
        assert "not found" in str(exc_info.value).lower()

    def test_not_a_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(tmp_path)
        assert exc_info.value.path == str(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("key: [unclosed bracket")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "Invalid YAML" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_yaml(yaml_file) == {}

    def test_non_mapping_at_root(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- item1\n- item2")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_yaml(yaml_file)
        assert "mapping" in str(exc_info.value).lower()


class TestParseNetwork:
    def test_parse_example(self, examples_dir):
        model = parse_network(examples_dir / "pipeline.yaml")

        assert model.name == "pipeline"
        assert len(model.edges) == 3

    def test_parse_empty_string(self):
        model = parse_network_from_string("")

        assert model.edges == []
        assert model.vertices == []

    def test_parse_non_mapping_string(self):
        with pytest.raises(SchemaLoadError):
            parse_network_from_string("- a\n- b")

    def test_negative_capacity(self):
        yaml_str = """
edges:
  - from: a
    to: b
    capacity: -1
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_network_from_string(yaml_str)

        assert exc_info.value.errors[0]["loc"] == "edges.0.capacity"

    def test_nan_flow(self):
        yaml_str = """
edges:
  - from: a
    to: b
    capacity: 5
    flow: .nan
"""
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_network_from_string(yaml_str)

        assert exc_info.value.errors[0]["loc"] == "edges.0.flow"

    def test_missing_endpoint(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_network_from_string("edges:\n  - from: a\n")

        locs = [err["loc"] for err in exc_info.value.errors]
        assert "edges.0.to" in locs

    def test_errors_carry_loc_msg_and_type(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_network_from_string("edges:\n  - from: a\n    to: b\n    flow: -2\n")

        error = exc_info.value.errors[0]
        assert set(error) == {"loc", "msg", "type"}
        assert error["loc"] == "edges.0.flow"
        assert "1 error(s)" in str(exc_info.value)
