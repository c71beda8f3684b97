"""Tests for loading documents, configuration and scenarios from files."""

import json

import pytest
from deepmatch import (
    ConfigurationError,
    LoaderError,
    MatchingStatus,
    compare_scenario,
    load_config,
    load_document,
    load_scenario,
)


class TestLoadDocument:
    """Test loading of value trees."""

    def test_json_file(self, tmp_path):
        """Test that JSON files are loaded."""
        path = tmp_path / "value.json"
        path.write_text(json.dumps({"name": "Raghav", "ids": [1, 2]}))
        assert load_document(path) == {"name": "Raghav", "ids": [1, 2]}

    def test_yaml_file(self, tmp_path):
        """Test that YAML files are loaded."""
        path = tmp_path / "value.yaml"
        path.write_text("name: Raghav\nids:\n  - 1\n  - 2\n")
        assert load_document(str(path)) == {"name": "Raghav", "ids": [1, 2]}

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        with pytest.raises(LoaderError) as exc_info:
            load_document(tmp_path / "missing.yaml")
        assert exc_info.value.reason == "file not found"

    def test_parse_error(self, tmp_path):
        """Test that unparsable content is reported."""
        path = tmp_path / "broken.yaml"
        path.write_text("a: [1, 2\n")
        with pytest.raises(LoaderError):
            load_document(path)


class TestLoadConfig:
    """Test loading of configuration trees."""

    def test_valid_config(self, tmp_path):
        """Test that a YAML tree becomes a validated node."""
        path = tmp_path / "ignored.yaml"
        path.write_text("name: true\nadd:\n  landmark: true\n")
        node = load_config(path)
        assert node.is_leaf("name")
        assert node.child("add").is_leaf("landmark")

    def test_invalid_config(self, tmp_path):
        """Test that invalid leaves are rejected after loading."""
        path = tmp_path / "ignored.yaml"
        path.write_text("name: 'yes'\n")
        with pytest.raises(ConfigurationError):
            load_config(path)


class TestScenario:
    """Test scenario files."""

    def test_business_key_scenario(self, tmp_path):
        """Test a scenario using the camel-case key name."""
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps({
            "expected": [
                {"name": "Raghav", "id": 1234, "No": 654321},
                {"name": "Chandra", "id": 1, "No": 987654321},
            ],
            "actual": [
                {"name": "Chandra", "id": 1234, "No": 987654321},
            ],
            "businessKey": {"id": True},
        }))

        result = compare_scenario(path)
        assert result.status == MatchingStatus.FAIL
        assert result["0"].status == MatchingStatus.KEY_MATCH
        assert result["1"].status == MatchingStatus.NOT_EXISTS

    def test_ignored_scenario(self, tmp_path):
        """Test a YAML scenario with an ignore tree."""
        path = tmp_path / "scenario.yaml"
        path.write_text(
            "expected:\n"
            "  id: 1\n"
            "  timestamp: '2025-01-01'\n"
            "actual:\n"
            "  id: 1\n"
            "  timestamp: '2025-02-02'\n"
            "ignored:\n"
            "  timestamp: true\n"
        )
        scenario = load_scenario(path)
        assert scenario["business_key"] is None
        assert compare_scenario(path).is_match

    def test_missing_keys(self, tmp_path):
        """Test that expected and actual are required."""
        path = tmp_path / "scenario.yaml"
        path.write_text("expected: 1\n")
        with pytest.raises(LoaderError) as exc_info:
            load_scenario(path)
        assert "actual" in exc_info.value.reason

    def test_not_a_mapping(self, tmp_path):
        """Test that a scenario must be a mapping."""
        path = tmp_path / "scenario.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(LoaderError):
            load_scenario(path)
