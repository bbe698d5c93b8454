"""
Unit tests for core.yaml module.

Tests:
- load_yaml() - YAML configuration file loading
  - Valid YAML files
  - Empty files
  - File not found
  - Unreadable and undecodable files
  - Invalid syntax and non-mapping documents
"""

from pathlib import Path

import pytest

from pingmole.core.exceptions import ConfigurationError
from pingmole.core.yaml import load_yaml


class TestLoadYaml:
    """load_yaml() with valid files."""

    def test_nested_sections(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "pingmole.yaml"
        yaml_file.write_text("filters:\n  distance: 800\n  protocol: wireguard\n")

        assert load_yaml(yaml_file) == {"filters": {"distance": 800, "protocol": "wireguard"}}

    def test_string_path(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "pingmole.yaml"
        yaml_file.write_text("probe:\n  count: 6\n")

        assert load_yaml(str(yaml_file)) == {"probe": {"count": 6}}

    def test_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert load_yaml(yaml_file) == {}

    def test_comments_only(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "comments.yaml"
        yaml_file.write_text("# nothing here\n")

        assert load_yaml(yaml_file) == {}


class TestLoadYamlErrors:
    """load_yaml() error handling."""

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_invalid_syntax(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("filters: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml(yaml_file)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_yaml(yaml_file)

    def test_unsafe_tags_rejected(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "unsafe.yaml"
        yaml_file.write_text("value: !!python/object/apply:os.system ['true']\n")

        with pytest.raises(ConfigurationError):
            load_yaml(yaml_file)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            load_yaml(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "binary.yaml"
        yaml_file.write_bytes(b"probe:\n  count: \xff\xfe\n")

        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            load_yaml(yaml_file)
