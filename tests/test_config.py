"""Tests for configuration models."""

from pathlib import Path

import pytest
from chatpull.models.config import ExportConfig, OutputConfig, SelectorConfig
from pydantic import ValidationError


class TestExportConfig:
    """Tests for ExportConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ExportConfig()
        assert config.selectors.turn == 'article[data-testid^="conversation-turn-"]'
        assert config.selectors.role_attribute == "data-message-author-role"
        assert config.headings.user == "##### You said:"
        assert config.headings.assistant == "###### ChatGPT said:"
        assert config.output.directory == Path("./exports")
        assert config.output.overwrite is True
        assert config.default_title == "conversation"
        assert config.log_level == "INFO"
        assert config.dry_run is False

    def test_nested_dicts(self):
        """Test sections can be given as plain dicts."""
        config = ExportConfig(output={"directory": "/tmp/chats"}, headings={"user": "### Me"})
        assert config.output.directory == Path("/tmp/chats")
        assert config.headings.user == "### Me"
        assert config.headings.assistant == "###### ChatGPT said:"

    def test_extra_fields_forbidden(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ValidationError):
            ExportConfig(unknown=True)
        with pytest.raises(ValidationError):
            SelectorConfig(thread="#thread")

    def test_invalid_values(self):
        """Test field validation."""
        with pytest.raises(ValidationError):
            ExportConfig(log_level="TRACE")
        with pytest.raises(ValidationError):
            ExportConfig(default_title="")
        with pytest.raises(ValidationError):
            OutputConfig(extension="md")


class TestYaml:
    """Tests for YAML loading and saving."""

    @pytest.fixture(autouse=True)
    def _require_yaml(self):
        pytest.importorskip("yaml")

    def test_round_trip(self):
        """Test to_yaml output loads back to an equal config."""
        config = ExportConfig(default_title="untitled", headings={"assistant": "### Bot"})
        assert ExportConfig.from_yaml(config.to_yaml()) == config

    def test_from_yaml_file(self, tmp_path):
        """Test loading from a file."""
        path = tmp_path / "chatpull.yaml"
        path.write_text("output:\n  directory: ./chats\n  overwrite: false\nlog_level: DEBUG\n", encoding="utf-8")

        config = ExportConfig.from_yaml_file(path)

        assert config.output.directory == Path("./chats")
        assert config.output.overwrite is False
        assert config.log_level == "DEBUG"

    def test_empty_yaml(self):
        """Test an empty document yields defaults."""
        assert ExportConfig.from_yaml("") == ExportConfig()
