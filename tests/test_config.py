"""Tests for configuration loading."""

import pytest

from mentions_hashtags.core.config import (
    ENV_PREFIX,
    ExtractorConfig,
    get_config,
    reload_config,
)
from mentions_hashtags.core.exceptions import ConfigurationError
from mentions_hashtags.core.types import OUTPUT_FORMATS, OutputFormatType
from mentions_hashtags.extractor import parse_hashtags, reset_default_extractor


class TestExtractorConfig:
    """Tests for ExtractorConfig class."""

    def test_defaults(self):
        """Test default settings."""
        config = ExtractorConfig()
        assert config.strip_trailing_periods is True
        assert config.extra_allowed_chars == ""
        assert config.output_format == "table"

    def test_invalid_output_format(self):
        """Test that unknown output formats are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            ExtractorConfig(output_format="xml")
        assert exc_info.value.config_key == "output_format"

    def test_from_dict(self):
        """Test building from a mapping."""
        config = ExtractorConfig.from_dict({
            "strip_trailing_periods": "no",
            "extra_allowed_chars": "'",
            "output_format": "JSON",
            "unknown_key": 1,
        })
        assert config.strip_trailing_periods is False
        assert config.extra_allowed_chars == "'"
        assert config.output_format == "json"

    def test_output_format_type_matches_formats(self):
        """Test that the output format annotation lists every known format."""
        from typing import get_args, get_type_hints

        hints = get_type_hints(ExtractorConfig)
        assert hints["output_format"] is OutputFormatType
        assert set(get_args(OutputFormatType)) == set(OUTPUT_FORMATS)

    def test_from_dict_bad_bool(self):
        """Test that unparseable booleans are rejected."""
        with pytest.raises(ConfigurationError):
            ExtractorConfig.from_dict({"strip_trailing_periods": "maybe"})


class TestYamlConfig:
    """Tests for YAML config files."""

    def test_load_yaml(self, tmp_path):
        """Test loading the extractor section."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "extractor:\n"
            "  strip_trailing_periods: false\n"
            "  output_format: csv\n",
            encoding="utf-8",
        )

        config = ExtractorConfig.from_yaml(path)
        assert config.strip_trailing_periods is False
        assert config.output_format == "csv"

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test that a missing file falls back to defaults."""
        config = ExtractorConfig.from_yaml(tmp_path / "missing.yaml")
        assert config == ExtractorConfig()

    def test_empty_file_uses_defaults(self, tmp_path):
        """Test that an empty file falls back to defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ExtractorConfig.from_yaml(path) == ExtractorConfig()

    def test_invalid_yaml(self, tmp_path):
        """Test that broken YAML raises ConfigurationError."""
        path = tmp_path / "broken.yaml"
        path.write_text("extractor: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ExtractorConfig.from_yaml(path)

    def test_non_mapping_yaml(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ExtractorConfig.from_yaml(path)

    def test_non_mapping_section(self, tmp_path):
        """Test that a scalar extractor section is rejected."""
        path = tmp_path / "scalar.yaml"
        path.write_text("extractor: 3\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ExtractorConfig.from_yaml(path)
        assert exc_info.value.config_key == "extractor"


class TestEnvironmentConfig:
    """Tests for environment overrides."""

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        """Test that environment variables win over the file."""
        path = tmp_path / "config.yaml"
        path.write_text("extractor:\n  output_format: csv\n", encoding="utf-8")
        monkeypatch.setenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "json")
        monkeypatch.setenv(f"{ENV_PREFIX}STRIP_TRAILING_PERIODS", "0")

        config = ExtractorConfig.load(path)
        assert config.output_format == "json"
        assert config.strip_trailing_periods is False

    def test_bad_env_bool(self, monkeypatch):
        """Test that invalid boolean env values are rejected."""
        monkeypatch.setenv(f"{ENV_PREFIX}STRIP_TRAILING_PERIODS", "sometimes")

        with pytest.raises(ConfigurationError):
            ExtractorConfig.load()

    def test_dotenv_file(self, tmp_path, monkeypatch):
        """Test loading overrides from a .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text(f"{ENV_PREFIX}EXTRA_ALLOWED_CHARS=+\n", encoding="utf-8")
        monkeypatch.setenv(f"{ENV_PREFIX}EXTRA_ALLOWED_CHARS", "")
        monkeypatch.delenv(f"{ENV_PREFIX}EXTRA_ALLOWED_CHARS")

        config = ExtractorConfig.load(env_file=env_file)
        assert config.extra_allowed_chars == "+"

    def test_global_config_drives_default_extractor(self, monkeypatch):
        """Test that module-level parsing follows the global config."""
        assert parse_hashtags("#go_crazy.") == ["#go_crazy"]

        monkeypatch.setenv(f"{ENV_PREFIX}STRIP_TRAILING_PERIODS", "false")
        reload_config()
        reset_default_extractor()

        assert get_config().strip_trailing_periods is False
        assert parse_hashtags("#go_crazy.") == ["#go_crazy."]
