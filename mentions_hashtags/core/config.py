"""Configuration management for extractor settings.

Loads configuration from a YAML file, environment variables or a .env file.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .types import OUTPUT_FORMATS, OutputFormatType

logger = logging.getLogger(__name__)

ENV_PREFIX = "MENTIONS_HASHTAGS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(key: str, value: Any) -> bool:
    """Parse a boolean from YAML or environment input."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(key, f"expected a boolean, got {value!r}")


@dataclass(frozen=True)
class ExtractorConfig:
    """Settings for token extraction and output."""

    # Trim sentence-final periods from tokens ("#fyp." -> "#fyp")
    strip_trailing_periods: bool = True

    # Characters allowed in a token on top of letters, digits, "_", "-" and "."
    extra_allowed_chars: str = ""

    # Default output format for the CLI
    output_format: OutputFormatType = "table"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                "output_format",
                f"must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}",
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtractorConfig":
        """Build configuration from a mapping, ignoring unknown keys."""
        kwargs: dict[str, Any] = {}

        if "strip_trailing_periods" in data:
            kwargs["strip_trailing_periods"] = _parse_bool(
                "strip_trailing_periods", data["strip_trailing_periods"]
            )
        if data.get("extra_allowed_chars") is not None:
            kwargs["extra_allowed_chars"] = str(data["extra_allowed_chars"])
        if data.get("output_format") is not None:
            kwargs["output_format"] = str(data["output_format"]).lower()

        unknown = set(data) - {"strip_trailing_periods", "extra_allowed_chars", "output_format"}
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ExtractorConfig":
        """
        Load configuration from a YAML file.

        The file holds the settings under a top-level ``extractor`` key.
        A missing file falls back to defaults.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            ExtractorConfig instance
        """
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Config file not found: {config_path}, using defaults")
            return cls()
        except yaml.YAMLError as e:
            raise ConfigurationError(str(config_path), f"invalid YAML: {e}") from e

        if config is None:
            return cls()
        if not isinstance(config, dict):
            raise ConfigurationError(str(config_path), "top level must be a mapping")

        section = config.get("extractor", {})
        if not isinstance(section, dict):
            raise ConfigurationError("extractor", "section must be a mapping")

        logger.info(f"Loaded extractor config from {config_path}")
        return cls.from_dict(section)

    def with_env(self) -> "ExtractorConfig":
        """Return a copy with environment variable overrides applied."""
        overrides: dict[str, Any] = {}

        strip = os.getenv(f"{ENV_PREFIX}STRIP_TRAILING_PERIODS")
        if strip is not None:
            overrides["strip_trailing_periods"] = _parse_bool(
                f"{ENV_PREFIX}STRIP_TRAILING_PERIODS", strip
            )

        extra = os.getenv(f"{ENV_PREFIX}EXTRA_ALLOWED_CHARS")
        if extra is not None:
            overrides["extra_allowed_chars"] = extra

        output_format = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT")
        if output_format:
            overrides["output_format"] = output_format.strip().lower()

        if not overrides:
            return self
        return replace(self, **overrides)

    @classmethod
    def load(
        cls,
        config_path: Optional[Path] = None,
        env_file: Optional[Path] = None,
    ) -> "ExtractorConfig":
        """
        Load configuration from YAML, .env file and environment variables.

        Args:
            config_path: Optional path to a YAML config file.
            env_file: Optional path to .env file. If not provided,
                      looks for .env in the current working directory.

        Returns:
            ExtractorConfig instance with loaded values
        """
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        base = cls.from_yaml(Path(config_path)) if config_path else cls()
        return base.with_env()


# Global config instance (lazy loaded)
_config: Optional[ExtractorConfig] = None


def get_config() -> ExtractorConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ExtractorConfig.load()
    return _config


def reload_config(
    config_path: Optional[Path] = None,
    env_file: Optional[Path] = None,
) -> ExtractorConfig:
    """Reload configuration from file and environment."""
    global _config
    _config = ExtractorConfig.load(config_path, env_file)
    return _config
