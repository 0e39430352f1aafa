"""Core module - data models, types, configuration and exceptions."""

from .models import MentionsHashtags, TokenMatch
from .types import OUTPUT_FORMATS, OutputFormatType, TokenKind
from .exceptions import (
    MentionsHashtagsError,
    ExtractionError,
    ConfigurationError,
)
from .config import ExtractorConfig, get_config, reload_config

__all__ = [
    # Models
    "MentionsHashtags",
    "TokenMatch",
    # Types
    "TokenKind",
    "OutputFormatType",
    "OUTPUT_FORMATS",
    # Exceptions
    "MentionsHashtagsError",
    "ExtractionError",
    "ConfigurationError",
    # Config
    "ExtractorConfig",
    "get_config",
    "reload_config",
]
