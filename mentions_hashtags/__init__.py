"""Social Mentions and Hashtags Extractor.

A lightweight library for extracting unique @mentions and #hashtags from
social-media-style text (captions, video descriptions, comments).
"""

__version__ = "0.1.0"

from .core.exceptions import ConfigurationError, ExtractionError, MentionsHashtagsError
from .core.models import MentionsHashtags, TokenMatch
from .core.types import TokenKind
from .extractor import (
    TokenExtractor,
    parse_hashtags,
    parse_mentions,
    parse_mentions_hashtags,
)

__all__ = [
    "MentionsHashtags",
    "TokenMatch",
    "TokenKind",
    "TokenExtractor",
    "parse_mentions_hashtags",
    "parse_mentions",
    "parse_hashtags",
    "MentionsHashtagsError",
    "ExtractionError",
    "ConfigurationError",
]
