"""Token extraction module.

Finds @mentions and #hashtags in free text.
"""

from .parser import (
    TokenExtractor,
    build_pattern,
    dedupe_preserving_order,
    get_default_extractor,
    parse_hashtags,
    parse_mentions,
    parse_mentions_hashtags,
    reset_default_extractor,
)

__all__ = [
    "TokenExtractor",
    "build_pattern",
    "dedupe_preserving_order",
    "get_default_extractor",
    "reset_default_extractor",
    "parse_mentions_hashtags",
    "parse_mentions",
    "parse_hashtags",
]
