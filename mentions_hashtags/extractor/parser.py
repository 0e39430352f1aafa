"""Mention and hashtag parser.

Scans free text for social tokens:
- "@charlidamelio @Khaby.Lame"      -> mentions
- "#fyp #CapCut #Challenge-2025"    -> hashtags

A token is a sigil followed by one or more letters, digits, "_", "-" or ".".
The first character outside that set ends the token, so trailing commas,
exclamation marks and brackets never leak into it.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from ..core.config import ExtractorConfig, get_config
from ..core.exceptions import ExtractionError
from ..core.models import MentionsHashtags, TokenMatch
from ..core.types import ALLOWED_CHARS, TokenKind

logger = logging.getLogger(__name__)


def build_pattern(sigil: str, extra_allowed_chars: str = "") -> str:
    """Build the regex source for tokens introduced by ``sigil``."""
    extra = re.escape(extra_allowed_chars) if extra_allowed_chars else ""
    return f"{re.escape(sigil)}[{ALLOWED_CHARS}{extra}]+"


def dedupe_preserving_order(items: Iterable[str]) -> list[str]:
    """Drop repeated strings, keeping the first occurrence of each."""
    seen: set[str] = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


class TokenExtractor:
    """Extracts unique mentions and hashtags from text."""

    def __init__(self, config: ExtractorConfig | None = None):
        """
        Initialize the extractor.

        Args:
            config: Extraction settings. Defaults to ``ExtractorConfig()``.

        Raises:
            ExtractionError: If a token pattern fails to compile.
        """
        self.config = config or ExtractorConfig()
        self._compiled: dict[TokenKind, re.Pattern] = {}
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Pre-compile one pattern per token kind."""
        for kind in TokenKind:
            pattern = build_pattern(kind.sigil, self.config.extra_allowed_chars)
            try:
                self._compiled[kind] = re.compile(pattern)
            except re.error as e:
                raise ExtractionError(pattern, str(e)) from e
            logger.debug(f"Compiled {kind.value} pattern: {pattern}")

    def _trim(self, token: str) -> str:
        """Trim sentence-final periods, keeping period-only tokens intact."""
        if not self.config.strip_trailing_periods:
            return token
        trimmed = token.rstrip(".")
        # A sigil alone is not a token
        if len(trimmed) > 1:
            return trimmed
        return token

    @staticmethod
    def _check_text(text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")

    def iter_tokens(self, text: str, kind: TokenKind) -> Iterator[TokenMatch]:
        """Yield every token occurrence of ``kind``, left to right."""
        self._check_text(text)

        for match in self._compiled[kind].finditer(text):
            token = self._trim(match.group())
            start = match.start()
            yield TokenMatch(kind=kind, text=token, start=start, end=start + len(token))

    def find_tokens(self, text: str, kind: TokenKind) -> list[TokenMatch]:
        """
        Find all occurrences of one token kind, duplicates included.

        Args:
            text: Input text
            kind: Token kind to scan for

        Returns:
            List of TokenMatch in scan order
        """
        return list(self.iter_tokens(text, kind))

    def extract_tokens(
        self,
        text: str,
        want_mentions: bool = True,
        want_hashtags: bool = True,
    ) -> list[TokenMatch]:
        """All requested occurrences of both kinds, ordered by position."""
        self._check_text(text)
        matches: list[TokenMatch] = []
        if want_mentions:
            matches.extend(self.iter_tokens(text, TokenKind.MENTION))
        if want_hashtags:
            matches.extend(self.iter_tokens(text, TokenKind.HASHTAG))
        matches.sort(key=lambda m: m.start)
        return matches

    def unique(self, text: str, kind: TokenKind) -> list[str]:
        """Unique tokens of one kind in first-seen order."""
        self._check_text(text)
        return dedupe_preserving_order(
            self._trim(match.group()) for match in self._compiled[kind].finditer(text)
        )

    def extract(
        self,
        text: str,
        want_mentions: bool = True,
        want_hashtags: bool = True,
    ) -> MentionsHashtags:
        """
        Extract unique mentions and/or hashtags.

        Tokens keep their original casing, so "@Music" and "@music" are
        both returned. With both flags off the result is simply empty.

        Args:
            text: Input text (caption, description, comment)
            want_mentions: Whether to extract @mentions
            want_hashtags: Whether to extract #hashtags

        Returns:
            MentionsHashtags with both lists
        """
        self._check_text(text)

        mentions = self.unique(text, TokenKind.MENTION) if want_mentions else []
        hashtags = self.unique(text, TokenKind.HASHTAG) if want_hashtags else []

        logger.debug(
            f"Extracted {len(mentions)} mentions, {len(hashtags)} hashtags "
            f"from {len(text)} chars"
        )
        return MentionsHashtags(mentions=mentions, hashtags=hashtags)

    def extract_many(
        self,
        texts: Iterable[str],
        want_mentions: bool = True,
        want_hashtags: bool = True,
    ) -> MentionsHashtags:
        """
        Extract from several texts at once.

        Deduplication and first-seen order apply across the whole batch.
        """
        mentions: list[str] = []
        hashtags: list[str] = []
        count = 0

        for text in texts:
            result = self.extract(text, want_mentions, want_hashtags)
            mentions.extend(result.mentions)
            hashtags.extend(result.hashtags)
            count += 1

        logger.debug(f"Processed batch of {count} texts")
        return MentionsHashtags(
            mentions=dedupe_preserving_order(mentions),
            hashtags=dedupe_preserving_order(hashtags),
        )


# Default extractor instance (lazy loaded)
_default_extractor: TokenExtractor | None = None


def get_default_extractor() -> TokenExtractor:
    """Get the extractor used by the module-level parse functions."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = TokenExtractor(get_config())
    return _default_extractor


def reset_default_extractor() -> None:
    """Drop the default extractor so it is rebuilt from current config."""
    global _default_extractor
    _default_extractor = None


def parse_mentions_hashtags(
    text: str,
    want_mentions: bool,
    want_hashtags: bool,
) -> MentionsHashtags:
    """
    Parse text and extract mentions and/or hashtags.

    Example:
        >>> result = parse_mentions_hashtags("@MrBeast check the #fyp!", True, True)
        >>> result.mentions, result.hashtags
        (['@MrBeast'], ['#fyp'])
    """
    return get_default_extractor().extract(text, want_mentions, want_hashtags)


def parse_mentions(text: str) -> list[str]:
    """Extract unique @mentions from text."""
    return parse_mentions_hashtags(text, True, False).mentions


def parse_hashtags(text: str) -> list[str]:
    """Extract unique #hashtags from text."""
    return parse_mentions_hashtags(text, False, True).hashtags
