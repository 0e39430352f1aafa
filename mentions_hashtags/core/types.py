"""Type definitions and enums for the extractor."""

from enum import Enum
from typing import Literal


class TokenKind(str, Enum):
    """Kinds of social tokens, keyed by their sigil character."""

    MENTION = "mention"
    HASHTAG = "hashtag"

    @property
    def sigil(self) -> str:
        """Leading character that introduces a token of this kind."""
        sigils = {
            TokenKind.MENTION: "@",
            TokenKind.HASHTAG: "#",
        }
        return sigils[self]

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        names = {
            TokenKind.MENTION: "Mentions",
            TokenKind.HASHTAG: "Hashtags",
        }
        return names.get(self, self.value)


# Characters allowed after the sigil
ALLOWED_CHARS = "A-Za-z0-9_\\-."

OutputFormatType = Literal["table", "json", "csv"]
OUTPUT_FORMATS: tuple[str, ...] = ("table", "json", "csv")
