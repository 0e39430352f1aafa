"""Pydantic data models for extraction results.

All models are frozen after creation; results are computed per call and
never mutated.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .types import TokenKind


class TokenMatch(BaseModel):
    """A single token occurrence found in the input text."""

    kind: TokenKind
    text: str  # includes the sigil
    start: int = Field(ge=0)
    end: int = Field(ge=0)  # exclusive

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_span(self) -> "TokenMatch":
        if self.end - self.start != len(self.text):
            raise ValueError(
                f"span {self.start}:{self.end} does not fit token {self.text!r}"
            )
        if not self.text.startswith(self.kind.sigil):
            raise ValueError(f"token {self.text!r} must start with '{self.kind.sigil}'")
        return self

    @property
    def name(self) -> str:
        """Token text without its sigil."""
        return self.text[1:]


class MentionsHashtags(BaseModel):
    """Unique mentions and hashtags, in order of first occurrence."""

    mentions: list[str] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        """Check if nothing was extracted."""
        return not self.mentions and not self.hashtags

    @property
    def total(self) -> int:
        """Number of distinct tokens across both lists."""
        return len(self.mentions) + len(self.hashtags)

    def get(self, kind: TokenKind) -> list[str]:
        """Return the token list for one kind."""
        if kind == TokenKind.MENTION:
            return self.mentions
        return self.hashtags

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dictionary."""
        return {
            "mentions": list(self.mentions),
            "hashtags": list(self.hashtags),
        }
