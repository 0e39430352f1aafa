"""Custom exceptions for the mentions and hashtags extractor."""


class MentionsHashtagsError(Exception):
    """Base exception for all extractor errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ExtractionError(MentionsHashtagsError):
    """Raised when a token pattern cannot be compiled."""

    def __init__(self, pattern: str, message: str):
        full_message = f"Failed to compile token pattern '{pattern}': {message}"
        super().__init__(full_message, {"pattern": pattern})
        self.pattern = pattern


class ConfigurationError(MentionsHashtagsError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
