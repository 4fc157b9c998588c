"""
Error types for story-to-block config loading, validation, and generation.
"""

from enum import StrEnum
from pathlib import Path


class StbError(Exception):
    """Base exception for all story-to-block errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(StbError):
    """
    Raised when the token config cannot be turned into an StbConfig.

    Subclasses distinguish a missing file, malformed JSON, and a
    schema violation.
    """

    pass


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is missing or unreadable."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid JSON."""

    def __init__(self, path: Path, detail: str | None = None):
        self.path = path
        message = f"Invalid JSON in config file: {path}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ValidationKind(StrEnum):
    """Which schema rule a config violated."""

    MISSING_PREFIX = "missing_prefix"
    INVALID_TOKENS = "invalid_tokens"
    UNKNOWN_CATEGORY = "unknown_category"
    INVALID_VALUE = "invalid_value"
    NAME_SLUG_MISMATCH = "name_slug_mismatch"
    INVALID_FIELD = "invalid_field"


class ConfigValidationError(ConfigError):
    """
    Raised when parsed config data breaks the token schema.

    Examples:
    - Missing or empty prefix
    - Unknown token category
    - Token without a value
    - Token with a name but no slug
    """

    def __init__(self, message: str, kind: ValidationKind):
        self.kind = kind
        super().__init__(f"Config error: {message}")


class ResourceMissingError(StbError, OSError):
    """Raised when a template bundled with the package cannot be read."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Bundled template not found: {path}")
