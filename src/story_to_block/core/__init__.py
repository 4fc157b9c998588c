"""Token config model, validation, and error types."""

from .config import CONFIG_FILE, VALID_CATEGORIES, get_config_path, load_config, validate_config
from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ResourceMissingError,
    StbError,
    ValidationKind,
)
from .tokens import (
    CATEGORY_CSS_SEGMENT,
    WP_PRESET_MAPPING,
    NamedToken,
    StbConfig,
    TokenCategory,
    TokenEntry,
    TokenGroup,
    UnnamedToken,
    css_variable_name,
)

__all__ = [
    # Config
    "CONFIG_FILE",
    "VALID_CATEGORIES",
    "get_config_path",
    "load_config",
    "validate_config",
    # Errors
    "StbError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ResourceMissingError",
    "ValidationKind",
    # Tokens
    "CATEGORY_CSS_SEGMENT",
    "WP_PRESET_MAPPING",
    "NamedToken",
    "StbConfig",
    "TokenCategory",
    "TokenEntry",
    "TokenGroup",
    "UnnamedToken",
    "css_variable_name",
]
