"""
story-to-block - design tokens to WordPress assets.

Compiles a declarative token config (stb.config.json) into tokens.css for
local development plus tokens.wp.css, theme.json and integrate.php for a
WordPress theme.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.config import load_config, validate_config
from .core.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ResourceMissingError,
    StbError,
)
from .core.tokens import NamedToken, StbConfig, TokenCategory, UnnamedToken
from .generators import (
    generate_integrate_php,
    generate_theme_json,
    generate_tokens_css,
    generate_tokens_wp_css,
)
from .runner import GeneratedFile, GenerateResult, generate, render_artifacts

# Version fallback when the package is not installed
_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return _metadata_version("story-to-block")
    except PackageNotFoundError:
        return _FALLBACK_VERSION


__version__ = get_version()

__all__ = [
    "__version__",
    "get_version",
    # Config
    "load_config",
    "validate_config",
    "StbConfig",
    "TokenCategory",
    "NamedToken",
    "UnnamedToken",
    # Generators
    "generate_tokens_css",
    "generate_tokens_wp_css",
    "generate_theme_json",
    "generate_integrate_php",
    # Runner
    "generate",
    "render_artifacts",
    "GenerateResult",
    "GeneratedFile",
    # Errors
    "StbError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ResourceMissingError",
]
