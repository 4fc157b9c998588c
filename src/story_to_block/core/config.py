"""
Config loading and validation.

Reads stb.config.json, checks it against the token schema, and produces the
immutable StbConfig that all generators share. Validation happens once here;
generators never re-check their input.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ValidationKind,
)
from .tokens import (
    DEFAULT_OUT_DIR,
    DEFAULT_TOKENS_PATH,
    NamedToken,
    StbConfig,
    TokenCategory,
    TokenEntry,
    TokenGroup,
    UnnamedToken,
)

logger = logging.getLogger(__name__)

CONFIG_FILE = "stb.config.json"

VALID_CATEGORIES: tuple[str, ...] = tuple(category.value for category in TokenCategory)


def get_config_path(config_path: Path | str | None = None) -> Path:
    """Resolve the config file path, defaulting to ./stb.config.json."""
    return Path(config_path if config_path is not None else CONFIG_FILE).resolve()


def load_config(config_path: Path | str | None = None) -> StbConfig:
    """
    Load and validate a token config file.

    Args:
        config_path: Path to the JSON config (default: ./stb.config.json)

    Returns:
        Validated StbConfig

    Raises:
        ConfigNotFoundError: The file is missing or unreadable
        ConfigParseError: The file is not valid JSON
        ConfigValidationError: The data breaks the token schema
    """
    resolved = get_config_path(config_path)
    logger.debug("Loading config from %s", resolved)

    try:
        raw = resolved.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigNotFoundError(resolved) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigParseError(resolved, e.msg) from e

    return validate_config(data)


def validate_config(data: Any) -> StbConfig:
    """
    Validate raw config data and build an StbConfig.

    The first violation found raises ConfigValidationError; its ``kind``
    says which rule failed and its message names the offending field.
    """
    if not isinstance(data, dict):
        raise ConfigValidationError(
            "config must be a JSON object.", ValidationKind.INVALID_TOKENS
        )

    prefix = data.get("prefix")
    if not prefix or not isinstance(prefix, str):
        raise ConfigValidationError(
            '"prefix" is required and must be a string.', ValidationKind.MISSING_PREFIX
        )

    tokens = data.get("tokens")
    if not isinstance(tokens, dict):
        raise ConfigValidationError(
            '"tokens" is required and must be an object.', ValidationKind.INVALID_TOKENS
        )

    groups: dict[TokenCategory, TokenGroup] = {}
    for category, group in tokens.items():
        if category not in VALID_CATEGORIES:
            raise ConfigValidationError(
                f'Unknown token category "{category}". '
                f"Valid categories: {', '.join(VALID_CATEGORIES)}",
                ValidationKind.UNKNOWN_CATEGORY,
            )
        groups[TokenCategory(category)] = _validate_token_group(category, group)

    config = StbConfig(
        prefix=prefix,
        tokens_path=_optional_path(data, "tokensPath", DEFAULT_TOKENS_PATH),
        out_dir=_optional_path(data, "outDir", DEFAULT_OUT_DIR),
        tokens=groups,
    )
    logger.debug(
        "Validated config: prefix=%s, %d categories, %d tokens",
        config.prefix,
        len(config.tokens),
        config.token_count(),
    )
    return config


def _optional_path(data: dict[str, Any], field: str, default: str) -> str:
    value = data.get(field)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigValidationError(
            f'"{field}" must be a string.', ValidationKind.INVALID_FIELD
        )
    return value


def _validate_token_group(category: str, group: Any) -> TokenGroup:
    if not isinstance(group, dict):
        raise ConfigValidationError(
            f'Token category "{category}" must be an object.', ValidationKind.INVALID_TOKENS
        )

    return {key: _validate_token_entry(category, key, entry) for key, entry in group.items()}


def _validate_token_entry(category: str, key: str, entry: Any) -> TokenEntry:
    label = f"{category}.{key}"

    if not isinstance(entry, dict):
        raise ConfigValidationError(
            f'Token "{label}" must be an object.', ValidationKind.INVALID_TOKENS
        )

    # "0" is a legitimate value (e.g. a zero radius)
    value = entry.get("value")
    if not value and value != "0":
        raise ConfigValidationError(
            f'Token "{label}" is missing a "value".', ValidationKind.INVALID_VALUE
        )
    if not isinstance(value, str):
        raise ConfigValidationError(
            f'Token "{label}.value" must be a string.', ValidationKind.INVALID_VALUE
        )

    has_name = "name" in entry
    has_slug = "slug" in entry

    if has_name and not has_slug:
        raise ConfigValidationError(
            f'Token "{label}" has "name" but no "slug". Both are required together.',
            ValidationKind.NAME_SLUG_MISMATCH,
        )
    if has_slug and not has_name:
        raise ConfigValidationError(
            f'Token "{label}" has "slug" but no "name". Both are required together.',
            ValidationKind.NAME_SLUG_MISMATCH,
        )

    name = entry.get("name")
    slug = entry.get("slug")

    # An empty or null name/slug pair is present but names nothing
    if not name or not slug:
        return UnnamedToken(value=value)

    for field, field_value in (("name", name), ("slug", slug)):
        if not isinstance(field_value, str):
            raise ConfigValidationError(
                f'Token "{label}.{field}" must be a string.',
                ValidationKind.INVALID_FIELD,
            )

    return NamedToken(value=value, name=name, slug=slug)
