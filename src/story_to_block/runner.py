"""
Generation runner - renders every artifact and writes it to disk.

The config is loaded and validated once, then each generator renders its
file from the same StbConfig. Files are written in a fixed order; a failure
stops the run without removing files already written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from story_to_block.core.config import load_config
from story_to_block.core.tokens import StbConfig
from story_to_block.generators import (
    generate_integrate_php,
    generate_theme_json,
    generate_tokens_css,
    generate_tokens_wp_css,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    """A written artifact, with its path relative to the base directory."""

    path: str
    size: int


@dataclass
class GenerateResult:
    """
    Result from a generation run.

    Attributes:
        files: Written files, in write order
    """

    files: list[GeneratedFile] = field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]

    def add_file(self, base_dir: Path, relative_path: str, content: str) -> None:
        """Write content under base_dir, creating parent directories, and record it."""
        full_path = base_dir / relative_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        data = content.encode("utf-8")
        full_path.write_bytes(data)
        logger.info("Wrote %s (%d bytes)", full_path, len(data))
        self.files.append(GeneratedFile(path=relative_path, size=len(data)))


def output_paths(config: StbConfig) -> dict[str, str]:
    """Map each artifact label to its path relative to the base directory."""
    out_dir = config.out_dir.rstrip("/")
    return {
        "tokens.css": config.tokens_path,
        "tokens.wp.css": f"{out_dir}/tokens.wp.css",
        "theme.json": f"{out_dir}/theme.json",
        "integrate.php": f"{out_dir}/integrate.php",
    }


def render_artifacts(config: StbConfig) -> dict[str, str]:
    """
    Render all four artifacts without touching the filesystem.

    Returns:
        Mapping of artifact label (tokens.css, tokens.wp.css, theme.json,
        integrate.php) to file content, in write order
    """
    return {
        "tokens.css": generate_tokens_css(config),
        "tokens.wp.css": generate_tokens_wp_css(config),
        "theme.json": generate_theme_json(config),
        "integrate.php": generate_integrate_php(),
    }


def write_artifacts(config: StbConfig, base_dir: Path | str | None = None) -> GenerateResult:
    """Render every artifact for an already validated config and write it under base_dir."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    result = GenerateResult()

    paths = output_paths(config)
    for label, content in render_artifacts(config).items():
        result.add_file(base, paths[label], content)

    return result


def generate(config_path: Path | str | None = None, cwd: Path | str | None = None) -> GenerateResult:
    """
    Load the config and write all generated files.

    Args:
        config_path: Config file (default: ./stb.config.json)
        cwd: Base directory for output paths (default: current directory)

    Returns:
        GenerateResult listing the written files
    """
    config = load_config(config_path)
    return write_artifacts(config, cwd)
