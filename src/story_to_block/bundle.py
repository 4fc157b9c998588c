"""Stylesheet bundling for the component library.

Copies every component stylesheet to ``dist/css/`` for per-component
loading and concatenates them into ``dist/styles.css`` for bundled
consumption. tokens.css always comes first so the custom properties are
defined before anything uses them, then reset.css, then the rest by name.

Usage::

    from story_to_block.bundle import bundle_css
    bundle_css(Path("src"), Path("dist"))

Or via CLI::

    story-to-block bundle-css
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

BUNDLE_NAME = "styles.css"

# Order-pinned stylesheets; everything else sorts by file name after these
_PINNED_FIRST = ("tokens.css", "reset.css")

# Vite emits this from component CSS imports; the bundle replaces it
_BUILD_TOOL_CSS = "index.css"


@dataclass
class BundleResult:
    """Files produced by a bundle run."""

    copied: list[Path] = field(default_factory=list)
    bundle: Path | None = None
    removed: list[Path] = field(default_factory=list)


def find_css_files(src_dir: Path) -> list[Path]:
    """Recursively find all .css files under src_dir."""
    return [p for p in src_dir.rglob("*.css") if p.is_file()]


def _sort_key(path: Path) -> tuple[int, str]:
    name = path.name
    if name in _PINNED_FIRST:
        return (_PINNED_FIRST.index(name), "")
    return (len(_PINNED_FIRST), name.casefold())


def order_css_files(files: list[Path]) -> list[Path]:
    """Order stylesheets: tokens.css, reset.css, then alphabetically by file name."""
    return sorted(files, key=_sort_key)


def bundle_css(src_dir: Path, dist_dir: Path) -> BundleResult:
    """Copy component stylesheets into dist_dir/css and write the combined bundle.

    Args:
        src_dir: Directory scanned recursively for stylesheets.
        dist_dir: Build output directory.

    Returns:
        BundleResult; empty when src_dir holds no stylesheets.
    """
    result = BundleResult()
    css_files = find_css_files(src_dir)

    if not css_files:
        logger.warning("No CSS files found in %s", src_dir)
        return result

    css_dir = dist_dir / "css"
    css_dir.mkdir(parents=True, exist_ok=True)

    parts: list[str] = []
    for path in order_css_files(css_files):
        target = css_dir / path.name
        shutil.copyfile(path, target)
        result.copied.append(target)
        logger.debug("Copied %s -> %s", path, target)

        parts.append(f"/* === {path.name} === */")
        parts.append(path.read_text(encoding="utf-8"))
        parts.append("")

    bundle_path = dist_dir / BUNDLE_NAME
    bundle_path.write_text("\n".join(parts), encoding="utf-8")
    result.bundle = bundle_path
    logger.info("Bundled %d stylesheets into %s", len(result.copied), bundle_path)

    stale = css_dir / _BUILD_TOOL_CSS
    if stale.exists() and stale not in result.copied:
        stale.unlink()
        result.removed.append(stale)
        logger.debug("Removed build-tool stylesheet %s", stale)

    return result
