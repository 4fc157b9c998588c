"""integrate.php generator: the bundled WordPress integration snippet, copied verbatim."""

from __future__ import annotations

from pathlib import Path

from story_to_block.core.errors import ResourceMissingError

TEMPLATE_NAME = "integrate.php.tpl"


def _template_dir() -> Path:
    """Get the bundled templates directory."""
    return Path(__file__).parent.parent / "templates"


def generate_integrate_php() -> str:
    """Return the integrate.php template.

    Raises:
        ResourceMissingError: The template is not installed with the package
    """
    template_path = _template_dir() / TEMPLATE_NAME
    try:
        return template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceMissingError(template_path) from e
