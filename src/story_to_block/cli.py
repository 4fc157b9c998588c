"""
story-to-block CLI.

Commands:
- generate: Read the token config and write all output files
- validate: Check the token config without writing anything
- bundle-css: Copy and concatenate component stylesheets
- help: Show usage
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import typer
from typer.core import TyperGroup

from story_to_block import get_version
from story_to_block.core.config import CONFIG_FILE, load_config
from story_to_block.core.errors import StbError
from story_to_block.core.tokens import StbConfig

PROG_NAME = "story-to-block"


class StbGroup(TyperGroup):
    """Command group that reports unknown commands with the usage text."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            typer.echo(f"{PROG_NAME}: Unknown command: {args[0]}", err=True)
            typer.echo(ctx.get_help())
            raise typer.Exit(code=1) from e


app = typer.Typer(
    cls=StbGroup,
    name=PROG_NAME,
    help="Generate WordPress assets from a design token config.",
    invoke_without_command=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"{PROG_NAME} {get_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _fail(error: Exception) -> typer.Exit:
    typer.echo(f"{PROG_NAME}: {error}", err=True)
    return typer.Exit(code=1)


def _load(config_path: Path | None) -> StbConfig:
    try:
        return load_config(config_path)
    except StbError as e:
        raise _fail(e) from e


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log each generation step to stderr",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Generate WordPress assets from a design token config."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


CONFIG_HELP = f"Path to config file (default: ./{CONFIG_FILE})"


@app.command(name="generate")
def generate_command(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", envvar="STB_CONFIG", help=CONFIG_HELP
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Output to stdout instead of writing files",
    ),
    cwd: Path | None = typer.Option(
        None,
        "--cwd",
        help="Base directory for output paths (default: current directory)",
    ),
) -> None:
    """
    Read the config and generate all output files.

    Writes tokens.css to tokensPath, and tokens.wp.css, theme.json and
    integrate.php to outDir.

    Examples:
        story-to-block generate
        story-to-block generate --config tokens/stb.config.json
        story-to-block generate --dry-run
    """
    from story_to_block.runner import render_artifacts, write_artifacts

    config = _load(config_path)

    try:
        if dry_run:
            for label, content in render_artifacts(config).items():
                typer.echo(f"=== {label} ===")
                typer.echo(content)
            return

        result = write_artifacts(config, cwd)
    except (StbError, OSError) as e:
        raise _fail(e) from e

    typer.echo(f"{PROG_NAME}: generated files:")
    for file in result.files:
        typer.echo(f"  {file.path} ({file.size} bytes)")


@app.command(name="validate")
def validate_command(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", envvar="STB_CONFIG", help=CONFIG_HELP
    ),
) -> None:
    """Validate the config and show a token summary."""
    config = _load(config_path)

    typer.echo(f"Config is valid (prefix: {config.prefix})")
    for category, group in config.tokens.items():
        typer.echo(f"  {category.value}: {len(group)}")
    typer.echo(f"  total: {config.token_count()}")


@app.command(name="bundle-css")
def bundle_css_command(
    src: Path = typer.Option(  # noqa: B008
        Path("src"),
        "--src",
        help="Directory scanned for component stylesheets",
    ),
    dist: Path = typer.Option(  # noqa: B008
        Path("dist"),
        "--dist",
        help="Build output directory",
    ),
) -> None:
    """Copy component stylesheets to dist/css and bundle them into dist/styles.css."""
    from story_to_block.bundle import bundle_css

    if not src.is_dir():
        typer.echo(f"{PROG_NAME}: source directory not found: {src}", err=True)
        raise typer.Exit(code=1)

    result = bundle_css(src, dist)
    if result.bundle is None:
        typer.echo("No CSS files found.")
        return

    for path in result.copied:
        typer.echo(f"  Copied: {path}")
    typer.echo(f"  Bundled: {result.bundle}")
    for path in result.removed:
        typer.echo(f"  Removed: {path}")
    typer.echo(f"CSS build complete! {len(result.copied)} files processed.")


@app.command(name="help")
def help_command(ctx: typer.Context) -> None:
    """Show this help message."""
    parent = ctx.parent
    typer.echo(parent.get_help() if parent is not None else ctx.get_help())


def main() -> None:
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
