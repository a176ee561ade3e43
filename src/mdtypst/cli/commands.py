"""CLI command implementations"""

import logging
import sys
from typing import Annotated, Optional

import typer

from mdtypst.config import Settings, load_config
from mdtypst.core.frontmatter import FrontmatterError
from mdtypst.core.pipeline import run_convert
from mdtypst.core.resources import EXAMPLE, MANIFEST, manifest_version


logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_stdin() -> str:
    try:
        return sys.stdin.buffer.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail("error reading stdin", e)


def convert_cmd(
    manifest: Annotated[bool, typer.Option("--manifest", help="Output embedded manifest.json")] = False,
    example: Annotated[bool, typer.Option("--example", help="Output embedded example.md")] = False,
    version: Annotated[bool, typer.Option("--version", help="Output version from manifest")] = False,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Diagnostic log level")] = None,
    ):
    """Convert Markdown on stdin (with optional YAML frontmatter) to Typst on stdout."""
    if manifest:
        typer.echo(MANIFEST, nl=False)
        return
    if version:
        typer.echo(manifest_version())
        return
    if example:
        typer.echo(EXAMPLE, nl=False)
        return

    settings = _settings(overrides={
        "parser_config": parser,
        "log_level": log_level.upper() if log_level else None,
    })
    _configure_logging(settings.log_level)

    raw = _read_stdin()
    logger.debug("Read %d chars from stdin", len(raw))

    out = sys.stdout
    try:
        run_convert(raw, out, settings.parser_config)
        out.flush()
    except FrontmatterError as e:
        _fail("error parsing frontmatter", e)
    except OSError as e:
        _fail("error writing output", e)
