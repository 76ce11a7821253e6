"""Filesystem structure commands."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import CONFIG_OPTION, FORMAT_OPTION, QUIET_OPTION, VERBOSE_OPTION, run_command


@app.command()
def structure(
    path: Path = typer.Argument(Path("."), help="Project root"),
    depth: Optional[int] = typer.Option(
        None, "--depth", "-d", help="Levels to descend (default from config: 10)", min=0
    ),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Show the directory tree, file count, total size and language shares.

    [bold cyan]Examples:[/bold cyan]

      codescope structure . --depth 2

      codescope structure src --format json
    """
    run_command(
        lambda inspector: inspector.scan_structure(path, max_depth=depth),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )


@app.command()
def metrics(
    path: Path = typer.Argument(Path("."), help="Project root"),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Count lines per language and list the largest files."""
    run_command(
        lambda inspector: inspector.project_metrics(path),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )
