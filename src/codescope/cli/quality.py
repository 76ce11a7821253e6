"""Complexity and code smell commands."""

from pathlib import Path
from typing import List, Optional

import typer

from ..metrics.smells import SMELL_TYPES
from . import app
from ._common import CONFIG_OPTION, FORMAT_OPTION, QUIET_OPTION, VERBOSE_OPTION, run_command


@app.command()
def complexity(
    file: Path = typer.Argument(..., help="Source file"),
    function: Optional[str] = typer.Option(
        None, "--function", help="Score only this function"
    ),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Approximate cyclomatic complexity of a file or function.

    Decision tokens are counted by substring search, so keywords inside
    strings and comments count too.
    """
    run_command(
        lambda inspector: inspector.calculate_complexity(file, function),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )


@app.command()
def smells(
    path: Path = typer.Argument(Path("."), help="Project root"),
    smell_type: Optional[List[str]] = typer.Option(
        None,
        "--type",
        "-t",
        help=f"Smell type to check, repeatable ({', '.join(SMELL_TYPES)})",
    ),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    Detect long methods, magic numbers, duplicated code and large files.

    [bold cyan]Examples:[/bold cyan]

      codescope smells . --type large-file --type long-method
    """
    run_command(
        lambda inspector: inspector.detect_code_smells(path, types=smell_type or None),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )
