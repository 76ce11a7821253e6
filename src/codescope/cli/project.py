"""Project-level commands: tech stack and test coverage."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import CONFIG_OPTION, FORMAT_OPTION, QUIET_OPTION, VERBOSE_OPTION, run_command


@app.command()
def stack(
    path: Path = typer.Argument(Path("."), help="Project root"),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Detect languages, frameworks, package managers and build tools."""
    run_command(
        lambda inspector: inspector.detect_tech_stack(path),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )


@app.command()
def coverage(
    path: Path = typer.Argument(Path("."), help="Project root"),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Match source files to test files by naming convention."""
    run_command(
        lambda inspector: inspector.analyze_test_coverage(path),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )
