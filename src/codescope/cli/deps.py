"""Dependency graph and extraction commands."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import CONFIG_OPTION, FORMAT_OPTION, QUIET_OPTION, VERBOSE_OPTION, run_command


@app.command()
def deps(
    path: Path = typer.Argument(Path("."), help="Project root"),
    file: Optional[Path] = typer.Option(
        None, "--file", help="Analyze only this file (relative to the project root)"
    ),
    resolve: bool = typer.Option(
        False,
        "--resolve",
        help="Map import strings to project files before looking for cycles",
    ),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """
    List imports per file and report circular dependencies.

    Without --resolve, edges keep each import exactly as written, so a
    cycle is only found when import strings equal project-relative paths.
    """
    run_command(
        lambda inspector: inspector.build_graph(path, file=file),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
        resolve_imports=True if resolve else None,
    )


@app.command()
def imports(
    file: Path = typer.Argument(..., help="Source file"),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """Print the import identifiers of one file (needs tree-sitter)."""
    run_command(
        lambda inspector: inspector.extract_imports(file),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )


@app.command()
def functions(
    file: Path = typer.Argument(..., help="Source file"),
    fmt: str = FORMAT_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
    quiet: bool = QUIET_OPTION,
):
    """List the functions declared in one file (needs tree-sitter)."""
    run_command(
        lambda inspector: inspector.extract_functions(file),
        fmt,
        config=config,
        verbose=verbose,
        quiet=quiet,
    )
