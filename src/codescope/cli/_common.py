"""Shared CLI helpers."""

from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import load_config
from ..exceptions import CodescopeError
from ..formatters import get_formatter
from ..inspector import ProjectInspector
from ..logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)

FORMAT_OPTION = typer.Option(
    "rich",
    "--format",
    "-f",
    help="Output format: rich (human-readable) or json",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging")
QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors")


def run_command(
    action: Callable[[ProjectInspector], Any],
    fmt: str,
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> None:
    """Build an inspector from CLI options, run one analysis and render it.

    CodescopeError, and any other failure while analyzing or rendering,
    exits with status 1 after printing the message.
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        formatter = get_formatter(fmt)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format")

    try:
        settings = load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)
        result = action(ProjectInspector(config=settings))
        formatter.render(result)
    except CodescopeError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
