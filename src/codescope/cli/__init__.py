"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="codescope",
    help="codescope - project structure, dependency and code-quality analysis",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .structure import structure as _structure, metrics as _metrics  # noqa: F401, E402
from .deps import deps as _deps, imports as _imports, functions as _functions  # noqa: F401, E402
from .quality import complexity as _complexity, smells as _smells  # noqa: F401, E402
from .project import stack as _stack, coverage as _coverage  # noqa: F401, E402
