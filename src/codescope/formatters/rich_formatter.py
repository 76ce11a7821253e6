"""Rich terminal formatter for codescope."""

from typing import Any, Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ..graph import DependencyGraph
from ..metrics import CodeComplexity, CodeSmell, TechStack, TestCoverage
from ..scanning import FileNode, FunctionDecl, ProjectMetrics, ProjectStructure
from .base import BaseFormatter

_LEVEL_STYLES = {
    "low": "green",
    "medium": "yellow",
    "high": "red",
    "very-high": "red bold",
}


def _level_label(level: str) -> str:
    style = _LEVEL_STYLES.get(level, "white")
    return f"[{style}]{level}[/{style}]"


def _format_size(size: float) -> str:
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


class RichFormatter(BaseFormatter):
    """Tables and trees on the terminal."""

    def __init__(self, console: "Console | None" = None):
        self.console = console or Console()
        self._renderers: dict[type, Callable[[Any], None]] = {
            ProjectStructure: self._render_structure,
            ProjectMetrics: self._render_metrics,
            DependencyGraph: self._render_graph,
            CodeComplexity: self._render_complexity,
            TechStack: self._render_tech_stack,
            TestCoverage: self._render_coverage,
        }

    def render(self, result: Any) -> None:
        if isinstance(result, list):
            if not result:
                self.console.print("[green]Nothing to report[/green]")
            elif isinstance(result[0], FunctionDecl):
                self._render_functions(result)
            elif isinstance(result[0], CodeSmell):
                self._render_smells(result)
            else:
                for item in result:
                    self.console.print(f"  {escape(str(item))}")
            return

        renderer = self._renderers.get(type(result))
        if renderer is None:
            self.console.print(result)
            return
        renderer(result)

    def format(self, result: Any) -> str:
        # Rich output goes directly to console; return empty string
        self.render(result)
        return ""

    # ── Structure ──────────────────────────────────────────────────

    def _render_structure(self, structure: ProjectStructure) -> None:
        tree = Tree(f"[bold cyan]{escape(structure.root_path)}[/bold cyan]")
        for node in structure.files:
            _add_tree_node(tree, node)
        self.console.print(tree)
        self.console.print()
        self.console.print(
            f"  [bold]{structure.total_files}[/bold] files, {_format_size(structure.total_size)}"
        )
        if structure.languages:
            table = Table(title="Languages", show_lines=False)
            table.add_column("Language")
            table.add_column("Files", justify="right")
            table.add_column("Share", justify="right")
            for lang in structure.languages:
                table.add_row(escape(lang.language), str(lang.files), f"{lang.percentage:.1f}%")
            self.console.print(table)

    def _render_metrics(self, metrics: ProjectMetrics) -> None:
        self.console.print(
            f"  [bold]{metrics.total_files}[/bold] files, "
            f"[bold]{metrics.total_lines}[/bold] lines, "
            f"{_format_size(metrics.total_size)} "
            f"(avg {_format_size(metrics.average_file_size)})"
        )
        if metrics.languages:
            table = Table(title="Languages")
            table.add_column("Language")
            table.add_column("Files", justify="right")
            table.add_column("Lines", justify="right")
            table.add_column("Share", justify="right")
            for lang in metrics.languages:
                table.add_row(
                    escape(lang.language), str(lang.files), str(lang.lines), f"{lang.percentage:.1f}%"
                )
            self.console.print(table)
        if metrics.largest_files:
            table = Table(title="Largest Files")
            table.add_column("File")
            table.add_column("Size", justify="right")
            table.add_column("Lines", justify="right")
            for stat in metrics.largest_files:
                table.add_row(escape(stat.path), _format_size(stat.size), str(stat.lines))
            self.console.print(table)

    # ── Dependencies ───────────────────────────────────────────────

    def _render_graph(self, graph: DependencyGraph) -> None:
        self.console.print(
            f"  [bold]{len(graph.nodes)}[/bold] files, [bold]{len(graph.edges)}[/bold] imports"
        )
        self.console.print()
        for node in graph.nodes:
            if not node.imports:
                continue
            self.console.print(f"[bold]{escape(node.path)}[/bold]")
            for imp in node.imports:
                self.console.print(f"  -> {escape(imp)}")

        if graph.circular:
            self.console.print()
            self.console.print("[bold red]Circular Dependencies[/bold red]")
            for cycle in graph.circular:
                self.console.print(f"  {escape(' -> '.join(cycle))}")
        else:
            self.console.print()
            self.console.print("[green]No circular dependencies found[/green]")

    def _render_functions(self, functions: list[FunctionDecl]) -> None:
        table = Table(title="Functions")
        table.add_column("Name")
        table.add_column("Line", justify="right")
        for fn in functions:
            table.add_row(escape(fn.name), str(fn.line))
        self.console.print(table)

    # ── Metrics ────────────────────────────────────────────────────

    def _render_complexity(self, result: CodeComplexity) -> None:
        target = f"{result.file}::{result.function}" if result.function else result.file
        self.console.print(f"[bold]{escape(target)}[/bold]")
        self.console.print(f"  Complexity: [bold]{result.score}[/bold] ({_level_label(result.level)})")
        for recommendation in result.recommendations:
            self.console.print(f"  [yellow]-[/yellow] {escape(recommendation)}")

    def _render_smells(self, smells: list[CodeSmell]) -> None:
        table = Table(title=f"Code Smells ({len(smells)})")
        table.add_column("Type")
        table.add_column("Severity")
        table.add_column("Location")
        table.add_column("Message")
        for smell in smells:
            location = f"{smell.file}:{smell.line}" if smell.line is not None else smell.file
            table.add_row(
                escape(smell.smell_type), _level_label(smell.severity), escape(location), escape(smell.message)
            )
        self.console.print(table)

    def _render_tech_stack(self, stack: TechStack) -> None:
        table = Table(title="Tech Stack", show_header=False)
        table.add_column("Category", style="bold")
        table.add_column("Detected")
        for label, values in (
            ("Languages", stack.languages),
            ("Frameworks", stack.frameworks),
            ("Package Managers", stack.package_managers),
            ("Build Tools", stack.build_tools),
            ("Test Frameworks", stack.test_frameworks),
        ):
            table.add_row(label, escape(", ".join(values)) if values else "[dim]none[/dim]")
        self.console.print(table)

    def _render_coverage(self, coverage: TestCoverage) -> None:
        self.console.print(
            f"  [bold]{coverage.covered}[/bold]/{coverage.total} code files covered by a test "
            f"({coverage.percentage:.1f}%)"
        )
        if coverage.missing:
            self.console.print()
            self.console.print("[bold yellow]Missing tests[/bold yellow]")
            for path in coverage.missing:
                self.console.print(f"  {escape(path)}")


def _add_tree_node(parent: Tree, node: FileNode) -> None:
    if node.is_file:
        parent.add(f"{escape(node.name)} [dim]({_format_size(node.size or 0)}, {node.language})[/dim]")
        return
    branch = parent.add(f"[bold blue]{escape(node.name)}/[/bold blue]")
    for child in node.children or ():
        _add_tree_node(branch, child)
