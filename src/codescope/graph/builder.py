"""Dependency graph construction from extracted imports."""

import os
from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig, default_config
from ..exceptions import FileAccessError, ParsingError
from ..file_ops import read_text, require_path
from ..logging_config import get_logger
from ..scanning.extractor import SourceExtractor
from ..scanning.scanner import find_files
from .algorithms import find_cycles
from .models import DependencyEdge, DependencyGraph, DependencyNode
from .resolver import ImportResolver

logger = get_logger(__name__)


class DependencyGraphBuilder:
    """Builds a DependencyGraph for a project or a single file.

    Args:
        extractor: Source extractor supplying imports per file
        config: Analysis configuration (ignore rules, import resolution)
    """

    def __init__(self, extractor: SourceExtractor, config: Optional[AnalysisConfig] = None):
        self.extractor = extractor
        self.config = config or default_config

    def build(self, root: "Path | str", file: "Path | str | None" = None) -> DependencyGraph:
        """
        Build the import graph.

        Unreadable files and files whose parse fails are logged and left
        out. In fallback mode every readable file is a node without imports.

        Args:
            root: Project root; node keys are relative to it
            file: Analyze only this file. A relative path is looked up
                under root first, then under the working directory.

        Returns:
            DependencyGraph with unresolved edge targets unless
            ``config.resolve_imports`` is set

        Raises:
            PathNotFoundError: If root or file does not exist
        """
        root_path = require_path(root)
        if file is not None:
            files = [self._locate_file(root_path, file)]
        else:
            files = find_files(root_path, config=self.config)
        logger.info(f"Building dependency graph for {len(files)} files under {root_path}")

        nodes: list[DependencyNode] = []
        for filepath in files:
            try:
                content = read_text(filepath)
            except FileAccessError as e:
                logger.warning(f"Skipping {filepath}: {e.reason}")
                continue

            try:
                syntax = self.extractor.extract(filepath, content)
            except ParsingError as e:
                logger.warning(f"Skipping {filepath}: {e.reason}")
                continue
            imports = syntax.imports if syntax is not None else ()
            nodes.append(
                DependencyNode(
                    name=filepath.name,
                    path=_relative_key(filepath, root_path),
                    imports=tuple(imports),
                )
            )

        if self.config.resolve_imports:
            nodes = self._resolve(nodes)

        edges = tuple(
            DependencyEdge(from_path=node.path, to=imp) for node in nodes for imp in node.imports
        )
        graph = DependencyGraph(nodes=tuple(nodes), edges=edges)
        cycles = find_cycles(graph.node_keys, graph.adjacency())
        if cycles:
            logger.debug(f"Found {len(cycles)} circular dependencies")

        return DependencyGraph(
            nodes=graph.nodes,
            edges=graph.edges,
            circular=tuple(tuple(cycle) for cycle in cycles),
        )

    def _locate_file(self, root_path: Path, file: "Path | str") -> Path:
        candidate = Path(file)
        if not candidate.is_absolute() and (root_path / candidate).exists():
            candidate = root_path / candidate
        return require_path(candidate)

    def _resolve(self, nodes: list[DependencyNode]) -> list[DependencyNode]:
        resolver = ImportResolver(node.path for node in nodes)
        return [
            DependencyNode(
                name=node.name,
                path=node.path,
                imports=tuple(resolver.resolve(imp, node.path) for imp in node.imports),
            )
            for node in nodes
        ]


def _relative_key(filepath: Path, root_path: Path) -> str:
    """Project-relative POSIX key (may start with ".." for a file outside root)."""
    return Path(os.path.relpath(filepath, root_path)).as_posix()
