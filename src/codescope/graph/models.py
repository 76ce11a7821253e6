"""Dependency graph value objects.

Node keys are project-relative POSIX paths. Edge targets are the raw import
identifiers unless import resolution is switched on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DependencyNode:
    """One analyzed source file.

    ``imports`` keeps source order and duplicates. Export extraction is not
    performed, so ``exports`` is always empty.
    """

    name: str
    path: str
    imports: tuple[str, ...] = ()
    exports: tuple[str, ...] = ()

    @property
    def dependencies(self) -> tuple[str, ...]:
        return self.imports

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "imports": list(self.imports),
            "exports": list(self.exports),
            "dependencies": list(self.dependencies),
        }


@dataclass(frozen=True)
class DependencyEdge:
    from_path: str
    to: str
    kind: str = "import"

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_path, "to": self.to, "kind": self.kind}


@dataclass(frozen=True)
class DependencyGraph:
    """Directed import graph of a project.

    ``circular`` holds closed walks: each cycle ends with its first node.
    """

    nodes: tuple[DependencyNode, ...] = ()
    edges: tuple[DependencyEdge, ...] = ()
    circular: tuple[tuple[str, ...], ...] = field(default_factory=tuple)

    @property
    def node_keys(self) -> list[str]:
        return [node.path for node in self.nodes]

    def adjacency(self) -> dict[str, list[str]]:
        """Edge targets per source key, in edge order."""
        adjacency: dict[str, list[str]] = {}
        for edge in self.edges:
            adjacency.setdefault(edge.from_path, []).append(edge.to)
        return adjacency

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "circular": [list(cycle) for cycle in self.circular],
        }
