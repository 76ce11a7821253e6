"""Dependency graph: construction, import resolution and cycle detection."""

from .algorithms import find_cycles
from .builder import DependencyGraphBuilder
from .models import DependencyEdge, DependencyGraph, DependencyNode
from .resolver import ImportResolver

__all__ = [
    "DependencyEdge",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "DependencyNode",
    "ImportResolver",
    "find_cycles",
]
