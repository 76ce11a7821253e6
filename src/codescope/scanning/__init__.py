"""Filesystem scanning, language classification and source extraction."""

from .extractor import (
    FunctionDecl,
    NullExtractor,
    SourceExtractor,
    SourceSyntax,
    TreeSitterExtractor,
    create_extractor,
)
from .models import FileNode, FileStat, LanguageStats, NodeKind, ProjectMetrics, ProjectStructure
from .scanner import ProjectScanner, find_files
from .treesitter_parser import TREE_SITTER_AVAILABLE, ParserRegistry

__all__ = [
    "TREE_SITTER_AVAILABLE",
    "FileNode",
    "FileStat",
    "FunctionDecl",
    "LanguageStats",
    "NodeKind",
    "NullExtractor",
    "ParserRegistry",
    "ProjectMetrics",
    "ProjectScanner",
    "find_files",
    "ProjectStructure",
    "SourceExtractor",
    "SourceSyntax",
    "TreeSitterExtractor",
    "create_extractor",
]
