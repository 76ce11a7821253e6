"""Public entry point: one object exposing every analysis.

Usage:
    inspector = ProjectInspector()
    graph = inspector.build_graph("path/to/project")
    smells = inspector.detect_code_smells("path/to/project", types=["large-file"])
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from .config import AnalysisConfig, load_config
from .graph import DependencyGraph, DependencyGraphBuilder
from .logging_config import get_logger
from .metrics import (
    CodeComplexity,
    CodeSmell,
    ComplexityAnalyzer,
    CoverageAnalyzer,
    SmellDetector,
    TechStack,
    TechStackDetector,
    TestCoverage,
)
from .scanning import (
    FunctionDecl,
    ProjectMetrics,
    ProjectScanner,
    ProjectStructure,
    SourceExtractor,
    create_extractor,
)

logger = get_logger(__name__)


class ProjectInspector:
    """Owns one configuration and one source extractor for its lifetime.

    Results are built fresh on every call; nothing is cached between calls
    apart from the extractor's parser registry.

    Args:
        config: Analysis configuration; loaded from files/env when omitted
        extractor: Source extractor; picked by tree-sitter availability when omitted
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        extractor: Optional[SourceExtractor] = None,
    ):
        self.config = config or load_config()
        self.extractor = extractor or create_extractor()
        logger.debug(
            f"Inspector ready ({'structured' if self.extractor.structured else 'fallback'} extraction)"
        )

    def scan_structure(self, root: "Path | str", max_depth: Optional[int] = None) -> ProjectStructure:
        return ProjectScanner(self.config).scan(root, max_depth=max_depth)

    def project_metrics(self, root: "Path | str") -> ProjectMetrics:
        return ProjectScanner(self.config).project_metrics(root)

    def build_graph(self, root: "Path | str", file: "Path | str | None" = None) -> DependencyGraph:
        return DependencyGraphBuilder(self.extractor, self.config).build(root, file=file)

    def extract_imports(self, file: "Path | str") -> list[str]:
        return self.extractor.extract_imports(Path(file))

    def extract_functions(self, file: "Path | str") -> list[FunctionDecl]:
        return self.extractor.extract_functions(Path(file))

    def calculate_complexity(
        self, file: "Path | str", function_name: Optional[str] = None
    ) -> CodeComplexity:
        return ComplexityAnalyzer(self.extractor, self.config).analyze(file, function_name)

    def detect_code_smells(
        self, root: "Path | str", types: Optional[Iterable[str]] = None
    ) -> list[CodeSmell]:
        return SmellDetector(self.config).detect(root, types=types)

    def detect_tech_stack(self, root: "Path | str") -> TechStack:
        return TechStackDetector().detect(root)

    def analyze_test_coverage(self, root: "Path | str") -> TestCoverage:
        return CoverageAnalyzer(self.config).analyze(root)
