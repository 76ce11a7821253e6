"""Code metrics: complexity, smells, tech stack and test coverage."""

from .complexity import ComplexityAnalyzer
from .coverage import CoverageAnalyzer
from .models import CodeComplexity, CodeSmell, FileCoverage, TechStack, TestCoverage
from .smells import SMELL_TYPES, SmellDetector
from .tech_stack import TechStackDetector

__all__ = [
    "SMELL_TYPES",
    "CodeComplexity",
    "CodeSmell",
    "ComplexityAnalyzer",
    "CoverageAnalyzer",
    "FileCoverage",
    "SmellDetector",
    "TechStack",
    "TechStackDetector",
    "TestCoverage",
]
