"""Value objects produced by the metrics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

ComplexityLevel = Literal["low", "medium", "high", "very-high"]
Severity = Literal["low", "medium", "high"]

LONG_METHOD = "Long Method"
MAGIC_NUMBER = "Magic Number"
DUPLICATE_CODE = "Duplicate Code"
LARGE_FILE = "Large File"


@dataclass(frozen=True)
class CodeComplexity:
    """Approximate cyclomatic complexity of a file or one of its functions."""

    file: str
    score: int
    level: ComplexityLevel
    function: Optional[str] = None
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"file": self.file}
        if self.function is not None:
            data["function"] = self.function
        data["complexity"] = self.score
        data["level"] = self.level
        data["recommendations"] = list(self.recommendations)
        return data


@dataclass(frozen=True)
class CodeSmell:
    smell_type: str
    severity: Severity
    file: str
    message: str
    recommendation: str
    line: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.smell_type,
            "severity": self.severity,
            "file": self.file,
        }
        if self.line is not None:
            data["line"] = self.line
        data["message"] = self.message
        data["recommendation"] = self.recommendation
        return data


@dataclass(frozen=True)
class TechStack:
    """Technologies detected from marker files; every list is ordered and de-duplicated."""

    languages: list[str] = field(default_factory=list)
    frameworks: list[str] = field(default_factory=list)
    package_managers: list[str] = field(default_factory=list)
    build_tools: list[str] = field(default_factory=list)
    test_frameworks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "languages": list(self.languages),
            "frameworks": list(self.frameworks),
            "packageManagers": list(self.package_managers),
            "buildTools": list(self.build_tools),
            "testFrameworks": list(self.test_frameworks),
        }


@dataclass(frozen=True)
class FileCoverage:
    file: str
    coverage: int

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "coverage": self.coverage}


@dataclass(frozen=True)
class TestCoverage:
    """Naming-convention coverage: a source file is covered when a matching test file exists."""

    __test__ = False

    total: int
    covered: int
    percentage: float
    files: tuple[FileCoverage, ...] = ()
    missing: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "covered": self.covered,
            "percentage": self.percentage,
            "files": [entry.to_dict() for entry in self.files],
            "missing": list(self.missing),
        }
