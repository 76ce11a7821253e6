"""
codescope - static project analysis

Scans a source tree and reports its structure, import graph, approximate
complexity, code smells, tech stack and naming-convention test coverage.
Parsing uses tree-sitter when it is installed and degrades to text
heuristics when it is not.
"""

__version__ = "0.1.0"

from .config import AnalysisConfig, ThresholdConfig, load_config
from .exceptions import CodescopeError
from .inspector import ProjectInspector

__all__ = [
    "AnalysisConfig",
    "CodescopeError",
    "ProjectInspector",
    "ThresholdConfig",
    "load_config",
]
