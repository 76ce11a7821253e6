"""Exception hierarchy for codescope."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParsingError,
    TargetNotFoundError,
)
from .base import CodescopeError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    PathNotFoundError,
)

__all__ = [
    "CodescopeError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "TargetNotFoundError",
    "ConfigurationError",
    "InvalidPathError",
    "PathNotFoundError",
    "InvalidConfigError",
]
