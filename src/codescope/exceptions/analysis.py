"""Analysis-related exceptions: file access, parsing, missing targets."""

from pathlib import Path

from .base import CodescopeError


class AnalysisError(CodescopeError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when file content cannot be parsed into a syntax tree."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class TargetNotFoundError(AnalysisError):
    """Raised when a requested function is not declared in the given file."""

    def __init__(self, function_name: str, filepath: Path):
        super().__init__(
            f"Function {function_name} not found in {filepath}",
            details={"function": function_name, "filepath": str(filepath)},
        )
        self.function_name = function_name
        self.filepath = filepath
