"""Configuration and path exceptions."""

from pathlib import Path
from typing import Any

from .base import CodescopeError


class ConfigurationError(CodescopeError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class PathNotFoundError(InvalidPathError):
    """Raised when a project root or target file does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, "does not exist")
        self.message = f"Path does not exist: {path}"


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
