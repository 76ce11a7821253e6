"""
File operations for codescope.

Reading, stat-ing and listing files. Read failures surface as
FileAccessError so multi-file operations can skip the one file and go on.
"""

import os
from pathlib import Path

from .config import AnalysisConfig
from .exceptions import FileAccessError, PathNotFoundError

def require_path(path: "Path | str") -> Path:
    """Resolve a path to absolute form, raising PathNotFoundError if missing."""
    resolved = Path(path).resolve()
    if not resolved.exists():
        raise PathNotFoundError(resolved)
    return resolved


def read_text(filepath: Path, encoding: str = "utf-8", errors: str = "replace") -> str:
    """
    Read a file as text.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as string

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def count_lines(content: str) -> int:
    """Number of newline-separated segments; an empty file counts as one line."""
    return content.count("\n") + 1


def file_stats(filepath: Path) -> tuple[int, int]:
    """
    Return (size_in_bytes, line_count) for a file.

    Raises:
        FileAccessError: If the file cannot be stat-ed or read
    """
    try:
        size = filepath.stat().st_size
    except OSError as e:
        raise FileAccessError(filepath, f"Cannot stat: {e}")
    return size, count_lines(read_text(filepath))


def iter_entries(directory: Path, config: AnalysisConfig) -> list[os.DirEntry]:
    """
    List a directory's entries sorted by name, ignored names removed.

    Raises:
        OSError: If the directory cannot be listed
    """
    with os.scandir(directory) as it:
        entries = [entry for entry in it if not config.is_ignored(entry.name)]
    entries.sort(key=lambda entry: entry.name)
    return entries

