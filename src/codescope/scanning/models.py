"""Value objects produced by the filesystem scanner.

Every object here is built fresh per scan call and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FileNode:
    """One entry of the scanned tree.

    Directories always carry ``children`` (possibly empty when the depth
    cap was reached); files never do.
    """

    name: str
    absolute_path: str
    kind: NodeKind
    size: Optional[int] = None
    extension: Optional[str] = None
    language: Optional[str] = None
    children: Optional[tuple[FileNode, ...]] = None

    def __post_init__(self) -> None:
        if self.kind is NodeKind.DIRECTORY and self.children is None:
            raise ValueError(f"directory node {self.absolute_path} requires children")
        if self.kind is NodeKind.FILE and self.children is not None:
            raise ValueError(f"file node {self.absolute_path} cannot have children")

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def iter_files(self):
        """Yield every file-kind node at or below this node."""
        if self.is_file:
            yield self
            return
        for child in self.children or ():
            yield from child.iter_files()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "path": self.absolute_path,
            "type": self.kind.value,
        }
        if self.is_file:
            data["size"] = self.size
            data["extension"] = self.extension
            data["language"] = self.language
        else:
            data["children"] = [child.to_dict() for child in self.children or ()]
        return data


@dataclass(frozen=True)
class LanguageStats:
    """Per-language file share.

    ``percentage`` is this language's share of classified files, so the
    values across a scan sum to 100. ``lines`` stays 0 unless the detailed
    metrics pass ran.
    """

    language: str
    files: int
    lines: int = 0
    percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "files": self.files,
            "lines": self.lines,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class ProjectStructure:
    root_path: str
    files: tuple[FileNode, ...]
    total_files: int
    total_size: int
    languages: tuple[LanguageStats, ...]

    def iter_files(self):
        for node in self.files:
            yield from node.iter_files()

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.root_path,
            "files": [node.to_dict() for node in self.files],
            "totalFiles": self.total_files,
            "totalSize": self.total_size,
            "languages": [lang.to_dict() for lang in self.languages],
        }


@dataclass(frozen=True)
class FileStat:
    path: str
    size: int
    lines: int

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "size": self.size, "lines": self.lines}


@dataclass(frozen=True)
class ProjectMetrics:
    """Result of the detailed pass: line counts on top of a structure scan."""

    total_lines: int
    total_files: int
    total_size: int
    average_file_size: float
    languages: tuple[LanguageStats, ...] = ()
    largest_files: tuple[FileStat, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalLines": self.total_lines,
            "totalFiles": self.total_files,
            "totalSize": self.total_size,
            "averageFileSize": self.average_file_size,
            "languages": [lang.to_dict() for lang in self.languages],
            "largestFiles": [stat.to_dict() for stat in self.largest_files],
        }
