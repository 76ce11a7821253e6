"""Filesystem scanner: directory tree, size totals and language statistics."""

from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig, default_config
from ..exceptions import FileAccessError
from ..file_ops import file_stats, iter_entries, require_path
from ..logging_config import get_logger
from .languages import CODE_EXTENSIONS, UNKNOWN_LANGUAGE, detect_language, get_extension
from .models import FileNode, FileStat, LanguageStats, NodeKind, ProjectMetrics, ProjectStructure

logger = get_logger(__name__)

_LARGEST_FILES = 10


class ProjectScanner:
    """Builds a ProjectStructure from a directory on disk.

    Nothing is cached between calls: each scan walks the filesystem anew.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or default_config

    def scan(self, root: "Path | str", max_depth: Optional[int] = None) -> ProjectStructure:
        """
        Scan a project directory.

        Args:
            root: Project root
            max_depth: Levels to descend; entries at depth < max_depth are
                listed, where the root's direct children sit at depth 0.
                Defaults to ``config.max_depth``.

        Returns:
            ProjectStructure for the root

        Raises:
            PathNotFoundError: If root does not exist
        """
        root_path = require_path(root)
        depth = self.config.max_depth if max_depth is None else max_depth
        logger.info(f"Scanning {root_path} (max depth {depth})")

        files = self._build_tree(root_path, depth, 0)
        total_size = self._directory_size(root_path)
        total_files = count_tree_files(files)
        languages = language_stats(f for node in files for f in node.iter_files())

        logger.debug(f"Scan found {total_files} files, {total_size} bytes")
        return ProjectStructure(
            root_path=str(root_path),
            files=files,
            total_files=total_files,
            total_size=total_size,
            languages=languages,
        )

    def project_metrics(self, root: "Path | str") -> ProjectMetrics:
        """
        Run a structure scan, then read every file for line counts.

        Unreadable files are dropped from the line totals and file count.
        """
        structure = self.scan(root)

        stats: list[FileStat] = []
        lines_by_language: Counter = Counter()
        for node in structure.iter_files():
            try:
                size, lines = file_stats(Path(node.absolute_path))
            except FileAccessError as e:
                logger.warning(f"Skipping {node.absolute_path}: {e.reason}")
                continue
            stats.append(FileStat(path=node.absolute_path, size=size, lines=lines))
            if node.language and node.language != UNKNOWN_LANGUAGE:
                lines_by_language[node.language] += lines

        total_lines = sum(stat.lines for stat in stats)
        total_files = len(stats)
        average = structure.total_size / total_files if total_files else 0.0

        languages = tuple(
            LanguageStats(
                language=lang.language,
                files=lang.files,
                lines=lines_by_language.get(lang.language, 0),
                percentage=lang.percentage,
            )
            for lang in structure.languages
        )
        largest = tuple(sorted(stats, key=lambda s: s.size, reverse=True)[:_LARGEST_FILES])

        return ProjectMetrics(
            total_lines=total_lines,
            total_files=total_files,
            total_size=structure.total_size,
            average_file_size=average,
            languages=languages,
            largest_files=largest,
        )

    def _build_tree(self, directory: Path, max_depth: int, depth: int) -> tuple[FileNode, ...]:
        if depth >= max_depth:
            return ()

        try:
            entries = iter_entries(directory, self.config)
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return ()

        nodes: list[FileNode] = []
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=False):
                nodes.append(
                    FileNode(
                        name=entry.name,
                        absolute_path=str(path),
                        kind=NodeKind.DIRECTORY,
                        children=self._build_tree(path, max_depth, depth + 1),
                    )
                )
                continue

            try:
                size = entry.stat().st_size
            except OSError as e:
                logger.warning(f"Cannot stat {path}: {e}")
                continue
            nodes.append(
                FileNode(
                    name=entry.name,
                    absolute_path=str(path),
                    kind=NodeKind.FILE,
                    size=size,
                    extension=get_extension(path),
                    language=detect_language(path),
                )
            )
        return tuple(nodes)

    def _directory_size(self, directory: Path) -> int:
        """Recursive byte total, independent of the depth cap."""
        total = 0
        try:
            entries = iter_entries(directory, self.config)
        except OSError as e:
            logger.debug(f"Size walk skipped {directory}: {e}")
            return 0

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    total += self._directory_size(Path(entry.path))
                else:
                    total += entry.stat().st_size
            except OSError as e:
                logger.debug(f"Size walk skipped {entry.path}: {e}")
        return total


def language_stats(files: Iterable[FileNode]) -> tuple[LanguageStats, ...]:
    """File counts and shares per language, in first-seen order.

    Files labelled "Unknown" are left out of both the counts and the total.
    """
    counts: dict[str, int] = {}
    for node in files:
        if node.language and node.language != UNKNOWN_LANGUAGE:
            counts[node.language] = counts.get(node.language, 0) + 1

    total = sum(counts.values())
    return tuple(
        LanguageStats(
            language=language,
            files=count,
            lines=0,
            percentage=(count / total) * 100 if total > 0 else 0.0,
        )
        for language, count in counts.items()
    )


def count_tree_files(nodes: Iterable[FileNode]) -> int:
    return sum(1 for node in nodes for _ in node.iter_files())


def find_files(
    root: Path,
    extensions: Iterable[str] = CODE_EXTENSIONS,
    config: Optional[AnalysisConfig] = None,
) -> list[Path]:
    """
    Recursively find files under root whose extension is in ``extensions``.

    Hidden entries and ``config.ignore_dirs`` are pruned at every level.
    Unlistable subdirectories are logged and skipped.

    Args:
        root: Directory to search
        extensions: Lower-case extensions without the dot
        config: Analysis configuration

    Returns:
        Absolute file paths in deterministic (sorted walk) order
    """
    config = config or default_config
    wanted = set(extensions)
    return [path for path in _walk_files(root, config) if get_extension(path) in wanted]


def _walk_files(directory: Path, config: AnalysisConfig) -> Iterator[Path]:
    try:
        entries = iter_entries(directory, config)
    except OSError as e:
        logger.warning(f"Cannot list {directory}: {e}")
        return

    for entry in entries:
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.warning(f"Cannot stat {path}: {e}")
            continue
        if is_dir:
            yield from _walk_files(path, config)
        elif entry.is_file():
            yield path
