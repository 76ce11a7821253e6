"""Naming-convention test coverage.

A source file counts as covered when a test file next to it follows its
language's test naming convention: ``foo.js`` is covered by ``foo.test.js``
or ``foo.spec.js``, ``bar.py`` by ``bar_test.py`` or ``test_bar.py``,
``Baz.java`` by ``BazTest.java``. No tests are executed.
"""

from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig, default_config
from ..file_ops import require_path
from ..logging_config import get_logger
from ..scanning.languages import source_base_name, covered_base_name
from ..scanning.scanner import find_files
from .models import FileCoverage, TestCoverage

logger = get_logger(__name__)


class CoverageAnalyzer:
    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or default_config

    def analyze(self, root: "Path | str") -> TestCoverage:
        """
        Match source files against test files under root.

        ``total`` and ``files`` cover every code file, test files included
        (a test file is never covered itself). Test files are never reported
        missing.

        Raises:
            PathNotFoundError: If root does not exist
        """
        root_path = require_path(root)
        files = find_files(root_path, config=self.config)

        tested = {base for base in map(covered_base_name, files) if base is not None}

        entries: list[FileCoverage] = []
        missing: list[str] = []
        for filepath in files:
            is_test = covered_base_name(filepath) is not None
            covered = not is_test and source_base_name(filepath) in tested
            entries.append(FileCoverage(file=str(filepath), coverage=100 if covered else 0))
            if not covered and not is_test:
                missing.append(str(filepath))

        total = len(files)
        covered_count = sum(1 for entry in entries if entry.coverage)
        percentage = (covered_count / total) * 100 if total > 0 else 0.0
        logger.debug(f"{covered_count}/{total} code files have a matching test file")

        return TestCoverage(
            total=total,
            covered=covered_count,
            percentage=percentage,
            files=tuple(entries),
            missing=tuple(missing),
        )
