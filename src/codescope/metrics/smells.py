"""Heuristic code smell detection.

Four independent line-based heuristics run over every source file:

    long-method     brace counting from each function start
    magic-number    3+ digit integer literals outside const/let/comment lines
    duplicate-code  identical whitespace-normalized windows after function starts
    large-file      total line count

Languages without braces (Python) end a "function" on its second line, so
long-method never fires for them.
"""

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig, ThresholdConfig, default_config
from ..exceptions import FileAccessError, InvalidConfigError
from ..file_ops import read_text, require_path
from ..logging_config import get_logger
from ..scanning.languages import LanguageConfig, get_language_config
from ..scanning.scanner import find_files
from .models import DUPLICATE_CODE, LARGE_FILE, LONG_METHOD, MAGIC_NUMBER, CodeSmell

logger = get_logger(__name__)

SMELL_TYPES = ("long-method", "magic-number", "duplicate-code", "large-file")

_WHITESPACE = re.compile(r"\s+")
_MAGIC_NUMBER_SKIP_MARKERS = ("//", "const", "let")


def validate_smell_types(types: Optional[Iterable[str]]) -> Optional[frozenset[str]]:
    """
    Normalize a smell-type filter; None enables every type.

    Raises:
        InvalidConfigError: If a type is not one of SMELL_TYPES
    """
    if types is None:
        return None
    selected = frozenset(types)
    unknown = sorted(selected.difference(SMELL_TYPES))
    if unknown:
        raise InvalidConfigError("types", unknown, f"expected any of {', '.join(SMELL_TYPES)}")
    return selected


class SmellDetector:
    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or default_config

    def detect(self, root: "Path | str", types: Optional[Iterable[str]] = None) -> list[CodeSmell]:
        """
        Scan every source file under root.

        Args:
            root: Project root
            types: Smell types to run (see SMELL_TYPES); None runs all

        Returns:
            Smells in file order, grouped per file by type

        Raises:
            PathNotFoundError: If root does not exist
            InvalidConfigError: If types contains an unknown value
        """
        selected = validate_smell_types(types)
        root_path = require_path(root)
        files = find_files(root_path, config=self.config)
        logger.info(f"Checking {len(files)} files for code smells")

        smells: list[CodeSmell] = []
        for filepath in files:
            try:
                content = read_text(filepath)
            except FileAccessError as e:
                logger.warning(f"Skipping {filepath}: {e.reason}")
                continue
            smells.extend(self.detect_in_content(str(filepath), content, selected))
        return smells

    def detect_in_content(
        self, file: str, content: str, selected: Optional[frozenset[str]] = None
    ) -> list[CodeSmell]:
        """Run the enabled heuristics on one file's content."""
        lines = content.split("\n")
        language = get_language_config(file)
        thresholds = self.config.thresholds

        def enabled(smell_type: str) -> bool:
            return selected is None or smell_type in selected

        smells: list[CodeSmell] = []
        if enabled("long-method") and language is not None:
            smells.extend(find_long_methods(file, lines, language, thresholds))
        if enabled("magic-number"):
            smells.extend(find_magic_numbers(file, lines, thresholds))
        if enabled("duplicate-code") and language is not None:
            smells.extend(find_duplicate_code(file, lines, language, thresholds))
        if enabled("large-file"):
            smell = check_file_size(file, lines, thresholds)
            if smell is not None:
                smells.append(smell)
        return smells


def find_long_methods(
    file: str, lines: list[str], language: LanguageConfig, thresholds: ThresholdConfig
) -> list[CodeSmell]:
    """Functions whose brace-balanced length exceeds the threshold.

    Counting starts at the function-start line and stops at the first line
    after it where the running ``{`` minus ``}`` balance is zero. A start
    whose braces never balance is not reported.
    """
    smells = []
    for i, line in enumerate(lines):
        if not language.is_function_start(line):
            continue

        length = 0
        balance = 0
        for current in lines[i:]:
            length += 1
            balance += current.count("{") - current.count("}")
            if balance == 0 and length > 1:
                if length > thresholds.long_method_lines:
                    smells.append(
                        CodeSmell(
                            smell_type=LONG_METHOD,
                            severity="high" if length > thresholds.long_method_high_lines else "medium",
                            file=file,
                            line=i + 1,
                            message=f"Function is {length} lines long (threshold: {thresholds.long_method_lines})",
                            recommendation="Break this function into smaller, more focused functions",
                        )
                    )
                break
    return smells


def find_magic_numbers(file: str, lines: list[str], thresholds: ThresholdConfig) -> list[CodeSmell]:
    pattern = re.compile(rf"\b\d{{{thresholds.magic_number_min_digits},}}\b")
    smells = []
    for index, line in enumerate(lines):
        if any(marker in line for marker in _MAGIC_NUMBER_SKIP_MARKERS):
            continue
        for match in pattern.findall(line):
            if int(match) > thresholds.magic_number_min_value:
                smells.append(
                    CodeSmell(
                        smell_type=MAGIC_NUMBER,
                        severity="low",
                        file=file,
                        line=index + 1,
                        message=f"Magic number detected: {match}",
                        recommendation="Replace with a named constant",
                    )
                )
    return smells


def find_duplicate_code(
    file: str, lines: list[str], language: LanguageConfig, thresholds: ThresholdConfig
) -> list[CodeSmell]:
    """Function starts whose following window matches an earlier one verbatim.

    Every later repeat is reported against the first occurrence.
    """
    window = thresholds.duplicate_window_lines
    seen: dict[str, int] = {}
    smells = []
    for i, line in enumerate(lines):
        if not language.is_function_start(line):
            continue

        fingerprint = _WHITESPACE.sub(" ", "\n".join(lines[i : i + window])).strip()
        first_line = seen.get(fingerprint)
        if first_line is None:
            seen[fingerprint] = i + 1
            continue
        smells.append(
            CodeSmell(
                smell_type=DUPLICATE_CODE,
                severity="medium",
                file=file,
                line=i + 1,
                message=f"Similar code found at line {first_line}",
                recommendation="Extract common code into a shared function",
            )
        )
    return smells


def check_file_size(file: str, lines: list[str], thresholds: ThresholdConfig) -> Optional[CodeSmell]:
    count = len(lines)
    if count <= thresholds.large_file_lines:
        return None
    return CodeSmell(
        smell_type=LARGE_FILE,
        severity="high" if count > thresholds.large_file_high_lines else "medium",
        file=file,
        message=f"File has {count} lines (threshold: {thresholds.large_file_lines})",
        recommendation="Consider splitting this file into smaller modules",
    )
