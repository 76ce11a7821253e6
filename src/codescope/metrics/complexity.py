"""Approximate cyclomatic complexity by decision-token counting.

The score is 1 plus one increment per occurrence of each decision token on
each line in range. Matching is plain substring search, so tokens inside
strings, comments or longer identifiers ("format" contains "for") count too,
and "??" also counts as two "?".
"""

from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig, ThresholdConfig, default_config
from ..exceptions import TargetNotFoundError
from ..file_ops import read_text, require_path
from ..logging_config import get_logger
from ..scanning.extractor import FunctionDecl, SourceExtractor
from ..scanning.languages import get_language_config, starts_declaration
from .models import CodeComplexity, ComplexityLevel

logger = get_logger(__name__)

DECISION_TOKENS = ("if", "else", "while", "for", "switch", "case", "catch", "&&", "||", "?", "??")

_DEFAULT_DECLARATION_PREFIXES = ("function", "const", "class")

RECOMMEND_SPLIT = "Consider breaking this function into smaller functions"
RECOMMEND_EXTRACT = "Extract complex conditions into named functions"
RECOMMEND_REFACTOR = "This function is too complex and should be refactored"


class ComplexityAnalyzer:
    """Scores a file, or one function in it.

    With a syntax tree the function is located by its declaration and its
    body is taken to run until the next line opening with a declaration
    keyword of the file's language. Without one, the function is located by
    text search and ends at the first lone ``}`` more than three lines further
    down.
    """

    def __init__(self, extractor: SourceExtractor, config: Optional[AnalysisConfig] = None):
        self.extractor = extractor
        self.config = config or default_config

    def analyze(self, file: "Path | str", function_name: Optional[str] = None) -> CodeComplexity:
        """
        Compute the complexity of a file or function.

        Raises:
            PathNotFoundError: If the file does not exist
            FileAccessError: If the file cannot be read
            TargetNotFoundError: If function_name is not declared in the file
        """
        filepath = require_path(file)
        content = read_text(filepath)
        lines = content.split("\n")

        start, end = 0, len(lines)
        if function_name:
            syntax = self.extractor.parse(filepath, content)
            if syntax is not None:
                start, end = self._structured_range(syntax.find_function(function_name), filepath, lines)
            else:
                start, end = _text_search_range(function_name, lines)
            if start is None:
                raise TargetNotFoundError(function_name, str(filepath))

        score = 1 + count_decision_tokens(lines[start:end])
        logger.debug(f"Complexity of {filepath} lines {start + 1}-{end}: {score}")

        thresholds = self.config.thresholds
        return CodeComplexity(
            file=str(filepath),
            function=function_name,
            score=score,
            level=complexity_level(score, thresholds),
            recommendations=recommendations_for(score, thresholds),
        )

    def _structured_range(
        self, fn: Optional[FunctionDecl], filepath: Path, lines: list[str]
    ) -> tuple[Optional[int], Optional[int]]:
        if fn is None:
            return None, None
        language = get_language_config(filepath)
        prefixes = language.declaration_prefixes if language else _DEFAULT_DECLARATION_PREFIXES

        start = fn.line - 1
        end = len(lines)
        for i in range(start + 1, len(lines)):
            if starts_declaration(lines[i], prefixes):
                end = i
                break
        return start, end


def _text_search_range(function_name: str, lines: list[str]) -> tuple[Optional[int], Optional[int]]:
    needles = (f"function {function_name}", f"{function_name}(", f"const {function_name} =")
    for i, line in enumerate(lines):
        if any(needle in line for needle in needles):
            end = len(lines)
            for j in range(i + 4, len(lines)):
                if lines[j].strip() == "}":
                    end = j
                    break
            return i, end
    return None, None


def count_decision_tokens(lines: list[str]) -> int:
    return sum(line.count(token) for line in lines for token in DECISION_TOKENS)


def complexity_level(score: int, thresholds: ThresholdConfig) -> ComplexityLevel:
    if score <= thresholds.complexity_low_max:
        return "low"
    if score <= thresholds.complexity_medium_max:
        return "medium"
    if score <= thresholds.complexity_high_max:
        return "high"
    return "very-high"


def recommendations_for(score: int, thresholds: ThresholdConfig) -> tuple[str, ...]:
    recommendations: list[str] = []
    if score > thresholds.complexity_recommend_above:
        recommendations.append(RECOMMEND_SPLIT)
        recommendations.append(RECOMMEND_EXTRACT)
    if score > thresholds.complexity_severe_above:
        recommendations.append(RECOMMEND_REFACTOR)
    return tuple(recommendations)
