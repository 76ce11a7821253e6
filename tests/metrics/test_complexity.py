"""Tests for decision-token complexity."""

import pytest

from codescope.config import AnalysisConfig, ThresholdConfig
from codescope.exceptions import PathNotFoundError, TargetNotFoundError
from codescope.metrics.complexity import (
    RECOMMEND_EXTRACT,
    RECOMMEND_REFACTOR,
    RECOMMEND_SPLIT,
    ComplexityAnalyzer,
    complexity_level,
    count_decision_tokens,
)
from codescope.scanning.extractor import FunctionDecl, NullExtractor
from codescope.scanning.languages import starts_declaration

from conftest import StubExtractor

TWO_IFS_ONE_AND = "x = 1\nif x:\n    y = 2\nif y:\n    z = x && y\n"


class TestScore:
    """Whole-file scoring."""

    def test_two_ifs_and_one_and(self, make_project, config):
        """Base 1 plus two 'if' and one '&&' gives 4, level low."""
        root = make_project({"sample.py": TWO_IFS_ONE_AND})
        result = ComplexityAnalyzer(NullExtractor(), config).analyze(root / "sample.py")
        assert result.score == 4
        assert result.level == "low"
        assert result.recommendations == ()
        assert result.function is None

    def test_tokens_counted_per_occurrence(self):
        """Two '&&' on one line count twice; tokens inside words count too."""
        assert count_decision_tokens(["a && b && c"]) == 2
        assert count_decision_tokens(["format(x)"]) == 1  # "for"
        assert count_decision_tokens(["a ?? b"]) == 3  # "?" twice, "??" once

    def test_comments_and_strings_count(self, make_project, config):
        """Tokens in comments are indistinguishable from code."""
        root = make_project({"c.js": "// if while\nlet s = 'case';\n"})
        result = ComplexityAnalyzer(NullExtractor(), config).analyze(root / "c.js")
        assert result.score == 4

    def test_missing_file(self, tmp_path, config):
        """A missing file raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError):
            ComplexityAnalyzer(NullExtractor(), config).analyze(tmp_path / "nope.js")


class TestLevels:
    """Level buckets and recommendations."""

    @pytest.mark.parametrize(
        "score,level",
        [(1, "low"), (5, "low"), (6, "medium"), (10, "medium"), (11, "high"), (20, "high"), (21, "very-high")],
    )
    def test_bucket_boundaries(self, score, level):
        """<=5 low, <=10 medium, <=20 high, else very-high."""
        assert complexity_level(score, ThresholdConfig()) == level

    def test_recommendations_above_ten(self, make_project, config):
        """Scores above 10 get two recommendations, above 20 a third."""
        root = make_project({"m.js": "if\n" * 10 + "while\n" * 10})
        result = ComplexityAnalyzer(NullExtractor(), config).analyze(root / "m.js")
        assert result.score == 21
        assert result.level == "very-high"
        assert result.recommendations == (RECOMMEND_SPLIT, RECOMMEND_EXTRACT, RECOMMEND_REFACTOR)

        root = make_project({"n.js": "if\n" * 10})
        result = ComplexityAnalyzer(NullExtractor(), config).analyze(root / "n.js")
        assert result.score == 11
        assert result.recommendations == (RECOMMEND_SPLIT, RECOMMEND_EXTRACT)

    def test_thresholds_from_config(self, make_project):
        """Level bounds come from the configuration."""
        config = AnalysisConfig(thresholds=ThresholdConfig(complexity_low_max=2))
        root = make_project({"s.py": TWO_IFS_ONE_AND})
        result = ComplexityAnalyzer(NullExtractor(), config).analyze(root / "s.py")
        assert result.level == "medium"


JS_FILE = """function first(a) {
  if (a) {
    return 1;
  }
  return 2;
}
function second(b) {
  while (b) {
    if (b && b.next) {
      b = b.next;
    }
  }
}
"""


class TestFunctionScope:
    """Scoring a single function."""

    def test_structured_range_ends_at_next_declaration(self, make_project, config):
        """The body runs from the name's line to the next top-level declaration."""
        root = make_project({"f.js": JS_FILE})
        extractor = StubExtractor(
            functions={"f.js": [FunctionDecl("first", 1), FunctionDecl("second", 7)]}
        )
        analyzer = ComplexityAnalyzer(extractor, config)
        assert analyzer.analyze(root / "f.js", "first").score == 2
        second = analyzer.analyze(root / "f.js", "second")
        assert second.score == 4
        assert second.function == "second"

    def test_structured_missing_function(self, make_project, config):
        """An unknown name raises TargetNotFoundError."""
        root = make_project({"f.js": JS_FILE})
        extractor = StubExtractor(functions={"f.js": [FunctionDecl("first", 1)]})
        with pytest.raises(TargetNotFoundError) as exc_info:
            ComplexityAnalyzer(extractor, config).analyze(root / "f.js", "third")
        assert "Function third not found" in str(exc_info.value)

    def test_fallback_range_ends_at_closing_brace(self, make_project, config):
        """Text search finds the function; the first lone '}' after three lines ends it."""
        root = make_project({"f.js": JS_FILE})
        analyzer = ComplexityAnalyzer(NullExtractor(), config)
        # lines 0..4 of "first": one "if"
        assert analyzer.analyze(root / "f.js", "first").score == 2

    def test_fallback_missing_function(self, make_project, config):
        """Text search that finds nothing raises TargetNotFoundError."""
        root = make_project({"f.js": JS_FILE})
        with pytest.raises(TargetNotFoundError):
            ComplexityAnalyzer(NullExtractor(), config).analyze(root / "f.js", "third")


PY_FILE = """def f(x):
    defaults = {}
    classes = []
    if x:
        if x > 1:
            return defaults
    return classes


class Other:
    pass
"""


class TestDeclarationKeywords:
    """Range ends only at whole declaration keywords."""

    def test_identifier_sharing_keyword_prefix(self, make_project, config):
        """'defaults' and 'classes' do not end the body of f."""
        root = make_project({"m.py": PY_FILE})
        extractor = StubExtractor(functions={"m.py": [FunctionDecl("f", 1)]})
        result = ComplexityAnalyzer(extractor, config).analyze(root / "m.py", "f")
        assert result.score == 3

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("class Foo:", True),
            ("    def run(self):", True),
            ("async def run():", True),
            ("classes = []", False),
            ("definition = 1", False),
        ],
    )
    def test_starts_declaration(self, line, expected):
        """Keywords match at a word boundary after stripping."""
        assert starts_declaration(line, ("def", "async def", "class")) is expected
