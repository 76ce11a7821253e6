"""Tests for naming-convention test coverage."""

import pytest

from codescope.exceptions import PathNotFoundError
from codescope.metrics.coverage import CoverageAnalyzer


class TestCoverage:
    """Source files matched to sibling test files."""

    def test_sibling_test_covers(self, make_project, config):
        """foo.js with foo.test.js is covered; bar.js is missing."""
        root = make_project({"foo.js": "", "foo.test.js": "", "bar.js": ""})
        result = CoverageAnalyzer(config).analyze(root)
        assert result.total == 3
        assert result.covered == 1
        assert result.percentage == pytest.approx(100 / 3)
        assert result.missing == (str(root / "bar.js"),)
        coverage = {entry.file: entry.coverage for entry in result.files}
        assert coverage == {
            str(root / "bar.js"): 0,
            str(root / "foo.js"): 100,
            str(root / "foo.test.js"): 0,
        }

    def test_test_files_counted_but_never_missing(self, make_project, config):
        """Test files count toward the total but are never reported missing."""
        root = make_project({"src/util.py": "", "src/test_util.py": "", "src/api_test.go": ""})
        result = CoverageAnalyzer(config).analyze(root)
        assert result.total == 3
        assert result.covered == 1
        assert result.missing == ()

    def test_different_directory_not_matched(self, make_project, config):
        """Tests only cover files in their own directory."""
        root = make_project({"src/foo.ts": "", "tests/foo.spec.ts": ""})
        result = CoverageAnalyzer(config).analyze(root)
        assert result.covered == 0
        assert result.missing == (str(root / "src" / "foo.ts"),)

    def test_large_untested_file_missing(self, make_project, config):
        """A big file without a test counterpart is reported missing."""
        root = make_project({"big.js": "x();\n" * 600})
        result = CoverageAnalyzer(config).analyze(root)
        assert str(root / "big.js") in result.missing

    def test_empty_project(self, tmp_path, config):
        """No sources gives 0 percent."""
        result = CoverageAnalyzer(config).analyze(tmp_path)
        assert result.total == 0
        assert result.percentage == 0.0

    def test_missing_root(self, tmp_path, config):
        """A missing root raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError):
            CoverageAnalyzer(config).analyze(tmp_path / "nope")

    def test_percentage_over_all_code_files(self, make_project, config):
        """A source and its test give 1 of 2 code files covered."""
        root = make_project({"foo.js": "", "foo.test.js": ""})
        result = CoverageAnalyzer(config).analyze(root)
        assert result.total == 2
        assert result.covered == 1
        assert result.percentage == pytest.approx(50.0)
        assert result.missing == ()
