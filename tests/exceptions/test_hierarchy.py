"""Tests for the exception hierarchy."""

from pathlib import Path

from codescope.exceptions import (
    AnalysisError,
    CodescopeError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidPathError,
    ParsingError,
    PathNotFoundError,
    TargetNotFoundError,
)


class TestHierarchy:
    """Every error derives from CodescopeError."""

    def test_analysis_errors(self):
        """Read, parse and target errors are analysis errors."""
        for error in (
            FileAccessError(Path("a.js"), "denied"),
            ParsingError(Path("a.js"), "JavaScript", "bad"),
            TargetNotFoundError("foo", Path("a.js")),
        ):
            assert isinstance(error, AnalysisError)
            assert isinstance(error, CodescopeError)

    def test_configuration_errors(self):
        """Path and config errors are configuration errors."""
        assert isinstance(PathNotFoundError(Path("x")), InvalidPathError)
        assert isinstance(PathNotFoundError(Path("x")), ConfigurationError)
        assert isinstance(InvalidConfigError("k", 1, "bad"), ConfigurationError)


class TestMessages:
    """Messages and details."""

    def test_details_appended(self):
        """__str__ lists details as key=value."""
        error = CodescopeError("Boom", details={"a": "1", "b": "2"})
        assert str(error) == "Boom (a=1, b=2)"
        assert str(CodescopeError("Plain")) == "Plain"

    def test_path_not_found(self):
        """The message names the missing path."""
        error = PathNotFoundError(Path("/no/such"))
        assert str(error).startswith("Path does not exist: /no/such")
        assert error.reason == "does not exist"

    def test_target_not_found(self):
        """The message names the function and file."""
        error = TargetNotFoundError("render", Path("app.js"))
        assert str(error).startswith("Function render not found in app.js")
        assert error.function_name == "render"

    def test_file_access_reason(self):
        """The reason is kept for logging."""
        error = FileAccessError(Path("a.js"), "OS error: denied")
        assert error.reason == "OS error: denied"
        assert "reason=OS error: denied" in str(error)
