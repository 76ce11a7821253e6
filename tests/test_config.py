"""Tests for configuration loading."""

import pytest

from codescope.config import AnalysisConfig, ThresholdConfig, load_config
from codescope.exceptions import CodescopeError, InvalidConfigError


class TestDefaults:
    """Default values."""

    def test_analysis_defaults(self):
        """Defaults match the documented behavior."""
        config = AnalysisConfig()
        assert config.max_depth == 10
        assert config.ignore_dirs == ("node_modules", "dist", "build")
        assert config.skip_hidden is True
        assert config.resolve_imports is False

    def test_threshold_defaults(self):
        """Smell and complexity thresholds."""
        t = ThresholdConfig()
        assert (t.complexity_low_max, t.complexity_medium_max, t.complexity_high_max) == (5, 10, 20)
        assert (t.long_method_lines, t.long_method_high_lines) == (50, 100)
        assert (t.large_file_lines, t.large_file_high_lines) == (500, 1000)
        assert t.duplicate_window_lines == 20

    def test_is_ignored(self):
        """Dot entries and ignore_dirs are pruned."""
        config = AnalysisConfig()
        assert config.is_ignored(".git")
        assert config.is_ignored("node_modules")
        assert not config.is_ignored("src")
        assert not AnalysisConfig(skip_hidden=False).is_ignored(".github")


class TestValidation:
    """Invalid values are rejected."""

    def test_negative_depth(self):
        """max_depth must be non-negative."""
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(max_depth=-1)

    def test_bad_verbosity(self):
        """verbosity is one of three levels."""
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(verbosity="loud")

    def test_unordered_levels(self):
        """Complexity bounds must not decrease."""
        with pytest.raises(InvalidConfigError):
            ThresholdConfig(complexity_low_max=15)

    def test_list_ignore_dirs_coerced(self):
        """TOML arrays become tuples."""
        assert AnalysisConfig(ignore_dirs=["vendor"]).ignore_dirs == ("vendor",)


class TestLoadConfig:
    """Merging files, environment and overrides."""

    def test_overrides(self):
        """Keyword overrides win; None values are ignored."""
        config = load_config(max_depth=3, resolve_imports=None)
        assert config.max_depth == 3
        assert config.resolve_imports is False

    def test_verbose_and_quiet_flags(self):
        """verbose/quiet fold into verbosity."""
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_toml_file(self, tmp_path):
        """Top-level keys and a [thresholds] table are read."""
        path = tmp_path / "codescope.toml"
        path.write_text(
            'max_depth = 4\nignore_dirs = ["vendor"]\n\n[thresholds]\nlarge_file_lines = 300\n'
        )
        config = load_config(config_file=path)
        assert config.max_depth == 4
        assert config.ignore_dirs == ("vendor",)
        assert config.thresholds.large_file_lines == 300
        assert config.thresholds.long_method_lines == 50

    def test_tool_section(self, tmp_path):
        """A pyproject-style [tool.codescope] section is used when present."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.codescope]\nresolve_imports = true\n")
        assert load_config(config_file=path).resolve_imports is True

    def test_env_vars(self, monkeypatch):
        """CODESCOPE_* variables are parsed to the field type."""
        monkeypatch.setenv("CODESCOPE_MAX_DEPTH", "2")
        monkeypatch.setenv("CODESCOPE_RESOLVE_IMPORTS", "yes")
        config = load_config()
        assert config.max_depth == 2
        assert config.resolve_imports is True

    def test_override_beats_env(self, monkeypatch):
        """Keyword overrides take priority over the environment."""
        monkeypatch.setenv("CODESCOPE_MAX_DEPTH", "2")
        assert load_config(max_depth=7).max_depth == 7

    def test_bad_env_value(self, monkeypatch):
        """Unparseable environment values raise InvalidConfigError."""
        monkeypatch.setenv("CODESCOPE_SKIP_HIDDEN", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_missing_file(self, tmp_path):
        """An explicit file that does not exist is an error."""
        with pytest.raises(CodescopeError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_file(self, tmp_path):
        """Invalid TOML is an error."""
        path = tmp_path / "bad.toml"
        path.write_text("max_depth = = 3\n")
        with pytest.raises(CodescopeError):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        """Unknown keys are reported."""
        path = tmp_path / "extra.toml"
        path.write_text("colour = 'blue'\n")
        with pytest.raises(CodescopeError):
            load_config(config_file=path)
