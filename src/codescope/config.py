"""Configuration loading and management for codescope.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.codescope.toml)
    3. Project config (./codescope.toml)
    4. Explicit config file
    5. Environment variables (CODESCOPE_* prefix)
    6. Keyword overrides

Example:
    >>> config = load_config(max_depth=3)
    >>> config.max_depth
    3
    >>> config.thresholds.long_method_lines
    50
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .exceptions import CodescopeError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class ThresholdConfig:
    """Heuristic thresholds for complexity levels and smell detection.

    Defaults are the fixed values the metrics were calibrated against;
    lowering a threshold yields more findings.

    Attributes:
        Complexity:
            complexity_low_max: Highest score still classified "low"
            complexity_medium_max: Highest score still classified "medium"
            complexity_high_max: Highest score still classified "high"
            complexity_recommend_above: Scores above this get refactoring advice
            complexity_severe_above: Scores above this get the strongest advice

        Long Method:
            long_method_lines: Function length (lines) above which it is reported
            long_method_high_lines: Length above which severity is "high"

        Large File:
            large_file_lines: Line count above which a file is reported
            large_file_high_lines: Line count above which severity is "high"

        Magic Number:
            magic_number_min_digits: Minimum digit run treated as a literal
            magic_number_min_value: Literal must exceed this value

        Duplicate Code:
            duplicate_window_lines: Lines fingerprinted after each function start
    """

    complexity_low_max: int = 5
    complexity_medium_max: int = 10
    complexity_high_max: int = 20
    complexity_recommend_above: int = 10
    complexity_severe_above: int = 20

    long_method_lines: int = 50
    long_method_high_lines: int = 100

    large_file_lines: int = 500
    large_file_high_lines: int = 1000

    magic_number_min_digits: int = 3
    magic_number_min_value: int = 10

    duplicate_window_lines: int = 20

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        if not (
            self.complexity_low_max <= self.complexity_medium_max <= self.complexity_high_max
        ):
            raise InvalidConfigError(
                "complexity levels",
                (self.complexity_low_max, self.complexity_medium_max, self.complexity_high_max),
                "level bounds must be non-decreasing",
            )
        if self.long_method_lines < 1 or self.long_method_high_lines < self.long_method_lines:
            raise InvalidConfigError(
                "long_method_lines",
                self.long_method_lines,
                "must be at least 1 and not exceed long_method_high_lines",
            )
        if self.large_file_lines < 1 or self.large_file_high_lines < self.large_file_lines:
            raise InvalidConfigError(
                "large_file_lines",
                self.large_file_lines,
                "must be at least 1 and not exceed large_file_high_lines",
            )
        if self.magic_number_min_digits < 1:
            raise InvalidConfigError(
                "magic_number_min_digits", self.magic_number_min_digits, "must be at least 1"
            )
        if self.duplicate_window_lines < 1:
            raise InvalidConfigError(
                "duplicate_window_lines", self.duplicate_window_lines, "must be at least 1"
            )


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        Traversal:
            max_depth: Levels listed by structure scans (1 = root's direct children only)
            ignore_dirs: Directory names pruned from every walk
            skip_hidden: Prune entries whose name starts with a dot

        Dependency graph:
            resolve_imports: Map raw import strings onto project files before
                building edges. Off by default, so edges keep the identifier
                exactly as written in source.

        Output control:
            verbosity: Logging verbosity level
    """

    max_depth: int = 10
    ignore_dirs: tuple[str, ...] = ("node_modules", "dist", "build")
    skip_hidden: bool = True

    resolve_imports: bool = False

    verbosity: Verbosity = "normal"

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_depth < 0:
            raise InvalidConfigError("max_depth", self.max_depth, "must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        # TOML arrays arrive as lists
        if not isinstance(self.ignore_dirs, tuple):
            object.__setattr__(self, "ignore_dirs", tuple(self.ignore_dirs))

    def is_ignored(self, name: str) -> bool:
        """True if a directory entry with this name is pruned from walks."""
        if self.skip_hidden and name.startswith("."):
            return True
        return name in self.ignore_dirs


default_config = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        CodescopeError: If a config file is missing or malformed
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".codescope.toml"
    if global_config.exists():
        merged.update(_load_toml_section(global_config))

    project_config = Path.cwd() / "codescope.toml"
    if project_config.exists():
        merged.update(_load_toml_section(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise CodescopeError(f"Config file not found: {config_file}")
        merged.update(_load_toml_section(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    thresholds_dict = merged.pop("thresholds", None)
    if thresholds_dict is not None:
        if isinstance(thresholds_dict, dict):
            try:
                merged["thresholds"] = ThresholdConfig(**thresholds_dict)
            except TypeError as e:
                raise CodescopeError(f"Invalid [thresholds] config: {e}")
        elif isinstance(thresholds_dict, ThresholdConfig):
            merged["thresholds"] = thresholds_dict

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise CodescopeError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODESCOPE_* environment variables.

    Supported environment variables:
        CODESCOPE_MAX_DEPTH: int
        CODESCOPE_SKIP_HIDDEN: bool (true/false/1/0)
        CODESCOPE_RESOLVE_IMPORTS: bool
        CODESCOPE_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CODESCOPE_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"CODESCOPE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's scalar type.

    Returns None for types that cannot be expressed as one env string
    (tuples, nested configs).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_section(path: Path) -> dict:
    """Load a TOML config file, reading ``[tool.codescope]`` when present."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise CodescopeError(f"Invalid config file '{path}': {e}")

    tool_section = data.get("tool", {}).get("codescope")
    if isinstance(tool_section, dict):
        return tool_section
    return data
