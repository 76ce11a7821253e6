"""Language table: extension classifier plus per-language heuristic patterns.

Adding a new analyzable language:
  1. Add its extensions to EXTENSION_LANGUAGES.
  2. Add a LanguageConfig entry to LANGUAGES below.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

UNKNOWN_LANGUAGE = "Unknown"

# Extension (lower-case, no dot) -> display label
EXTENSION_LANGUAGES: dict[str, str] = {
    "js": "JavaScript",
    "jsx": "JavaScript",
    "mjs": "JavaScript",
    "cjs": "JavaScript",
    "ts": "TypeScript",
    "tsx": "TypeScript",
    "py": "Python",
    "java": "Java",
    "go": "Go",
    "rs": "Rust",
    "rb": "Ruby",
    "c": "C",
    "h": "C",
    "cpp": "C++",
    "cc": "C++",
    "hpp": "C++",
    "cs": "C#",
    "php": "PHP",
    "kt": "Kotlin",
    "swift": "Swift",
    "sh": "Shell",
    "json": "JSON",
    "md": "Markdown",
    "html": "HTML",
    "css": "CSS",
    "scss": "SCSS",
    "xml": "XML",
    "yaml": "YAML",
    "yml": "YAML",
    "toml": "TOML",
    "sql": "SQL",
}

# Extensions the dependency graph, smell scan and coverage heuristic read
CODE_EXTENSIONS: tuple[str, ...] = ("js", "jsx", "ts", "tsx", "py", "java", "go", "rs")


@dataclass(frozen=True)
class LanguageConfig:
    """Heuristic patterns for one analyzable language."""

    name: str
    extensions: tuple[str, ...]

    # Matched against the stripped line; any hit marks a function start
    function_start_patterns: tuple[str, ...] = ()

    # Leading keywords (whole words) that end a function body scan in structured mode
    declaration_prefixes: tuple[str, ...] = ()

    # File-name suffixes marking a test file, replaced by the source extension
    test_suffixes: tuple[str, ...] = ()

    # File-name prefixes marking a test file (Python's test_foo.py)
    test_prefixes: tuple[str, ...] = ()

    # tree-sitter grammar names keyed by extension
    grammars: dict[str, str] = field(default_factory=dict)

    def is_function_start(self, line: str) -> bool:
        stripped = line.strip()
        return any(p.search(stripped) for p in self._compiled_starts())

    def _compiled_starts(self) -> tuple[re.Pattern[str], ...]:
        return _compile(self.function_start_patterns)


_PATTERN_CACHE: dict[tuple[str, ...], tuple[re.Pattern[str], ...]] = {}


def _compile(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    compiled = _PATTERN_CACHE.get(patterns)
    if compiled is None:
        compiled = tuple(re.compile(p) for p in patterns)
        _PATTERN_CACHE[patterns] = compiled
    return compiled


_DECLARATION_CACHE: dict[tuple[str, ...], re.Pattern[str]] = {}


def starts_declaration(line: str, prefixes: tuple[str, ...]) -> bool:
    """True if the stripped line opens with one of the declaration keywords.

    A keyword must end at a word boundary: ``class Foo`` matches "class",
    ``classes = []`` does not.
    """
    if not prefixes:
        return False
    pattern = _DECLARATION_CACHE.get(prefixes)
    if pattern is None:
        alternatives = "|".join(re.escape(p) for p in prefixes)
        pattern = re.compile(rf"^(?:{alternatives})\b")
        _DECLARATION_CACHE[prefixes] = pattern
    return pattern.match(line.strip()) is not None


_JS_FUNCTION_STARTS = (
    r"^(function|const|let|export\s+(function|const|let)|async\s+function)\s+\w+",
    r"^export\s+default\s+function",
)
_JS_DECLARATIONS = ("function", "const", "class")
_JS_TEST_SUFFIXES = (".test", ".spec")


LANGUAGES: dict[str, LanguageConfig] = {
    "JavaScript": LanguageConfig(
        name="JavaScript",
        extensions=("js", "jsx", "mjs", "cjs"),
        function_start_patterns=_JS_FUNCTION_STARTS,
        declaration_prefixes=_JS_DECLARATIONS,
        test_suffixes=_JS_TEST_SUFFIXES,
        grammars={"js": "javascript", "jsx": "javascript", "mjs": "javascript", "cjs": "javascript"},
    ),
    "TypeScript": LanguageConfig(
        name="TypeScript",
        extensions=("ts", "tsx"),
        function_start_patterns=_JS_FUNCTION_STARTS,
        declaration_prefixes=_JS_DECLARATIONS,
        test_suffixes=_JS_TEST_SUFFIXES,
        grammars={"ts": "typescript", "tsx": "tsx"},
    ),
    "Python": LanguageConfig(
        name="Python",
        extensions=("py",),
        function_start_patterns=(r"^def\s+\w+", r"^async\s+def\s+\w+"),
        declaration_prefixes=("def", "async def", "class"),
        test_suffixes=("_test",),
        test_prefixes=("test_",),
        grammars={"py": "python"},
    ),
    "Java": LanguageConfig(
        name="Java",
        extensions=("java",),
        function_start_patterns=(r"^\s*(public|private|protected)?\s*(static)?\s*\w+\s+\w+\s*\(",),
        declaration_prefixes=("public", "private", "protected", "class", "interface"),
        test_suffixes=("Test",),
        grammars={"java": "java"},
    ),
    "Go": LanguageConfig(
        name="Go",
        extensions=("go",),
        function_start_patterns=(r"^func\s+",),
        declaration_prefixes=("func", "type"),
        test_suffixes=("_test",),
        grammars={"go": "go"},
    ),
    "Rust": LanguageConfig(
        name="Rust",
        extensions=("rs",),
        function_start_patterns=(r"^fn\s+\w+", r"^pub\s+fn\s+\w+"),
        declaration_prefixes=("fn", "pub fn", "struct", "pub struct", "impl", "enum", "trait"),
        test_suffixes=("_test",),
        grammars={"rs": "rust"},
    ),
}


PathLike = Union[str, Path]


def get_extension(filepath: PathLike) -> str:
    """Lower-case extension without the leading dot ("" when absent)."""
    return Path(filepath).suffix[1:].lower()


def detect_language(filepath: PathLike) -> str:
    """Map a file path to its language label, or "Unknown"."""
    return EXTENSION_LANGUAGES.get(get_extension(filepath), UNKNOWN_LANGUAGE)


def get_language_config(filepath: PathLike) -> Optional[LanguageConfig]:
    """Heuristic patterns for the file's language, if it is analyzable."""
    return LANGUAGES.get(detect_language(filepath))


def grammar_for(filepath: PathLike) -> Optional[str]:
    """tree-sitter grammar name for a file, e.g. "tsx" for ``App.tsx``."""
    config = get_language_config(filepath)
    if config is None:
        return None
    return config.grammars.get(get_extension(filepath))


def is_code_file(filepath: PathLike) -> bool:
    return get_extension(filepath) in CODE_EXTENSIONS


def is_test_file(filepath: PathLike) -> bool:
    """True if the file name follows its language's test naming convention."""
    return covered_base_name(filepath) is not None


def covered_base_name(filepath: PathLike) -> Optional[str]:
    """Path of the source file a test file covers, minus extension.

    ``src/foo.test.js`` -> ``src/foo``; ``pkg/test_bar.py`` -> ``pkg/bar``.
    Returns None when the file is not a test file.
    """
    path = Path(filepath)
    config = get_language_config(path)
    if config is None:
        return None
    stem = path.name[: -len(path.suffix)] if path.suffix else path.name
    for suffix in config.test_suffixes:
        if stem.endswith(suffix) and len(stem) > len(suffix):
            return str(path.parent / stem[: -len(suffix)])
    for prefix in config.test_prefixes:
        if stem.startswith(prefix) and len(stem) > len(prefix):
            return str(path.parent / stem[len(prefix):])
    return None


def source_base_name(filepath: PathLike) -> str:
    """Path of a source file minus its extension."""
    path = Path(filepath)
    return str(path.with_suffix(""))
