"""Tree-sitter parser wrapper.

Availability is checked once at import time. Parser instances live in a
ParserRegistry owned by whoever builds the extractor, so tests can swap in
a fresh registry without touching module state.

Usage:
    if TREE_SITTER_AVAILABLE:
        registry = ParserRegistry()
        tree = registry.parse(code_bytes, "python")
"""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, Any

from ..logging_config import get_logger

logger = get_logger(__name__)

TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
# grammar name -> (module, name of the function returning the language capsule)
_grammar_sources: dict[str, tuple[Any, str]] = {}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    try:
        import tree_sitter_javascript

        _grammar_sources["javascript"] = (tree_sitter_javascript, "language")
    except ImportError:
        pass

    try:
        import tree_sitter_typescript

        _grammar_sources["typescript"] = (tree_sitter_typescript, "language_typescript")
        # TSX is bundled with tree-sitter-typescript
        _grammar_sources["tsx"] = (tree_sitter_typescript, "language_tsx")
    except ImportError:
        pass

    try:
        import tree_sitter_python

        _grammar_sources["python"] = (tree_sitter_python, "language")
    except ImportError:
        pass

    try:
        import tree_sitter_java

        _grammar_sources["java"] = (tree_sitter_java, "language")
    except ImportError:
        pass

    try:
        import tree_sitter_go

        _grammar_sources["go"] = (tree_sitter_go, "language")
    except ImportError:
        pass

    try:
        import tree_sitter_rust

        _grammar_sources["rust"] = (tree_sitter_rust, "language")
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:

    class Node:
        text: bytes | None
        type: str
        start_point: tuple[int, int]
        children: list[Node]
        named_children: list[Node]

        def child_by_field_name(self, name: str) -> Node | None: ...

        def children_by_field_name(self, name: str) -> list[Node]: ...

    class Tree:
        root_node: Node


def get_supported_languages() -> list[str]:
    """Grammar names with an installed tree-sitter package."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return list(_grammar_sources.keys())


class ParserRegistry:
    """Lazily builds and caches one tree-sitter parser per grammar.

    Parsers are created on first use and only read afterwards, so one
    registry can serve concurrent analyses.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, Any] = {}
        self._failed: set[str] = set()
        self._lock = Lock()

    def get(self, grammar: str) -> Any | None:
        """Parser for a grammar, or None if it cannot be provided."""
        if not TREE_SITTER_AVAILABLE:
            return None

        parser = self._parsers.get(grammar)
        if parser is not None or grammar in self._failed:
            return parser

        with self._lock:
            if grammar in self._parsers:
                return self._parsers[grammar]
            parser = self._create(grammar)
            if parser is None:
                self._failed.add(grammar)
            else:
                self._parsers[grammar] = parser
            return parser

    def parse(self, code: bytes, grammar: str) -> Tree | None:
        """Parse code and return a syntax tree, or None if unsupported."""
        parser = self.get(grammar)
        if parser is None:
            return None
        result: Tree | None = parser.parse(code)
        return result

    def is_supported(self, grammar: str) -> bool:
        return self.get(grammar) is not None

    @property
    def cached_grammars(self) -> list[str]:
        return sorted(self._parsers)

    def _create(self, grammar: str) -> Any | None:
        source = _grammar_sources.get(grammar)
        if source is None:
            return None

        module, fn_name = source
        lang_fn = getattr(module, fn_name, None)
        if lang_fn is None:
            return None

        try:
            # tree-sitter >= 0.23 returns a PyCapsule; wrap in Language()
            lang_obj = _tree_sitter_module.Language(lang_fn())
            return _tree_sitter_module.Parser(lang_obj)
        except (TypeError, ValueError) as e:
            logger.warning(f"Cannot create tree-sitter parser for {grammar}: {e}")
            return None
