"""Tests for the tree-sitter parser registry."""

import pytest

from codescope.scanning.treesitter_parser import (
    TREE_SITTER_AVAILABLE,
    ParserRegistry,
    get_supported_languages,
)


class TestAvailability:
    """Availability detection."""

    def test_availability_flag_is_bool(self):
        """TREE_SITTER_AVAILABLE is a boolean."""
        assert isinstance(TREE_SITTER_AVAILABLE, bool)

    def test_supported_languages_returns_list(self):
        """get_supported_languages returns a list."""
        assert isinstance(get_supported_languages(), list)

    def test_supported_languages_empty_when_unavailable(self):
        """Without tree-sitter no grammar is reported."""
        if not TREE_SITTER_AVAILABLE:
            assert get_supported_languages() == []


class TestRegistryWithoutGrammar:
    """Registry behavior that holds with or without tree-sitter."""

    def test_unknown_grammar_returns_none(self):
        """parse() returns None for a grammar nobody provides."""
        registry = ParserRegistry()
        assert registry.parse(b"some code", "unknown_language") is None
        assert not registry.is_supported("unknown_language")

    def test_failed_grammar_not_cached(self):
        """Unavailable grammars never show up as cached parsers."""
        registry = ParserRegistry()
        registry.get("unknown_language")
        assert "unknown_language" not in registry.cached_grammars


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter not installed")
class TestRegistry:
    """Tests that require tree-sitter to be installed."""

    @pytest.fixture
    def registry(self):
        return ParserRegistry()

    def test_python_tree(self, registry):
        """parse() returns a tree for valid Python."""
        if "python" not in get_supported_languages():
            pytest.skip("Python grammar not installed")
        tree = registry.parse(b"def foo():\n    pass\n", "python")
        assert tree is not None
        assert tree.root_node.type == "module"

    def test_parser_reused(self, registry):
        """One parser per grammar is built and then reused."""
        if "javascript" not in get_supported_languages():
            pytest.skip("JavaScript grammar not installed")
        first = registry.get("javascript")
        assert registry.get("javascript") is first
        assert registry.cached_grammars == ["javascript"]

    @pytest.mark.parametrize(
        "grammar,code",
        [
            ("go", b"package main\n\nfunc main() {\n}\n"),
            ("typescript", b"function greet(name: string): string { return name; }"),
            ("rust", b"fn main() {}\n"),
            ("java", b"class A { void run() {} }\n"),
        ],
    )
    def test_other_grammars(self, registry, grammar, code):
        """Each installed grammar yields a tree."""
        if grammar not in get_supported_languages():
            pytest.skip(f"{grammar} grammar not installed")
        assert registry.parse(code, grammar) is not None
