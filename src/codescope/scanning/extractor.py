"""Source extraction: import references and function declarations per file.

Two implementations sit behind one interface:

    TreeSitterExtractor  walks a tree-sitter syntax tree (structured mode)
    NullExtractor        extracts nothing (fallback mode)

``parse()`` returns None whenever no syntax tree is available for a file,
whether because tree-sitter is missing, the grammar is not installed, or
parsing raised. Callers then switch to their own text heuristics.
``extract()`` is the same call with parse failures raised as ParsingError,
for callers that skip unparsable files instead.

Usage:
    extractor = create_extractor()
    imports = extractor.extract_imports(Path("src/app.ts"))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from ..exceptions import ParsingError
from ..file_ops import read_text
from ..logging_config import get_logger
from .languages import detect_language, grammar_for
from .treesitter_parser import TREE_SITTER_AVAILABLE, ParserRegistry, get_supported_languages

if TYPE_CHECKING:
    from .treesitter_parser import Node, Tree

logger = get_logger(__name__)


@dataclass(frozen=True)
class FunctionDecl:
    """A function or method declaration; ``line`` is the 1-based line of its name."""

    name: str
    line: int

    def to_dict(self) -> dict:
        return {"name": self.name, "line": self.line}


@dataclass(frozen=True)
class SourceSyntax:
    """Structured projection of one parsed file."""

    path: str
    language: str
    imports: tuple[str, ...]
    functions: tuple[FunctionDecl, ...]

    def find_function(self, name: str) -> Optional[FunctionDecl]:
        for fn in self.functions:
            if fn.name == name:
                return fn
        return None


class SourceExtractor(ABC):
    """Interface shared by the structured and fallback extractors."""

    structured: bool = False

    @abstractmethod
    def parse(self, filepath: Path, content: str) -> Optional[SourceSyntax]:
        """
        Build the structured projection of a file.

        Args:
            filepath: File the content came from (selects the grammar)
            content: File content

        Returns:
            SourceSyntax, or None when no syntax tree is available
        """

    def extract(self, filepath: Path, content: str) -> Optional[SourceSyntax]:
        """
        Like ``parse``, but a failed parse is reported instead of hidden.

        Raises:
            ParsingError: If a syntax tree was expected but could not be built
        """
        return self.parse(filepath, content)

    def extract_imports(self, filepath: Path) -> list[str]:
        """
        Raw import identifiers in source order, duplicates kept.

        Raises:
            FileAccessError: If the file cannot be read
        """
        syntax = self.parse(filepath, read_text(filepath))
        return list(syntax.imports) if syntax else []

    def extract_functions(self, filepath: Path) -> list[FunctionDecl]:
        """
        Function and method declarations in source order.

        Raises:
            FileAccessError: If the file cannot be read
        """
        syntax = self.parse(filepath, read_text(filepath))
        return list(syntax.functions) if syntax else []


class NullExtractor(SourceExtractor):
    """Fallback extractor: never produces a syntax tree."""

    structured = False

    def parse(self, filepath: Path, content: str) -> Optional[SourceSyntax]:
        return None


class TreeSitterExtractor(SourceExtractor):
    """Structured extractor backed by tree-sitter grammars.

    Args:
        registry: Parser cache. Pass a fresh one per test to isolate state.
    """

    structured = True

    def __init__(self, registry: Optional[ParserRegistry] = None) -> None:
        self.registry = registry or ParserRegistry()

    def parse(self, filepath: Path, content: str) -> Optional[SourceSyntax]:
        try:
            return self.extract(filepath, content)
        except ParsingError as e:
            logger.debug(f"Parse error for {filepath}, using fallback: {e.reason}")
            return None

    def extract(self, filepath: Path, content: str) -> Optional[SourceSyntax]:
        grammar = grammar_for(filepath)
        if grammar is None:
            return None
        language = detect_language(filepath)

        tree = self._parse_tree(filepath, content, grammar, language)
        if tree is None:
            return None

        handlers = _HANDLERS.get(language)
        if handlers is None:
            return None
        import_handler, function_handler = handlers

        imports: list[str] = []
        functions: list[FunctionDecl] = []
        for node in _walk(tree.root_node):
            imports.extend(import_handler(node))
            fn = function_handler(node)
            if fn is not None:
                functions.append(fn)

        return SourceSyntax(
            path=str(filepath),
            language=language,
            imports=tuple(imports),
            functions=tuple(functions),
        )

    def _parse_tree(self, filepath: Path, content: str, grammar: str, language: str) -> Optional[Tree]:
        try:
            return self.registry.parse(content.encode("utf-8", errors="replace"), grammar)
        except Exception as e:
            raise ParsingError(filepath, language, str(e)) from e


def create_extractor(registry: Optional[ParserRegistry] = None) -> SourceExtractor:
    """Pick the structured extractor when tree-sitter and a grammar are installed."""
    if TREE_SITTER_AVAILABLE and get_supported_languages():
        logger.debug(f"Structured extraction enabled for: {', '.join(get_supported_languages())}")
        return TreeSitterExtractor(registry)
    logger.info("tree-sitter not available; import and function extraction disabled")
    return NullExtractor()


# ── Tree walking ───────────────────────────────────────────────────


def _walk(root: Node) -> Iterator[Node]:
    """Pre-order traversal in document order (iterative)."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _unquote(text: str) -> str:
    return text.replace('"', "").replace("'", "")


def _named(node: Node, field_name: str) -> Optional[FunctionDecl]:
    name_node = node.child_by_field_name(field_name)
    if name_node is None:
        return None
    return FunctionDecl(name=_text(name_node), line=name_node.start_point[0] + 1)


# ── Imports per language ───────────────────────────────────────────


def _js_imports(node: Node) -> list[str]:
    if node.type == "import_statement":
        source = node.child_by_field_name("source")
        if source is not None:
            return [_unquote(_text(source))]
    elif node.type == "call_expression":
        callee = node.child_by_field_name("function")
        if _text(callee) == "require":
            args = node.child_by_field_name("arguments")
            if args is not None and args.named_children:
                return [_unquote(_text(args.named_children[0]))]
    return []


def _python_imports(node: Node) -> list[str]:
    if node.type == "import_statement":
        found = []
        for name_node in node.children_by_field_name("name"):
            if name_node.type == "aliased_import":
                name_node = name_node.child_by_field_name("name") or name_node
            found.append(_text(name_node))
        return found
    if node.type == "import_from_statement":
        module = node.child_by_field_name("module_name")
        if module is not None:
            return [_text(module)]
    return []


def _java_imports(node: Node) -> list[str]:
    if node.type != "import_declaration":
        return []
    name_node = node.child_by_field_name("name")
    if name_node is None:
        for child in node.named_children:
            if child.type in ("scoped_identifier", "identifier"):
                name_node = child
                break
    return [_text(name_node)] if name_node is not None else []


def _go_imports(node: Node) -> list[str]:
    if node.type != "import_declaration":
        return []
    specs = []
    for child in node.named_children:
        if child.type == "import_spec":
            specs.append(child)
        elif child.type == "import_spec_list":
            specs.extend(c for c in child.named_children if c.type == "import_spec")
    found = []
    for spec in specs:
        path = spec.child_by_field_name("path")
        if path is not None:
            found.append(_unquote(_text(path)))
    return found


def _rust_imports(node: Node) -> list[str]:
    if node.type != "use_declaration":
        return []
    target = node.child_by_field_name("argument") or node.child_by_field_name("path")
    return [_text(target)] if target is not None else []


# ── Functions per language ─────────────────────────────────────────

_JS_FUNCTION_NODES = {"function_declaration", "generator_function_declaration", "method_definition"}
_JS_FUNCTION_VALUES = {"arrow_function", "function_expression", "function"}


def _js_function(node: Node) -> Optional[FunctionDecl]:
    if node.type in _JS_FUNCTION_NODES:
        return _named(node, "name")
    if node.type == "variable_declarator":
        value = node.child_by_field_name("value")
        if value is not None and value.type in _JS_FUNCTION_VALUES:
            return _named(node, "name")
    return None


def _kind_matcher(*kinds: str) -> Callable[[Node], Optional[FunctionDecl]]:
    kind_set = set(kinds)

    def match(node: Node) -> Optional[FunctionDecl]:
        if node.type in kind_set:
            return _named(node, "name")
        return None

    return match


_HANDLERS: dict[str, tuple[Callable[[Node], list[str]], Callable[[Node], Optional[FunctionDecl]]]] = {
    "JavaScript": (_js_imports, _js_function),
    "TypeScript": (_js_imports, _js_function),
    "Python": (_python_imports, _kind_matcher("function_definition")),
    "Java": (_java_imports, _kind_matcher("method_declaration", "constructor_declaration")),
    "Go": (_go_imports, _kind_matcher("function_declaration", "method_declaration")),
    "Rust": (_rust_imports, _kind_matcher("function_item")),
}
