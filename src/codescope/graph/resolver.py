"""Map raw import identifiers to graph node keys.

Only used when ``AnalysisConfig.resolve_imports`` is on. Identifiers that
cannot be matched to a project file are returned unchanged.
"""

import posixpath
from collections.abc import Iterable
from typing import Optional

_SCRIPT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")


class ImportResolver:
    """Resolves imports against a fixed set of project-relative keys."""

    def __init__(self, node_keys: Iterable[str]):
        self.node_keys = set(node_keys)
        self.module_index = _build_module_index(self.node_keys)

    def resolve(self, identifier: str, source_key: str) -> str:
        """Node key for ``identifier`` imported from ``source_key``, or the identifier itself."""
        if identifier in self.node_keys:
            return identifier

        if identifier.startswith("./") or identifier.startswith("../"):
            resolved = self._resolve_script_path(identifier, source_key)
        elif source_key.endswith(".py"):
            resolved = self._resolve_python(identifier, source_key)
        else:
            resolved = None

        return resolved if resolved is not None else identifier

    def _resolve_script_path(self, identifier: str, source_key: str) -> Optional[str]:
        """Relative JS/TS path with extension probing and index fallback."""
        base = posixpath.normpath(posixpath.join(posixpath.dirname(source_key), identifier))
        candidates = [base]
        candidates.extend(base + ext for ext in _SCRIPT_EXTENSIONS)
        candidates.extend(posixpath.join(base, "index" + ext) for ext in _SCRIPT_EXTENSIONS)
        for candidate in candidates:
            if candidate in self.node_keys:
                return candidate
        return None

    def _resolve_python(self, identifier: str, source_key: str) -> Optional[str]:
        if identifier.startswith("."):
            return self._resolve_relative_module(identifier, source_key)

        if identifier in self.module_index:
            return self.module_index[identifier]

        # "pkg.sub.mod" -> "sub.mod" -> "mod"
        parts = identifier.split(".")
        for i in range(1, len(parts)):
            suffix = ".".join(parts[i:])
            if suffix in self.module_index:
                return self.module_index[suffix]
        return None

    def _resolve_relative_module(self, identifier: str, source_key: str) -> Optional[str]:
        """Python relative import like ``..models`` or ``.base``."""
        dot_count = len(identifier) - len(identifier.lstrip("."))
        module_part = identifier[dot_count:]

        source_dir = posixpath.dirname(source_key)
        # a single dot is the current package
        for _ in range(dot_count - 1):
            source_dir = posixpath.dirname(source_dir)

        if module_part:
            module_path = posixpath.join(source_dir, module_part.replace(".", "/"))
            candidates = [module_path + ".py", posixpath.join(module_path, "__init__.py")]
        else:
            candidates = [posixpath.join(source_dir, "__init__.py")]

        for candidate in candidates:
            if candidate in self.node_keys:
                return candidate
        return None


def _build_module_index(node_keys: Iterable[str]) -> dict[str, str]:
    """Dotted module name -> key for every Python file, with and without a ``src.`` prefix."""
    index: dict[str, str] = {}
    for key in node_keys:
        if not key.endswith(".py"):
            continue
        dotted = key[: -len(".py")].replace("/", ".")
        if dotted.endswith(".__init__"):
            dotted = dotted[: -len(".__init__")]
        index[dotted] = key
        if dotted.startswith("src."):
            index[dotted[len("src.") :]] = key
    return index
