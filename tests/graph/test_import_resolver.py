"""Tests for import identifier resolution."""

from codescope.graph.resolver import ImportResolver

KEYS = [
    "src/app.ts",
    "src/utils.ts",
    "src/components/index.tsx",
    "pkg/__init__.py",
    "pkg/models.py",
    "pkg/sub/service.py",
    "src/mylib/core.py",
]


class TestScriptImports:
    """Relative JS/TS specifiers."""

    def test_extension_probing(self):
        """'./utils' resolves to utils.ts next to the importer."""
        assert ImportResolver(KEYS).resolve("./utils", "src/app.ts") == "src/utils.ts"

    def test_index_fallback(self):
        """A directory import resolves to its index file."""
        assert ImportResolver(KEYS).resolve("./components", "src/app.ts") == "src/components/index.tsx"

    def test_parent_directory(self):
        """'../app' climbs out of the importer's directory."""
        resolver = ImportResolver(KEYS)
        assert resolver.resolve("../app", "src/components/index.tsx") == "src/app.ts"

    def test_packages_stay_raw(self):
        """Bare specifiers are left unchanged."""
        assert ImportResolver(KEYS).resolve("react", "src/app.ts") == "react"
        assert ImportResolver(KEYS).resolve("./missing", "src/app.ts") == "./missing"


class TestPythonImports:
    """Dotted and relative Python imports."""

    def test_absolute_dotted(self):
        """'pkg.models' maps to pkg/models.py, 'pkg' to its __init__."""
        resolver = ImportResolver(KEYS)
        assert resolver.resolve("pkg.models", "pkg/sub/service.py") == "pkg/models.py"
        assert resolver.resolve("pkg", "pkg/sub/service.py") == "pkg/__init__.py"

    def test_src_prefix_dropped(self):
        """Modules under src/ resolve without the src prefix."""
        assert ImportResolver(KEYS).resolve("mylib.core", "pkg/models.py") == "src/mylib/core.py"

    def test_relative(self):
        """'..models' climbs one package."""
        resolver = ImportResolver(KEYS)
        assert resolver.resolve("..models", "pkg/sub/service.py") == "pkg/models.py"
        assert resolver.resolve(".", "pkg/models.py") == "pkg/__init__.py"

    def test_stdlib_stays_raw(self):
        """Unknown modules are left unchanged."""
        assert ImportResolver(KEYS).resolve("os", "pkg/models.py") == "os"

    def test_exact_key_passes_through(self):
        """An identifier equal to a key is kept."""
        assert ImportResolver(KEYS).resolve("pkg/models.py", "src/app.ts") == "pkg/models.py"
