"""Tech-stack detection from marker files in the project root.

Only existence checks and manifest lookups; nothing is installed, fetched
or version-resolved.
"""

import json
from pathlib import Path

from ..exceptions import FileAccessError
from ..file_ops import read_text, require_path
from ..logging_config import get_logger
from .models import TechStack

logger = get_logger(__name__)

# package.json dependency key -> framework
NPM_FRAMEWORKS = {
    "react": "React",
    "vue": "Vue",
    "angular": "Angular",
    "express": "Express",
    "next": "Next.js",
    "@nestjs/core": "NestJS",
}

NPM_TEST_FRAMEWORKS = {
    "jest": "Jest",
    "mocha": "Mocha",
    "vitest": "Vitest",
}

# substring of a Python manifest (lower-cased) -> framework
PYTHON_FRAMEWORKS = {
    "django": "Django",
    "flask": "Flask",
    "fastapi": "FastAPI",
}

PYTHON_TEST_FRAMEWORKS = {
    "pytest": "pytest",
}

_PYTHON_MANIFESTS = ("requirements.txt", "pyproject.toml")


class _OrderedSet:
    """Insertion-ordered string set."""

    def __init__(self) -> None:
        self._items: dict[str, None] = {}

    def add(self, item: str) -> None:
        self._items.setdefault(item, None)

    def to_list(self) -> list[str]:
        return list(self._items)


class TechStackDetector:
    def detect(self, root: "Path | str") -> TechStack:
        """
        Detect languages, frameworks and tooling of the project at root.

        Raises:
            PathNotFoundError: If root does not exist
        """
        root_path = require_path(root)

        languages = _OrderedSet()
        frameworks = _OrderedSet()
        package_managers = _OrderedSet()
        build_tools = _OrderedSet()
        test_frameworks = _OrderedSet()

        if (root_path / "package.json").exists():
            package_managers.add("npm")
            languages.add("JavaScript")
            languages.add("TypeScript")
            deps = _npm_dependencies(root_path / "package.json")
            for key, name in NPM_FRAMEWORKS.items():
                if deps.get(key):
                    frameworks.add(name)
            for key, name in NPM_TEST_FRAMEWORKS.items():
                if deps.get(key):
                    test_frameworks.add(name)

        if (root_path / "yarn.lock").exists():
            package_managers.add("Yarn")
        if (root_path / "pnpm-lock.yaml").exists():
            package_managers.add("pnpm")

        manifests = [root_path / name for name in _PYTHON_MANIFESTS if (root_path / name).exists()]
        if manifests:
            package_managers.add("pip")
            languages.add("Python")
            text = "\n".join(_read_manifest(path) for path in manifests).lower()
            for needle, name in PYTHON_FRAMEWORKS.items():
                if needle in text:
                    frameworks.add(name)
            for needle, name in PYTHON_TEST_FRAMEWORKS.items():
                if needle in text:
                    test_frameworks.add(name)

        if (root_path / "pom.xml").exists():
            package_managers.add("Maven")
            build_tools.add("Maven")
            languages.add("Java")

        if (root_path / "build.gradle").exists():
            package_managers.add("Gradle")
            build_tools.add("Gradle")
            languages.add("Java")

        if (root_path / "go.mod").exists():
            package_managers.add("go mod")
            languages.add("Go")

        if (root_path / "Cargo.toml").exists():
            package_managers.add("Cargo")
            languages.add("Rust")

        if (root_path / "webpack.config.js").exists():
            build_tools.add("Webpack")
        if (root_path / "vite.config.js").exists() or (root_path / "vite.config.ts").exists():
            build_tools.add("Vite")
        if (root_path / "tsconfig.json").exists():
            build_tools.add("TypeScript Compiler")

        return TechStack(
            languages=languages.to_list(),
            frameworks=frameworks.to_list(),
            package_managers=package_managers.to_list(),
            build_tools=build_tools.to_list(),
            test_frameworks=test_frameworks.to_list(),
        )


def _npm_dependencies(manifest: Path) -> dict:
    """Merged dependencies and devDependencies; {} when unreadable or malformed."""
    try:
        data = json.loads(read_text(manifest))
    except (FileAccessError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable {manifest}: {e}")
        return {}
    if not isinstance(data, dict):
        return {}

    deps: dict = {}
    for section in ("dependencies", "devDependencies"):
        value = data.get(section)
        if isinstance(value, dict):
            deps.update(value)
    return deps


def _read_manifest(path: Path) -> str:
    try:
        return read_text(path)
    except FileAccessError as e:
        logger.warning(f"Ignoring unreadable {path}: {e.reason}")
        return ""
