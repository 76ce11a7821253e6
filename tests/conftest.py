"""Shared test fixtures for codescope tests."""

import os
from pathlib import Path
from typing import Optional

import pytest

from codescope.config import AnalysisConfig
from codescope.scanning.extractor import FunctionDecl, SourceExtractor, SourceSyntax
from codescope.scanning.languages import detect_language


def write_files(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under root and return root."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


class StubExtractor(SourceExtractor):
    """Structured extractor answering from fixed tables keyed by file name."""

    structured = True

    def __init__(
        self,
        imports: Optional[dict[str, list[str]]] = None,
        functions: Optional[dict[str, list[FunctionDecl]]] = None,
    ):
        self.imports = imports or {}
        self.functions = functions or {}

    def parse(self, filepath: Path, content: str) -> Optional[SourceSyntax]:
        name = Path(filepath).name
        return SourceSyntax(
            path=str(filepath),
            language=detect_language(filepath),
            imports=tuple(self.imports.get(name, [])),
            functions=tuple(self.functions.get(name, [])),
        )


@pytest.fixture
def make_project(tmp_path):
    """Factory writing a sample project into tmp_path."""

    def _make(files: dict[str, str]) -> Path:
        return write_files(tmp_path, files)

    return _make


@pytest.fixture
def config():
    """Default configuration, isolated from user and project TOML files."""
    return AnalysisConfig()


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path_factory, monkeypatch):
    """Keep ~/.codescope.toml and CODESCOPE_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    for key in list(os.environ):
        if key.startswith("CODESCOPE_"):
            monkeypatch.delenv(key)
