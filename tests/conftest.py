"""Test configuration and fixtures for ls-option."""

from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional, Tuple

import pytest

from ls_option.file_system.base_file_system import BaseFileSystem


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


class FakeFileSystem(BaseFileSystem):
    """In-memory filesystem for exercising failure paths.

    ``entries`` maps absolute POSIX paths to one of ``"file"``, ``"dir"``,
    ``"other"`` or ``"dangling"`` (listed by its parent but reported as absent).
    ``errors`` maps ``(operation, path)`` to the OSError that operation raises.
    """

    def __init__(self, entries: Dict[str, str], errors: Optional[Dict[Tuple[str, str], OSError]] = None) -> None:
        self.entries = {str(PurePosixPath(path)): kind for path, kind in entries.items()}
        self.errors = errors or {}
        self.calls: List[Tuple[str, str]] = []

    def _record(self, operation: str, path: Path) -> str:
        key = str(path)
        self.calls.append((operation, key))
        error = self.errors.get((operation, key))
        if error is not None:
            raise error
        return key

    def exists(self, path: Path) -> bool:
        key = self._record("exists", path)
        return key in self.entries and self.entries[key] != "dangling"

    def is_file(self, path: Path) -> bool:
        return self.entries.get(self._record("is_file", path)) == "file"

    def is_dir(self, path: Path) -> bool:
        return self.entries.get(self._record("is_dir", path)) == "dir"

    def list_children(self, path: Path) -> List[Path]:
        key = self._record("list_children", path)
        children = [Path(child) for child in self.entries if str(PurePosixPath(child).parent) == key and child != key]
        return sorted(children)

    def canonicalize(self, path: Path) -> Path:
        return Path(self._record("canonicalize", path))


@pytest.fixture
def fake_fs():
    """Factory for in-memory filesystems."""
    return FakeFileSystem


@pytest.fixture
def sample_tree(tmp_path):
    """Create the reference tree used throughout the listing tests.

    root/
    ├── .secret
    ├── a.txt
    └── sub/
        └── b.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / ".secret").write_text("s")
    (root / "sub").mkdir()
    (root / "sub" / "b.txt").write_text("b")
    return root.resolve()


@pytest.fixture
def deep_tree(tmp_path):
    """Create a tree four directory levels deep with a file at every level.

    deep/
    ├── f0.py
    ├── .hidden/
    │   └── h1.py
    └── l1/
        ├── f1.py
        └── l2/
            ├── f2.md
            └── l3/
                ├── f3.py
                └── l4/
                    └── f4.py
    """
    root = tmp_path / "deep"
    current = root
    current.mkdir()
    (current / "f0.py").touch()
    for level in range(1, 5):
        current = current / f"l{level}"
        current.mkdir()
        extension = "md" if level == 2 else "py"
        (current / f"f{level}.{extension}").touch()
    (root / ".hidden").mkdir()
    (root / ".hidden" / "h1.py").touch()
    return root.resolve()
