"""Filesystem access backed by the operating system."""

import os
import stat
from pathlib import Path
from typing import List

from .base_file_system import BaseFileSystem


class LocalFileSystem(BaseFileSystem):
    """Filesystem implementation using ``os`` and ``pathlib``.

    Type checks go through ``os.stat`` rather than ``Path.is_file``/``Path.is_dir``
    because the pathlib helpers turn some errors into a plain False, which would
    hide unreadable entries from the listing instead of reporting them.

    Children are returned sorted by name. ``os.scandir`` order depends on the
    filesystem, and sorting keeps repeated listings identical.

    Example:
        >>> fs = LocalFileSystem()
        >>> fs.exists(Path("/definitely/does/not/exist"))
        False
        >>> fs.is_dir(Path("/"))
        True
    """

    def exists(self, path: Path) -> bool:
        try:
            os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

    def is_file(self, path: Path) -> bool:
        return stat.S_ISREG(os.stat(path).st_mode)

    def is_dir(self, path: Path) -> bool:
        return stat.S_ISDIR(os.stat(path).st_mode)

    def list_children(self, path: Path) -> List[Path]:
        # The scandir handle is closed before any child is examined
        with os.scandir(path) as entries:
            names = sorted(entry.name for entry in entries)
        return [path / name for name in names]

    def canonicalize(self, path: Path) -> Path:
        return Path(path).resolve(strict=True)
