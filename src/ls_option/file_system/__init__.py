"""Filesystem access used by the listing engine."""

from .base_file_system import BaseFileSystem
from .local_file_system import LocalFileSystem

__all__ = [
    "BaseFileSystem",
    "LocalFileSystem",
]
